"""
Root conftest.py - Sets up Python path for tests.

This conftest is loaded by pytest before any test collection begins, so the
tests import the working-tree ``chromahub`` even without an installed copy.
"""
import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
