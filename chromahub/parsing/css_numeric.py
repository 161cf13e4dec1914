"""
Reading single CSS numbers.

A CSS number here is one of three shapes, each with an optional leading sign:

- integer: ``104``, ``-7``
- decimal: ``0.5``, ``.48235``, ``+10.25`` (digits are required after the point)
- percentage: ``48%`` (integral only; ``45.5%`` is rejected)

Clamping the result into a usable range is left to the caller.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Union

from ..exceptions import InvalidNumericCharacters, InvalidNumericSyntax
from ..types.format_type import FormatType

ALLOWED_CHARACTERS = frozenset("0123456789.+-%")

_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


@dataclass(frozen=True)
class CSSNumeric:
    """A parsed CSS number tagged with its shape."""
    kind: FormatType
    value: Union[int, float]

    @classmethod
    def integer(cls, value: int) -> CSSNumeric:
        return cls(FormatType.INT, int(value))

    @classmethod
    def float(cls, value: float) -> CSSNumeric:
        return cls(FormatType.FLOAT, float(value))

    @classmethod
    def percentage(cls, value: int) -> CSSNumeric:
        return cls(FormatType.PERCENTAGE, int(value))


class _NumericReader:
    """Recursive-descent reader over one token; every method consumes from ``pos``."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def number(self) -> CSSNumeric:
        sign = self.sign()
        digits = self.digits()
        if self.peek() == "%":
            return self.percentage(sign, digits)
        if self.peek() == ".":
            return self.decimal(sign, digits)
        if not digits or not self.at_end():
            raise InvalidNumericSyntax(f"Malformed number: {self.text!r}")
        return CSSNumeric.integer(_checked_int(sign + digits, self.text))

    def sign(self) -> str:
        if self.peek() in ("+", "-"):
            self.pos += 1
            return self.text[self.pos - 1]
        return ""

    def digits(self) -> str:
        start = self.pos
        while self.peek().isdigit():
            self.pos += 1
        return self.text[start:self.pos]

    def percentage(self, sign: str, digits: str) -> CSSNumeric:
        self.pos += 1  # '%'
        if not digits or not self.at_end():
            raise InvalidNumericSyntax(f"Malformed percentage: {self.text!r}")
        return CSSNumeric.percentage(_checked_int(sign + digits, self.text))

    def decimal(self, sign: str, whole: str) -> CSSNumeric:
        self.pos += 1  # '.'
        fraction = self.digits()
        if not fraction:
            raise InvalidNumericSyntax(f"Expected digits after decimal point: {self.text!r}")
        if not self.at_end():
            # a second '.', a '%' after a fraction, or a stray sign
            raise InvalidNumericSyntax(f"Malformed decimal: {self.text!r}")
        value = float(f"{sign}{whole or '0'}.{fraction}")
        if math.isinf(value):
            raise InvalidNumericSyntax(f"Number out of range: {self.text!r}")
        return CSSNumeric.float(value)


def _checked_int(literal: str, text: str) -> int:
    value = int(literal)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise InvalidNumericSyntax(f"Number out of 64-bit range: {text!r}")
    return value


def parse_css_number(text: str) -> CSSNumeric:
    """
    Parse one CSS number.

    Args:
        text: the token, already stripped of surrounding whitespace

    Returns:
        CSSNumeric tagged INT, FLOAT or PERCENTAGE

    Raises:
        InvalidNumericCharacters: a character outside ``0-9 . + - %`` is present
        InvalidNumericSyntax: the characters are legal but the shape is not
    """
    if any(c not in ALLOWED_CHARACTERS for c in text):
        raise InvalidNumericCharacters(f"Invalid characters in number: {text!r}")
    if not text:
        raise InvalidNumericSyntax("Empty number")
    return _NumericReader(text).number()
