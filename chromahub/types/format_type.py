# No dependencies
from enum import Enum


class FormatType(str, Enum):
    """The three numeric shapes a CSS number can take."""
    INT = "int"
    FLOAT = "float"
    PERCENTAGE = "percentage"

max_non_hue = {
    FormatType.INT: 255,
    FormatType.FLOAT: 1.0,
    FormatType.PERCENTAGE: 100,
}

HUE_360 = 360
