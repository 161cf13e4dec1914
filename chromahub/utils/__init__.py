from .num_utils import (
    clamp,
    normalize_hue,
    round_half_away,
    unit_to_byte,
)

__all__ = [
    "clamp",
    "normalize_hue",
    "round_half_away",
    "unit_to_byte",
]
