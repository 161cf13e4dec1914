from __future__ import annotations
from typing import ClassVar, Iterable, Tuple

from ..conversions.adaptation import bradford_adapt
from ..illuminants import Illuminant
from ..types.color_types import Bounds, ColorMode
from .color_base import HUB_ILLUMINANT, ColorBase, _channel


class XYZColor(ColorBase):
    """
    CIE 1931 XYZ tristimulus values relative to a reference white.

    This is the hub every other color type converts through. An XYZ value
    only means something together with its illuminant; moving to another
    illuminant is done with :meth:`color_adapt`.
    """
    __slots__ = ('_illuminant',)

    mode:     ClassVar[ColorMode] = "xyz"
    channels: ClassVar[Tuple[str, str, str]] = ("x", "y", "z")
    # white points have Y = 1; Z of the bluest standard white is about 1.23
    bounds:   ClassVar[Bounds] = ((0.0, 1.0), (0.0, 1.0), (0.0, 1.25))

    x = _channel(0, "X tristimulus value")
    y = _channel(1, "Y tristimulus value (relative luminance)")
    z = _channel(2, "Z tristimulus value")

    def __init__(self, value: Iterable[float] | ColorBase, illuminant: Illuminant = HUB_ILLUMINANT) -> None:
        if isinstance(value, ColorBase):
            value = value.to_xyz(illuminant).value
        self._illuminant = illuminant
        super().__init__(value)

    @property
    def illuminant(self) -> Illuminant:
        return self._illuminant

    def color_adapt(self, illuminant: Illuminant) -> XYZColor:
        """The same color re-expressed relative to ``illuminant`` (Bradford transform)."""
        if illuminant == self._illuminant:
            return XYZColor(self._value, illuminant)
        adapted = bradford_adapt(self._value, self._illuminant, illuminant)
        return XYZColor(adapted, illuminant)

    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        return self.color_adapt(illuminant)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> XYZColor:
        return XYZColor(xyz.value, xyz.illuminant)

    def convert(self, to_type):
        if to_type is XYZColor:
            return XYZColor.from_xyz(self)
        return to_type.from_xyz(self)

    def _values_of(self, other: ColorBase) -> Tuple[float, float, float]:
        return other.to_xyz(self._illuminant).value

    def approx_equal(self, other: XYZColor, tol: float = 1e-10) -> bool:
        """Compare component-wise after adapting ``other`` to this color's illuminant."""
        other_vals = other.color_adapt(self._illuminant).value
        return all(abs(a - b) <= tol for a, b in zip(self._value, other_vals))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, XYZColor):
            return NotImplemented
        return self._value == other._value and self._illuminant == other._illuminant

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value, self._illuminant))

    def __repr__(self) -> str:
        return f"XYZColor(x={self.x!r}, y={self.y!r}, z={self.z!r}, illuminant={self._illuminant.name})"
