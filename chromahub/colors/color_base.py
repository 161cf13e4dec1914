from __future__ import annotations
import math
from typing import TYPE_CHECKING, ClassVar, Iterable, Optional, Tuple, Type, TypeVar

from ..illuminants import Illuminant
from ..types.color_types import Bounds, ColorMode, Triple, is_hue_space
from ..types.format_type import HUE_360
from ..utils.num_utils import normalize_hue

if TYPE_CHECKING:
    from .xyz import XYZColor

C = TypeVar("C", bound="ColorBase")

# Illuminant every conversion between two color types passes through.
HUB_ILLUMINANT = Illuminant.D50


def _channel(index: int, doc: str) -> property:
    return property(lambda self: self._value[index], doc=doc)


class ColorBase:
    """
    A color as three floats in some color space.

    Every color type implements exactly two transforms, ``to_xyz`` and
    ``from_xyz``; any conversion between two types goes through
    :class:`~chromahub.colors.xyz.XYZColor`. Instances are immutable.

    Values are stored as given. ``bounds`` documents the meaningful range of
    each channel and is only enforced when ``clamped()`` is called.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    mode:      ClassVar[ColorMode]
    channels:  ClassVar[Tuple[str, str, str]]
    bounds:    ClassVar[Bounds]
    hue_index: ClassVar[Optional[int]] = None

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Iterable[float] | ColorBase) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            value = value.convert(type(self)).value

        components = tuple(float(v) for v in value)
        if len(components) != 3:
            raise ValueError(f"{self.mode} expects 3 components, got {len(components)}")
        self._value: Triple = components  # type: ignore[assignment]
        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ HUB TRANSFORMS ------------------
    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        """Express this color in XYZ relative to ``illuminant``."""
        raise NotImplementedError

    @classmethod
    def from_xyz(cls: Type[C], xyz: XYZColor) -> C:
        """Build this color type from an XYZ value under any illuminant."""
        raise NotImplementedError

    def convert(self, to_type: Type[C]) -> C:
        """Convert to another color type through the XYZ hub."""
        if type(self) is to_type:
            return to_type(self._value)
        return to_type.from_xyz(self.to_xyz(HUB_ILLUMINANT))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Triple:
        return self._value

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_hue_space(self.mode)

    # ------------------ COORDINATES ------------------
    @classmethod
    def from_coord(cls: Type[C], coord: Iterable[float]) -> C:
        return cls(coord)

    def to_coord(self) -> Triple:
        return self._value

    # ------------------ BOUNDS ------------------
    def in_bounds(self) -> bool:
        """True if every channel lies inside the range given by ``bounds``."""
        return all(lo <= v <= hi for v, (lo, hi) in zip(self._value, self.bounds))

    def clamped(self: C) -> C:
        """A copy with every channel clamped into ``bounds``; a hue channel is wrapped instead."""
        vals = []
        for i, (v, (lo, hi)) in enumerate(zip(self._value, self.bounds)):
            if i == self.hue_index:
                vals.append(normalize_hue(v))
            else:
                vals.append(max(lo, min(v, hi)))
        return type(self)(vals)

    def distance(self, other: ColorBase) -> float:
        """
        Euclidean distance in this color's space, each channel divided by the
        width of its bound. Hue differences go the short way around the circle.
        """
        other_vals = self._values_of(other)
        total = 0.0
        for i, (a, b, (lo, hi)) in enumerate(zip(self._value, other_vals, self.bounds)):
            diff = abs(a - b)
            if i == self.hue_index:
                diff %= HUE_360
                diff = min(diff, HUE_360 - diff)
            total += (diff / (hi - lo)) ** 2
        return math.sqrt(total)

    def _values_of(self, other: ColorBase) -> Triple:
        return other.convert(type(self)).value

    def is_close(self, other: ColorBase, tol: float = 1e-9) -> bool:
        return self.distance(other) <= tol

    # ------------------ DUNDER ------------------
    def __iter__(self):
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={v!r}" for name, v in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({fields})"
