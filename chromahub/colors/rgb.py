from __future__ import annotations
import warnings
from typing import Callable, ClassVar, Iterable, Tuple, Type, TypeVar

import numpy as np
from numpy import ndarray as NDArray

from ..consts import ADOBE_RGB_TRANSFORM, ROMM_RGB_TRANSFORM, STANDARD_RGB_TRANSFORM
from ..conversions import companding
from ..exceptions import GamutWarning
from ..illuminants import Illuminant
from ..parsing.css_color import parse_rgb_str
from ..types.color_types import Bounds, ColorMode, IntTriple
from ..types.format_type import FormatType, max_non_hue
from ..utils.num_utils import unit_to_byte
from .color_base import ColorBase, _channel
from .xyz import XYZColor

R = TypeVar("R", bound="RGBStandard")

# channels this far outside [0, 1] are treated as rounding noise, not out of gamut
GAMUT_TOLERANCE = 1e-9


class RGBStandard(ColorBase):
    """
    Shared plumbing for device RGB spaces.

    Channels are gamma-encoded floats nominally in ``[0, 1]``. A subclass names
    its white point, its transfer functions and how linear light maps to XYZ;
    the nonlinear step always happens outside the matrix.
    """
    __slots__ = ()

    channels: ClassVar[Tuple[str, str, str]] = ("r", "g", "b")
    bounds:   ClassVar[Bounds] = ((0.0, 1.0), (0.0, 1.0), (0.0, 1.0))
    native_illuminant: ClassVar[Illuminant]
    _decode: ClassVar[Callable]
    _encode: ClassVar[Callable]

    r = _channel(0, "Red, gamma-encoded")
    g = _channel(1, "Green, gamma-encoded")
    b = _channel(2, "Blue, gamma-encoded")

    @classmethod
    def _linear_to_xyz(cls, linear: NDArray) -> NDArray:
        raise NotImplementedError

    @classmethod
    def _xyz_to_linear(cls, xyz: NDArray) -> NDArray:
        raise NotImplementedError

    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        linear = type(self)._decode(np.array(self._value))
        native = XYZColor(self._linear_to_xyz(linear), self.native_illuminant)
        return native.color_adapt(illuminant)

    @classmethod
    def from_xyz(cls: Type[R], xyz: XYZColor) -> R:
        native = xyz.color_adapt(cls.native_illuminant)
        linear = cls._xyz_to_linear(np.array(native.value))
        return cls(cls._encode(linear))

    # ------------------ 8-BIT ------------------
    @classmethod
    def from_ints(cls: Type[R], value: Iterable[int]) -> R:
        """Build from 8-bit channels (``0..255``)."""
        maxval = max_non_hue[FormatType.INT]
        return cls(tuple(v / maxval for v in value))

    @property
    def int_value(self) -> IntTriple:
        """Channels as 8-bit integers, clamped. ``0.5`` maps to 127."""
        r, g, b = (unit_to_byte(v) for v in self._value)
        return r, g, b

    @property
    def int_r(self) -> int:
        return self.int_value[0]

    @property
    def int_g(self) -> int:
        return self.int_value[1]

    @property
    def int_b(self) -> int:
        return self.int_value[2]

    def to_hex(self) -> str:
        """``#RRGGBB`` for display. Out-of-gamut channels are clipped with a ``GamutWarning``."""
        if not all(-GAMUT_TOLERANCE <= v <= 1.0 + GAMUT_TOLERANCE for v in self._value):
            warnings.warn(
                f"{self!r} is outside the displayable gamut; channels were clipped",
                GamutWarning,
                stacklevel=2,
            )
        return "#{:02X}{:02X}{:02X}".format(*self.int_value)

    def __str__(self) -> str:
        return self.to_hex()


class RGBColor(RGBStandard):
    """
    sRGB, the RGB of web pages and most monitors (IEC 61966-2-1, D65 white).

    >>> RGBColor.from_str("rgb(125, 20%, 0.5)").int_value
    (125, 51, 127)
    """
    __slots__ = ()

    mode: ClassVar[ColorMode] = "rgb"
    native_illuminant: ClassVar[Illuminant] = Illuminant.D65
    _decode = staticmethod(companding.srgb_decode)
    _encode = staticmethod(companding.srgb_encode)

    @classmethod
    def _linear_to_xyz(cls, linear: NDArray) -> NDArray:
        return STANDARD_RGB_TRANSFORM.solve(linear)

    @classmethod
    def _xyz_to_linear(cls, xyz: NDArray) -> NDArray:
        return STANDARD_RGB_TRANSFORM.apply(xyz)

    @classmethod
    def from_str(cls, text: str) -> RGBColor:
        """Parse ``"rgb(r, g, b)"``; see :func:`chromahub.parsing.parse_rgb_str`."""
        return cls.from_ints(parse_rgb_str(text))


class AdobeRGBColor(RGBStandard):
    """Adobe RGB (1998): a wider gamut than sRGB, pure power-law gamma, D65 white."""
    __slots__ = ()

    mode: ClassVar[ColorMode] = "adobe_rgb"
    native_illuminant: ClassVar[Illuminant] = Illuminant.D65
    _decode = staticmethod(companding.adobe_decode)
    _encode = staticmethod(companding.adobe_encode)

    @classmethod
    def _linear_to_xyz(cls, linear: NDArray) -> NDArray:
        return ADOBE_RGB_TRANSFORM.solve(linear)

    @classmethod
    def _xyz_to_linear(cls, xyz: NDArray) -> NDArray:
        return ADOBE_RGB_TRANSFORM.apply(xyz)


class ROMMRGBColor(RGBStandard):
    """
    ROMM RGB (ProPhoto RGB): a very wide gamut for photo editing, D50 white.

    Its matrix is defined from RGB to XYZ, so here ``apply`` is the forward
    direction and ``solve`` the inverse, the opposite of the other two spaces.
    """
    __slots__ = ()

    mode: ClassVar[ColorMode] = "romm_rgb"
    native_illuminant: ClassVar[Illuminant] = Illuminant.D50
    _decode = staticmethod(companding.romm_decode)
    _encode = staticmethod(companding.romm_encode)

    @classmethod
    def _linear_to_xyz(cls, linear: NDArray) -> NDArray:
        return ROMM_RGB_TRANSFORM.apply(linear)

    @classmethod
    def _xyz_to_linear(cls, xyz: NDArray) -> NDArray:
        return ROMM_RGB_TRANSFORM.solve(xyz)


rgb_mode_to_class = {
    cls.mode: cls for cls in (RGBColor, AdobeRGBColor, ROMMRGBColor)
}
