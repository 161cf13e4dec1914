from __future__ import annotations
from dataclasses import dataclass, field
from typing import ClassVar, Dict, Tuple

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Illuminant:
    """
    A reference white that XYZ values are measured against.

    The white point is given as XYZ tristimulus values normalized to ``Y = 1``.
    Standard daylight illuminants are available as ``Illuminant.D50`` ... ``D75``.
    """
    name: str
    white_point: Tuple[float, float, float] = field(repr=False)

    D50: ClassVar[Illuminant]
    D55: ClassVar[Illuminant]
    D65: ClassVar[Illuminant]
    D75: ClassVar[Illuminant]
    _standard: ClassVar[Dict[str, Illuminant]]

    def __post_init__(self) -> None:
        if len(self.white_point) != 3:
            raise ValueError(f"white point needs 3 components, got {self.white_point!r}")
        object.__setattr__(self, "white_point", tuple(float(c) for c in self.white_point))

    @classmethod
    def custom(cls, x: float, y: float, z: float, name: str = "custom") -> Illuminant:
        return cls(name, (x, y, z))

    @classmethod
    def from_name(cls, name: str) -> Illuminant:
        try:
            return cls._standard[name.upper()]
        except KeyError:
            raise ValueError(
                f"Unknown illuminant {name!r}; expected one of {sorted(cls._standard)}"
            ) from None

    def white_point_array(self) -> NDArray[np.float64]:
        return np.array(self.white_point, dtype=np.float64)


Illuminant.D50 = Illuminant("D50", (0.96422, 1.0, 0.82521))
Illuminant.D55 = Illuminant("D55", (0.95682, 1.0, 0.92149))
Illuminant.D65 = Illuminant("D65", (0.95047, 1.0, 1.08883))
Illuminant.D75 = Illuminant("D75", (0.94972, 1.0, 1.22638))
Illuminant._standard = {
    ill.name: ill for ill in (Illuminant.D50, Illuminant.D55, Illuminant.D65, Illuminant.D75)
}
