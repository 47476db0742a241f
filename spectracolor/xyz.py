"""CIE XYZ tristimulus values for a reference white and an optional stimulus."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

__all__ = ["XYZError", "Observer", "XYZ", "XYZ_D65", "XYZ_D65WHITE"]

Vec3 = Tuple[float, float, float]


class XYZError(ValueError):
    """Raised when tristimulus values cannot be created or combined."""


class Observer(Enum):
    """Identifier of the colorimetric standard observer the values belong to."""

    STD1931 = "CIE 1931"
    STD1964 = "CIE 1964"
    STD2015 = "CIE 2015"
    STD2015_10 = "CIE 2015 10"

    @classmethod
    def default(cls) -> Observer:
        return cls.STD1931


def _vec3(values: Iterable[float]) -> Vec3:
    x, y, z = (float(v) for v in values)
    return (x, y, z)


def _scale(v: Vec3, s: float) -> Vec3:
    return (v[0] * s, v[1] * s, v[2] * s)


def _add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _close(a: Vec3, b: Vec3, epsilon: float) -> bool:
    return all(abs(p - q) <= epsilon for p, q in zip(a, b))


@dataclass(frozen=True)
class XYZ:
    """Tristimulus values of a reference white ``xyzn``, and optionally of a stimulus ``xyz``.

    Without ``xyz`` the values describe an illuminant; with it, a colour seen
    under that illuminant.
    """

    xyzn: Vec3
    xyz: Optional[Vec3] = None
    observer: Observer = Observer.STD1931

    def __post_init__(self) -> None:
        object.__setattr__(self, "xyzn", _vec3(self.xyzn))
        if self.xyz is not None:
            object.__setattr__(self, "xyz", _vec3(self.xyz))

    @classmethod
    def from_chromaticity(
        cls,
        x: float,
        y: float,
        l: Optional[float] = None,
        observer: Optional[Observer] = None,
    ) -> XYZ:
        """Illuminant tristimulus values from chromaticity (x, y) and luminous value ``l`` (default 100)."""
        l = 100.0 if l is None else float(l)
        observer = observer or Observer.default()
        if x + y >= 1.0:
            raise XYZError("invalid chromaticity values: x + y must be less than 1")
        if y == 0.0:
            raise XYZError("invalid chromaticity values: y must not be zero")
        s = l / y
        return cls((x * s, l, (1.0 - x - y) * s), None, observer)

    @classmethod
    def from_luv60(
        cls,
        u: float,
        v: float,
        l: Optional[float] = None,
        observer: Optional[Observer] = None,
    ) -> XYZ:
        """Illuminant tristimulus values from CIE 1960 UCS (u, v) coordinates."""
        den = 2.0 * u - 8.0 * v + 4.0
        if den == 0.0:
            raise XYZError("invalid CIE 1960 uv coordinates")
        return cls.from_chromaticity(3.0 * u / den, 2.0 * v / den, l, observer)

    def try_add(self, other: XYZ) -> XYZ:
        """Sum of two illuminant values of the same observer, without stimulus values."""
        if self.observer != other.observer:
            raise XYZError("tristimulus values require the same observer")
        if self.xyz is not None or other.xyz is not None:
            raise XYZError("no reference white allowed in addition")
        return XYZ(_add(self.xyzn, other.xyzn), None, self.observer)

    def values(self) -> Vec3:
        """Stimulus values if present, else the white's, scaled to a white luminous value of 100."""
        xyz = self.xyz if self.xyz is not None else self.xyzn
        return _scale(xyz, 100.0 / self.xyzn[1])

    def set_illuminance(self, illuminance: float) -> XYZ:
        """Scale white and stimulus together so that the white has luminous value ``illuminance``."""
        s = illuminance / self.xyzn[1]
        xyz = _scale(self.xyz, s) if self.xyz is not None else None
        return XYZ(_scale(self.xyzn, s), xyz, self.observer)

    def chromaticity(self) -> Tuple[float, float]:
        """The (x, y) chromaticity coordinates."""
        x, y, z = self.values()
        s = x + y + z
        return (x / s, y / s)

    def _active(self) -> Vec3:
        return self.xyz if self.xyz is not None else self.xyzn

    def luminous_value(self) -> float:
        """Luminous value Y of the stimulus if present, else of the white."""
        return self._active()[1]

    def uv60(self) -> Tuple[float, float]:
        """CIE 1960 UCS (u, v) coordinates."""
        x, y, z = self._active()
        den = x + 15.0 * y + 3.0 * z
        return (4.0 * x / den, 6.0 * y / den)

    def uvw64(self, xyz_ref: XYZ) -> Tuple[float, float, float]:
        """CIE 1964 (U*, V*, W*) coordinates relative to the reference ``xyz_ref``."""
        yy = self.luminous_value()
        ur, vr = xyz_ref.uv60()
        u, v = self.uv60()
        ww = 25.0 * yy ** (1.0 / 3.0) - 17.0
        return (13.0 * ww * (u - ur), 13.0 * ww * (v - vr), ww)

    def uvprime(self) -> Tuple[float, float]:
        """CIE 1976 (u', v') coordinates."""
        x, y, z = self._active()
        den = x + 15.0 * y + 3.0 * z
        return (4.0 * x / den, 9.0 * y / den)

    def uv_prime_distance(self, other: XYZ) -> float:
        """Euclidean distance between two points in the (u', v') diagram."""
        u1, v1 = self.uvprime()
        u2, v2 = other.uvprime()
        return math.hypot(v2 - v1, u2 - u1)

    def isclose(self, other: XYZ, epsilon: float = sys.float_info.epsilon) -> bool:
        """True if observers match and all values differ by at most ``epsilon``."""
        if self.observer != other.observer:
            return False
        if not _close(self.xyzn, other.xyzn, epsilon):
            return False
        if self.xyz is None and other.xyz is None:
            return True
        if self.xyz is None or other.xyz is None:
            return False
        return _close(self.xyz, other.xyz, epsilon)

    def __mul__(self, other: object) -> XYZ:
        if isinstance(other, (int, float)):
            s = float(other)
            xyz = _scale(self.xyz, s) if self.xyz is not None else None
            return XYZ(_scale(self.xyzn, s), xyz, self.observer)
        return NotImplemented

    __rmul__ = __mul__

    def __add__(self, other: object) -> XYZ:
        """Add tristimulus values.

        If only one side has stimulus values, they are added to the other
        side's white and the result is a plain illuminant value.
        """
        if not isinstance(other, XYZ):
            return NotImplemented
        if self.observer != other.observer:
            raise XYZError("cannot add XYZ values for different observers")
        if self.xyz is None and other.xyz is None:
            return XYZ(_add(self.xyzn, other.xyzn), None, self.observer)
        if self.xyz is not None and other.xyz is not None:
            return XYZ(_add(self.xyzn, other.xyzn), _add(self.xyz, other.xyz), self.observer)
        if other.xyz is not None:
            return XYZ(_add(other.xyz, self.xyzn), None, self.observer)
        return XYZ(_add(self.xyz, other.xyzn), None, self.observer)  # type: ignore[arg-type]


_D65A = (95.04, 100.0, 108.86)

XYZ_D65 = XYZ(_D65A, None, Observer.STD1931)
XYZ_D65WHITE = XYZ(_D65A, _D65A, Observer.STD1931)