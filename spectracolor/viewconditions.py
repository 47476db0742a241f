"""Viewing conditions for colour appearance models (CIECAM16)."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["ViewConditions", "TM30VC", "CIE_HOME_DISPLAY"]


@dataclass(frozen=True)
class ViewConditions:
    """Surround and adaptation parameters of a colour appearance model.

    ``la`` is the adaptation luminance in cd/m², ``yb`` the relative background
    luminance, and ``dopt`` an optional fixed degree of adaptation; when it is
    omitted, formula 4.3 of CIE 248:2022 is used.
    """

    yb: float = 20.0
    f: float = 1.0
    nc: float = 1.0
    c: float = 0.69
    la: float = 100.0
    dopt: float | None = None

    def k(self) -> float:
        """Luminance level adaptation helper factor k."""
        return 1.0 / (5.0 * self.la + 1.0)

    def f_l(self) -> float:
        """Luminance level adaptation factor F_L."""
        k4 = self.k() ** 4
        return k4 * self.la + (1.0 - k4) ** 2 / 10.0 * (5.0 * self.la) ** (1.0 / 3.0)

    def dd(self) -> float:
        """Degree of adaptation D, clamped to the range 0..1."""
        if self.dopt is not None:
            d = self.dopt
        else:
            d = self.f * (1.0 - (1.0 / 3.6) * math.exp((-self.la - 42.0) / 92.0))
        return min(max(d, 0.0), 1.0)

    def lum_adapt(self, q: float, ql: float, qu: float) -> float:
        """Modified hyperbolic post-adaptation response compression (CIE 248:2022, 3.2).

        Below ``ql`` the response is linear, above ``qu`` it is extended with the
        slope at ``qu``. CIE recommends ``ql = 0.26`` and ``qu = max(150, Rwc, Gwc, Bwc)``.
        """
        fl = self.f_l()

        def compress(v: float) -> float:
            t = (fl * v / 100.0) ** 0.42
            return 400.0 * t / (27.13 + t)

        def slope(v: float) -> float:
            t = fl * v / 100.0
            num = 1.68 * 27.13 * fl * t**-0.58
            den = (27.13 + t**0.42) ** 2
            return num / den

        if q < ql:
            result = compress(ql) * q / ql
        elif q > qu:
            result = compress(qu) * slope(qu) * (q - qu)
        else:
            result = compress(q)
        return result + 0.1


TM30VC = ViewConditions(yb=20.0, c=0.69, nc=1.0, f=1.0, la=100.0, dopt=1.0)

#: Table 1, record 2, CIE 248:2022.
CIE_HOME_DISPLAY = ViewConditions(yb=20.0, c=0.59, nc=0.9, f=0.8, la=16.0, dopt=None)