"""Mapping of spectral data onto the standard 380–780 nm, 1 nm wavelength grid."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from typing import SupportsFloat

import numpy as np

from .physics import wavelength

__all__ = [
    "NS",
    "SpectrumError",
    "wavelengths",
    "linterp",
    "linterp_irr",
    "sprinterp",
    "sprague",
]

#: Number of values in a standard spectrum: 380 to 780 nm in 1 nm steps.
NS = 401

_GRID_NM = np.arange(380, 380 + NS)
_GRID_M = _GRID_NM * 1e-9
_SPRAGUE_OFFSETS = np.arange(-2, 4)


class SpectrumError(ValueError):
    """Raised when spectral data cannot be mapped onto the standard grid."""


def wavelengths(v: Iterable[SupportsFloat]) -> list[float]:
    """Convert wavelengths to meters; values above 1E-3 are taken to be nanometers."""
    return [wavelength(x) for x in v]


def _domain(wl: Sequence[SupportsFloat]) -> tuple[float, float]:
    if len(wl) != 2:
        raise SpectrumError("an equidistant domain needs exactly two wavelengths")
    lo, hi = wavelengths(sorted(float(x) for x in wl))
    if lo == hi:
        raise SpectrumError("wavelength domain has zero width")
    return lo, hi


def linterp(wl: Sequence[SupportsFloat], data: Sequence[float]) -> np.ndarray:
    """Linearly interpolate equidistant data over the domain ``wl`` (min, max).

    Values outside the domain take the nearest end value.
    """
    lo, hi = _domain(wl)
    values = np.asarray(data, dtype=float)
    if values.size == 0:
        raise SpectrumError("no spectral data given")
    dlm1 = values.size - 1
    if dlm1 == 0:
        return np.full(NS, values[0])

    t = np.clip((_GRID_M - lo) / (hi - lo), 0.0, 1.0)
    tf = t * dlm1
    j = np.trunc(tf).astype(int)
    f = tf - j
    jc = np.minimum(j, dlm1 - 1)
    interpolated = values[jc] * (1.0 - f) + values[jc + 1] * f
    return np.where(j >= dlm1, values[dlm1], interpolated)


def linterp_irr(wl: Sequence[float], data: Sequence[float]) -> np.ndarray:
    """Linearly interpolate data given at irregular wavelengths.

    Wavelengths are keyed at picometer precision; for duplicates the last value
    wins. Targets outside the data range take the nearest end value.
    """
    if len(wl) != len(data):
        raise SpectrumError("wavelengths and data differ in length")

    scale = 1e3 if any(v > 1e-3 for v in wl) else 1e12
    table: dict[int, float] = {}
    for w, d in zip(wl, data):
        table[max(int(w * scale), 0)] = float(d)
    keys = sorted(table)

    def value_at(k: int) -> float:
        pos = bisect_left(keys, k)
        prev_key = keys[pos - 1] if pos > 0 else None
        next_key = keys[pos] if pos < len(keys) else None
        if prev_key is not None and next_key is not None:
            if next_key == k:
                return table[next_key]
            f = (k - prev_key) / (next_key - prev_key)
            return table[prev_key] * (1.0 - f) + table[next_key] * f
        if next_key is not None:
            return table[next_key]
        if prev_key is not None:
            return table[prev_key]
        return float("nan")

    return np.array([value_at(int(nm) * 1000) for nm in _GRID_NM])


def sprinterp(wl: Sequence[SupportsFloat], data: Sequence[float]) -> np.ndarray:
    """Sprague interpolation of equidistant data over the domain ``wl`` (min, max).

    End values are used for extrapolation, as recommended by CIE 15:2004 7.2.2.1.
    At least seven data values are needed.
    """
    values = np.asarray(data, dtype=float)
    imax = values.size - 1
    if imax < 6:
        raise SpectrumError(f"provide at least 7 values, got {values.size}")
    lo, hi = _domain(wl)

    t = (_GRID_M - lo) / (hi - lo)
    th = np.clip(t * imax, 0.0, float(imax))
    j = np.trunc(th).astype(int)
    h = th - j
    indices = np.clip(j[:, None] + _SPRAGUE_OFFSETS, 0, imax)
    window = values[indices]
    return sprague(h, window.T)


def sprague(h, v):
    """Evaluate the Sprague polynomial at fraction ``h`` between ``v[2]`` and ``v[3]``.

    ``v`` holds six consecutive data values; scalars and numpy arrays both work.
    """
    v0, v1, v2, v3, v4, v5 = v
    coefficients = (
        v2,
        (v0 - 8.0 * v1 + 8.0 * v3 - v4) / 12.0,
        (-v0 + 16.0 * v1 - 30.0 * v2 + 16.0 * v3 - v4) / 24.0,
        (-9.0 * v0 + 39.0 * v1 - 70.0 * v2 + 66.0 * v3 - 33.0 * v4 + 7.0 * v5) / 24.0,
        (13.0 * v0 - 64.0 * v1 + 126.0 * v2 - 124.0 * v3 + 61.0 * v4 - 12.0 * v5) / 24.0,
        (-5.0 * v0 + 25.0 * v1 - 50.0 * v2 + 50.0 * v3 - 25.0 * v4 + 5.0 * v5) / 24.0,
    )
    result = 0.0
    for c in reversed(coefficients):
        result = result * h + c
    return result