"""Spectral distributions on the standard 380–780 nm, 1 nm wavelength grid."""

from __future__ import annotations

import math
import operator
from collections.abc import Iterable, Iterator, Sequence
from typing import SupportsFloat

import numpy as np

from .interpolate import NS, SpectrumError, linterp, linterp_irr, sprinterp
from .physics import gaussian_peak_one, sigma_from_fwhm

__all__ = ["NS", "Spectrum", "SpectrumError"]

_WL_MIN = 380
_WL_MAX = _WL_MIN + NS - 1


class Spectrum:
    """Spectral values from 380 to 780 nm in 1 nm steps, 401 values in total.

    Values are read and written by integer wavelength in nanometers:
    ``s[550]``. Reading outside 380..780 gives NaN; writing outside that range
    sets the nearest edge value.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Iterable[float] | None = None) -> None:
        if data is None:
            self._data = np.zeros(NS)
            return
        values = np.array(list(data) if not isinstance(data, np.ndarray) else data, dtype=float)
        if values.shape != (NS,):
            raise SpectrumError(f"spectral data must hold exactly {NS} values")
        self._data = values

    @classmethod
    def linear_interpolate(
        cls, wavelengths: Sequence[SupportsFloat], data: Sequence[float]
    ) -> Spectrum:
        """Map data onto the standard grid by linear interpolation.

        Two wavelengths give the limits of an equidistant domain for the data;
        three or more give the wavelength of each data value. Wavelengths may be
        in meters or nanometers. For duplicate wavelengths the last value wins.
        """
        if len(wavelengths) == 2:
            return cls(linterp(wavelengths, data))
        if len(wavelengths) >= 3:
            return cls(linterp_irr([float(w) for w in wavelengths], data))
        raise SpectrumError("provide two domain limits or at least three wavelengths")

    @classmethod
    def sprague_interpolate(
        cls, wavelengths: Sequence[SupportsFloat], data: Sequence[float]
    ) -> Spectrum:
        """Map equidistant data over the domain ``wavelengths`` (min, max) by Sprague interpolation."""
        return cls(sprinterp(wavelengths, data))

    def values(self) -> np.ndarray:
        """A copy of the 401 spectral values."""
        return self._data.copy()

    def mul(self, rhs: Spectrum) -> Spectrum:
        """Value-by-value product with another spectrum."""
        return Spectrum(self._data * rhs._data)

    def mul_f64(self, rhs: float) -> Spectrum:
        """Product with a scalar."""
        return Spectrum(self._data * float(rhs))

    def clamp(self, min_value: float, max_value: float) -> None:
        """Limit all values, in place, to the range ``min_value..max_value``."""
        np.clip(self._data, min_value, max_value, out=self._data)

    def smooth(self, fwhm: float) -> None:
        """Smooth the spectrum in place by convolution with a unit-area Gaussian of width ``fwhm``."""
        if fwhm < 1e-3:
            fwhm *= 1e6
        sigma = sigma_from_fwhm(fwhm)
        sd3 = math.floor(6.0 * sigma)
        kernel = np.array([gaussian_peak_one(float(i), 0.0, sigma) for i in range(-sd3, sd3 + 1)])
        kernel /= kernel.sum()
        full = np.convolve(self._data, kernel, mode="full")
        self._data = full[sd3 : sd3 + NS].copy()

    def __len__(self) -> int:
        return NS

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    def __getitem__(self, nm: int) -> float:
        i = operator.index(nm)
        if i < _WL_MIN or i > _WL_MAX:
            return math.nan
        return float(self._data[i - _WL_MIN])

    def __setitem__(self, nm: int, value: float) -> None:
        i = min(max(operator.index(nm), _WL_MIN), _WL_MAX)
        self._data[i - _WL_MIN] = float(value)

    def __mul__(self, other: object) -> Spectrum:
        if isinstance(other, Spectrum):
            return self.mul(other)
        if isinstance(other, (int, float)):
            return self.mul_f64(other)
        return NotImplemented

    def __rmul__(self, other: object) -> Spectrum:
        if isinstance(other, (int, float)):
            return self.mul_f64(other)
        return NotImplemented

    def __imul__(self, other: object) -> Spectrum:
        if isinstance(other, Spectrum):
            self._data *= other._data
        elif isinstance(other, (int, float)):
            self._data *= float(other)
        else:
            return NotImplemented
        return self

    def __truediv__(self, other: object) -> Spectrum:
        if isinstance(other, Spectrum):
            return Spectrum(self._data / other._data)
        return NotImplemented

    def __add__(self, other: object) -> Spectrum:
        if isinstance(other, Spectrum):
            return Spectrum(self._data + other._data)
        return NotImplemented

    def __radd__(self, other: object) -> Spectrum:
        # Lets the built-in sum() start from 0.
        if isinstance(other, (int, float)) and other == 0:
            return Spectrum(self._data)
        return NotImplemented

    def __iadd__(self, other: object) -> Spectrum:
        if isinstance(other, Spectrum):
            self._data += other._data
            return self
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Spectrum):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Spectrum(380nm={self._data[0]!r}, ..., 780nm={self._data[-1]!r})"