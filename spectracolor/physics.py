"""Physical constants and radiometric functions: Planck's law, Gaussians and LED models."""

from __future__ import annotations

import math
from typing import SupportsFloat

__all__ = [
    "C",
    "KB",
    "H",
    "C1",
    "C2",
    "C2_NBS_1931",
    "C2_IPTS_1948",
    "C2_ITS_1968",
    "FWHM",
    "SIGMA",
    "planck_c2",
    "planck_slope_c2",
    "planck_curvature_c2",
    "planck",
    "planck_slope",
    "stefan_boltzmann",
    "led_ohno",
    "sigma_from_fwhm",
    "fwhm_from_sigma",
    "gaussian_peak_one",
    "gaussian_normalized",
    "wavelength",
    "to_wavelength",
]

#: Speed of light (m/s).
C = 299792458.0

#: Boltzmann constant (m² kg s⁻² K⁻¹).
KB = 1.3806485279e-23

#: Planck constant (m² kg / s).
H = 6.6260700408181e-34

#: First radiation constant (W m²).
C1 = 2.0 * math.pi * H * C * C

#: Second radiation constant (m K).
C2 = H * C / KB
C2_NBS_1931 = 1.435e-2  # Illuminant A
C2_IPTS_1948 = 1.4380e-2  # Illuminant series D
C2_ITS_1968 = 1.4388e-2

#: Ratio of the full width at half maximum to the standard deviation of a Gaussian.
FWHM = math.sqrt(8.0 * math.log(2.0))

#: Stefan-Boltzmann constant (W m⁻² K⁻⁴).
SIGMA = 5.670_374_419_184e-8

# Ohno LED model scaling factors for power and width.
_LED_A = 1.11926158998
_LED_B = 1.08480681239


def planck_c2(l: float, t: float, c2: float) -> float:
    """Planck's law with an explicit second radiation constant.

    ``l`` is the wavelength in meters, ``t`` the absolute temperature in Kelvin
    and ``c2`` the second radiation constant in meter Kelvin.
    """
    return C1 / l**5 / (math.exp(c2 / (l * t)) - 1.0)


def planck_slope_c2(l: float, t: float, c2: float) -> float:
    """Temperature derivative of Planck's law, d(Planck)/dT."""
    c3 = C1 * c2 / t**2
    e = math.exp(c2 / (l * t))
    return c3 / l**6 * e / (e - 1.0) ** 2


def planck_curvature_c2(l: float, t: float, c2: float) -> float:
    """Second temperature derivative of Planck's law, d²(Planck)/dT²."""
    e = math.exp(c2 / (l * t))
    return planck_slope_c2(l, t, c2) / t * (c2 / (l * t) * (e + 1.0) / (e - 1.0) - 2.0)


def planck(l: float, t: float) -> float:
    """Planck's law using the exact second radiation constant."""
    return planck_c2(l, t, C2)


def planck_slope(l: float, t: float) -> float:
    """Temperature derivative of Planck's law using the exact second radiation constant."""
    return planck_slope_c2(l, t, C2)


def stefan_boltzmann(temperature: float) -> float:
    """Radiant emittance of a blackbody (W m⁻²) at an absolute temperature (K)."""
    return SIGMA * temperature**4


def led_ohno(wl: float, center: float, width: float) -> float:
    """Ohno's LED spectrum model, normalised to unit integral over wavelength."""
    width = _LED_B * width
    t = (wl - center) / width
    g = math.expm1(-(t**2)) + 1.0
    return (g + 2.0 * g**5) / (3.0 * _LED_A * width)


def sigma_from_fwhm(fwhm: float) -> float:
    """Standard deviation of a Gaussian with the given full width at half maximum."""
    return fwhm / FWHM


def fwhm_from_sigma(sigma: float) -> float:
    """Full width at half maximum of a Gaussian with the given standard deviation."""
    return sigma * FWHM


def gaussian_peak_one(x: float, mu: float, sigma: float) -> float:
    """Gaussian with a peak value of one."""
    exponent = -((x - mu) ** 2) / (2.0 * sigma**2)
    return math.exp(exponent)


def gaussian_normalized(x: float, mu: float, sigma: float) -> float:
    """Gaussian probability density, with unit integral."""
    exponent = -((x - mu) ** 2) / (2.0 * sigma**2)
    return 1.0 / (sigma * math.sqrt(2.0 * math.pi)) * math.exp(exponent)


def _to_float(value: SupportsFloat) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def wavelength(i: SupportsFloat) -> float:
    """Wavelength in meters; values above 1E-3 are taken to be nanometers."""
    f = _to_float(i)
    return f * 1e-9 if f > 1e-3 else f


def to_wavelength(x: SupportsFloat, xmin: SupportsFloat, xmax: SupportsFloat) -> float:
    """Map ``x`` in the domain ``xmin..xmax`` onto a wavelength from 380E-9 to 780E-9 meter."""
    lo = _to_float(xmin)
    hi = _to_float(xmax)
    f = (_to_float(x) - lo) / (hi - lo)
    return 380e-9 * (1.0 - f) + 780e-9 * f