"""Spectral colorimetry: physics helpers, spectral interpolation, spectra, CIE XYZ values and viewing conditions."""

__version__ = "0.1.0"
__all__ = ["physics", "viewconditions", "interpolate", "spectrum", "xyz"]