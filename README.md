# spectracolor

Spectral colorimetry in Python. Spectra are held on a fixed grid from
380 to 780 nm in 1 nm steps, 401 values in all. Colors are described by
CIE XYZ tristimulus values.

## Installation

```
pip install spectracolor
```

With the test dependencies:

```
pip install "spectracolor[test]"
```

## Modules

### `spectracolor.physics`

Constants and radiation functions.

- Constants: `C`, `KB`, `H`, `C1`, `C2`, `C2_NBS_1931`, `C2_IPTS_1948`,
  `C2_ITS_1968`, `FWHM` and `SIGMA`.
- Planck's law and its temperature derivatives: `planck`, `planck_slope`,
  `planck_c2`, `planck_slope_c2` and `planck_curvature_c2`. Wavelengths are
  given in meters and temperatures in Kelvin.
- The Stefan–Boltzmann law: `stefan_boltzmann`.
- Ohno's LED spectral model: `led_ohno`.
- Gaussian helpers: `gaussian_peak_one`, `gaussian_normalized`,
  `sigma_from_fwhm` and `fwhm_from_sigma`.
- Wavelength helpers:
  - `wavelength` reads any value above 1E-3 as nanometers and converts it to
    meters.
  - `to_wavelength` maps a value in the domain `xmin..xmax` onto 380E-9 to
    780E-9 meter.

### `spectracolor.interpolate`

Maps data onto the standard grid. `NS` is the number of grid points.

- `linterp`: linear interpolation of evenly spaced data over a `(min, max)`
  domain.
- `linterp_irr`: linear interpolation of data given at irregular wavelengths.
  When a wavelength appears more than once, the last value wins.
- `sprinterp` and `sprague`: Sprague interpolation of evenly spaced data. This
  needs at least seven values.
- `wavelengths`: converts a sequence of wavelengths to meters.
- Outside the data range, the nearest end value is used. Bad input raises
  `SpectrumError`, a subclass of `ValueError`.

### `spectracolor.spectrum`

The `Spectrum` class holds 401 values.

- Construction:
  - Pass 401 values to the constructor; with no values it holds all zeros.
  - `Spectrum.linear_interpolate` takes two domain limits or at least three
    wavelengths.
  - `Spectrum.sprague_interpolate` takes the limits of an evenly spaced domain.
- Indexing by integer wavelength in nanometers, as in `s[550]`.
  - Reading outside 380..780 returns NaN.
  - Writing outside 380..780 sets the nearest edge value.
- Arithmetic:
  - `+` and `+=`, which also lets `sum()` add up spectra.
  - Multiplication by another spectrum or by a number: `*`, `*=`, `mul` and
    `mul_f64`.
  - `/` by another spectrum.
- In-place operations:
  - `clamp(min_value, max_value)` limits the values.
  - `smooth(fwhm)` convolves with a Gaussian kernel whose area is one.
- `values()` returns a copy of the data as a numpy array.

### `spectracolor.xyz`

`XYZ` is a frozen dataclass with these fields:

- `xyzn`: the tristimulus values of a reference white.
- `xyz`: the values of a stimulus. This field is optional.
- `observer`: an `Observer` tag, one of `STD1931`, `STD1964`, `STD2015` or
  `STD2015_10`.

Construction and arithmetic:

- `XYZ.from_chromaticity` and `XYZ.from_luv60` build illuminant values from
  chromaticity coordinates.
- `try_add` adds two illuminant values of the same observer.
- `+` and `*` are supported.

Values and coordinates:

- `values` returns the values scaled to a white with a luminous value of 100.
- `set_illuminance` rescales the white and the stimulus together.
- `luminous_value` returns the luminous value Y.
- `chromaticity`, `uv60`, `uvprime`, `uvw64` and `uv_prime_distance` give
  coordinates in the CIE diagrams.

Comparison and constants:

- `isclose(other, epsilon)` compares two values with an absolute tolerance.
- `XYZ_D65` and `XYZ_D65WHITE` are fixed D65 reference values.
- Bad input raises `XYZError`, a subclass of `ValueError`.

### `spectracolor.viewconditions`

`ViewConditions` is a frozen dataclass with the viewing parameters `yb`, `f`,
`nc`, `c`, `la` and the optional `dopt`. It provides:

- The adaptation factors `k`, `f_l` and `dd`.
- The modified response compression `lum_adapt` from CIE 248:2022.

`TM30VC` and `CIE_HOME_DISPLAY` are ready-made conditions.

## Example

```python
from spectracolor.physics import planck, to_wavelength
from spectracolor.spectrum import Spectrum
from spectracolor.xyz import XYZ

# Spectral radiance of a 3000 K blackbody at 550 nm
radiance = planck(to_wavelength(170, 0, 400), 3000.0)

# Linear ramp filter from 0 at 380 nm to 1 at 780 nm
ramp = Spectrum.linear_interpolate([380.0, 780.0], [0.0, 1.0])
assert ramp[580] == 0.5

# Tristimulus values from chromaticity coordinates
d65 = XYZ.from_chromaticity(0.31272, 0.32903)
x, y = d65.chromaticity()
```

## What this package does not do

The package has no tables of color matching functions and no standard
illuminant spectra. Because of that, it cannot do the following:

- Compute XYZ values from a `Spectrum`. XYZ values have to be supplied
  directly or built from chromaticity coordinates.
- Convert to or from RGB.
- Compute CIELAB.
- Run a full CAM16 appearance model. `ViewConditions` provides only the
  viewing parameters and the adaptation functions.

## Running the tests

```
pytest
```