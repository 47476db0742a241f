[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spectracolor"
version = "0.1.0"
description = "Spectral colorimetry: Planck radiators, spectral interpolation, CIE XYZ tristimulus values and CAM16 viewing conditions"
requires-python = ">=3.10"
keywords = ["colorimetry", "CIE", "XYZ", "spectrum", "CIECAM16", "Planck", "Sprague"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = ["numpy"]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spectracolor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
