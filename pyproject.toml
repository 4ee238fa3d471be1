[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pivkit"
version = "0.1.0"
description = "Pixel types, images, geometry, interrogation grids and image utilities for particle image velocimetry"
requires-python = ">=3.10"
dependencies = []
keywords = ["piv", "particle image velocimetry", "image processing", "interrogation grid", "peak finding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pivkit"]

[tool.pytest.ini_options]
addopts = "-ra"
