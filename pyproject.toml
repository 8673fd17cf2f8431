[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pnmcorr"
version = "0.1.0"
description = "Load, convert and correlate PBM, PGM and PPM images in plain-text form"
requires-python = ">=3.10"
dependencies = []
keywords = ["pnm", "pbm", "pgm", "ppm", "netpbm", "image", "correlation", "grayscale"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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

[project.scripts]
pnmcorr = "pnmcorr.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pnmcorr"]

[tool.pytest.ini_options]
addopts = "-ra"
