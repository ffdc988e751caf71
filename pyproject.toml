[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "artsat"
version = "0.1.0"
description = "Artificial satellite helpers: observer geometry, apparent motion, designations, ephemeris formatting, tracklets and TLE list scanning"
requires-python = ">=3.10"
dependencies = []
keywords = ["satellite", "tle", "astrometry", "ephemeris", "artsat", "astronomy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
artsat-out-comp = "artsat.outcomp:main"

[tool.hatch.build.targets.wheel]
packages = ["artsat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
