[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sarconf"
version = "0.1.0"
description = "Timing and geometry planner for airborne SAR configurations, with chronogram and geometry plots"
requires-python = ">=3.10"
keywords = ["sar", "radar", "chronogram", "pri", "prf", "geometry", "remote sensing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sarconf = "sarconf.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sarconf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
