[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orrery"
version = "0.1.0"
description = "An interactive two-dimensional N-body simulation of the solar system"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["solar system", "n-body", "gravity", "orbits", "simulation", "astronomy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
orrery = "orrery.app:main"

[tool.hatch.build.targets.wheel]
packages = ["orrery"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
