[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lasercool"
version = "0.1.0"
description = "Physics of laser-cooled atoms: Gaussian beams, atomic transitions, photon scattering counts and magnetic fields."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "laser cooling",
    "atomic physics",
    "gaussian beam",
    "quadrupole field",
    "photon scattering",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["lasercool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
