[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orrery"
version = "0.1.0"
description = "A simple model of the solar system: circular orbits of planets and moons computed for any calendar date."
requires-python = ">=3.10"
dependencies = []
keywords = ["solar system", "orrery", "astronomy", "planets", "orbits"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
orrery = "orrery.app:main"

[tool.hatch.build.targets.wheel]
packages = ["orrery"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
