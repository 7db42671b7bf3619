[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wildfire_sim"
version = "0.1.0"
description = "Grid-based wildfire spread simulation with a fleeing animal"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "wildfire", "cellular-automaton", "forest", "fire"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wildfire-sim = "wildfire_sim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["wildfire_sim"]

[tool.pytest.ini_options]
addopts = "-ra"
