[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gameball"
version = "0.1.0"
description = "Rolling-ball game logic with a small rigid-body physics engine for spheres and cubes"
requires-python = ">=3.10"
keywords = ["physics", "rigid body", "collision", "game", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gameball"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
