[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mobagen"
version = "0.0.1"
description = "Headless simulation models: Game of Life, step-by-step maze generation, flocking boids and hide-and-seek line of sight"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "game-of-life", "maze", "flocking", "boids", "shadowcasting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mobagen"]

[tool.pytest.ini_options]
addopts = "-ra"
