[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puyo"
version = "0.1.0"
description = "Puyo Puyo field simulation: tsumo placement, chains, gravity and scoring"
requires-python = ">=3.10"
dependencies = []
keywords = ["puyo", "puzzle", "game", "simulation", "chain"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["puyo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
