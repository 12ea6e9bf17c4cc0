[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordlenet"
version = "0.1.0"
description = "A networked word-guessing game with a TCP server and a terminal client"
requires-python = ">=3.10"
dependencies = []
keywords = ["wordle", "game", "puzzle", "terminal", "tcp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordle = "wordlenet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordlenet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
