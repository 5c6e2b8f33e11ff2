[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "the_game"
version = "0.1.0"
description = "A single-player terminal version of The Game: play cards 2 to 99 onto four piles before you run out of moves."
requires-python = ">=3.10"
keywords = ["card game", "solitaire", "terminal", "puzzle"]
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
dependencies = [
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
the-game = "the_game.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["the_game"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
