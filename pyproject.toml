[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dominion"
version = "0.1.0"
description = "A rules engine for the Dominion deck-building card game, with an interactive player, a bot and a scripted two-player game"
requires-python = ">=3.10"
dependencies = []
keywords = ["dominion", "card game", "deck building", "simulation", "lehmer", "random streams"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dominion-player = "dominion.player:main"
dominion-playdom = "dominion.playdom:main"
dominion-seedsearch = "dominion.seedsearch:main"

[tool.hatch.build.targets.wheel]
packages = ["dominion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
