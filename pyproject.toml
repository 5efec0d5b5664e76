[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reversi-board"
version = "0.1.0"
description = "A windowed Reversi (Othello) game with a random AI opponent or two-player play at one machine"
requires-python = ">=3.10"
keywords = ["reversi", "othello", "board game", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
reversi-board = "reversi_board.app:main"

[tool.hatch.build.targets.wheel]
packages = ["reversi_board"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
