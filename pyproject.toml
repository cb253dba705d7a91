[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jumpchess"
version = "0.1.0"
description = "Chinese checkers for two, three, four or six players on a star-shaped board"
requires-python = ">=3.10"
dependencies = []
keywords = ["chinese checkers", "board game", "halma", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
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

[project.gui-scripts]
jumpchess = "jumpchess.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["jumpchess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
