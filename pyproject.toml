[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trivia"
version = "1.0.0"
description = "A console trivia game for two to four players with timed answers and tie-breaks."
requires-python = ">=3.10"
dependencies = []
keywords = ["trivia", "quiz", "game", "console", "multiplayer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
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

[tool.hatch.build.targets.wheel]
packages = ["trivia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
