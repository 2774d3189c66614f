[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cartola"
version = "0.1.0"
description = "A small fantasy football game for the terminal: buy players, pick a line-up and compete in a ranking."
requires-python = ">=3.10"
dependencies = []
keywords = ["fantasy football", "game", "terminal", "soccer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cartola = "cartola.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cartola"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
