[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zombiesurvival"
version = "0.1.0"
description = "A terminal zombie survival game on a large tile map, with buildings, items, vaccines and a cone of sight."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "roguelike", "terminal", "curses", "zombie"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zombiesurvival = "zombiesurvival.app:main"

[tool.hatch.build.targets.wheel]
packages = ["zombiesurvival"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
