[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubed"
version = "0.1.0"
description = "A small raycasting maze explorer driven by .cub scene files"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "maze", "first-person", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cubed = "cubed.game:main"

[tool.hatch.build.targets.wheel]
packages = ["cubed"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
