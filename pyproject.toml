[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockmaze"
version = "0.1.0"
description = "A small block maze game built on a scene and game-object framework"
requires-python = ">=3.10"
keywords = ["game", "maze", "puzzle", "pygame", "scene", "game-object"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
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
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
blockmaze = "blockmaze.app:main"

[tool.hatch.build.targets.wheel]
packages = ["blockmaze"]

[tool.pytest.ini_options]
addopts = "-ra"
