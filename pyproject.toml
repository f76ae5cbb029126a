[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcadekit"
version = "0.1.0"
description = "Small 2D toolkit for arcade games: vectors, shapes, ARGB colours and a double-buffered pixel screen"
requires-python = ">=3.10"
keywords = ["arcade", "2d", "geometry", "vector", "bresenham", "pygame", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
arcadekit-demo = "arcadekit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["arcadekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
