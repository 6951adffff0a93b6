[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "watersort"
version = "0.1.0"
description = "Solve water sort (colour sort) tube puzzles with breadth-first and best-first search"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "water sort", "color sort", "search", "bfs", "best-first search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
watersort = "watersort.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["watersort"]

[tool.pytest.ini_options]
addopts = "-ra"
