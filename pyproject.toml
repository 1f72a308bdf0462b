[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bookshelf"
version = "0.1.0"
description = "Interactive console manager for a small library's book catalogue"
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "catalogue", "console", "inventory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bookshelf = "bookshelf.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["bookshelf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
