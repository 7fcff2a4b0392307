[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "librarykeeper"
version = "0.1.0"
description = "A small interactive library management system for books, magazines and borrowers."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "magazines", "lending", "borrowing"]
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
librarykeeper = "librarykeeper.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["librarykeeper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
