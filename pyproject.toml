[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filmotheque"
version = "0.1.0"
description = "Read a binary film collection, look up actors and print filmographies"
requires-python = ">=3.10"
dependencies = []
keywords = ["films", "actors", "collection", "binary format", "iterators"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
filmotheque = "filmotheque.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["filmotheque"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
