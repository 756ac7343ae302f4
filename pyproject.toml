[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vfcutils"
version = "1.0.0"
description = "Small utility collection: hash table, doubly linked list, JSON escaping, structured logging, math helpers and random numbers."
requires-python = ">=3.10"
dependencies = []
keywords = ["hashtable", "linked-list", "logging", "json", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vfcutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
