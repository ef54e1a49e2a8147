[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aclib"
version = "0.1.0"
description = "Algorithms and data structures for competitive programming: bisection, sorting, distances, heaps, union-find, segment trees and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "competitive-programming",
    "segment-tree",
    "union-find",
    "bisect",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aclib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
