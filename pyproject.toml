[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graaf"
version = "0.1.0"
description = "A small graph library with directed and undirected graphs and classic graph algorithms."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "algorithms",
    "shortest-path",
    "bellman-ford",
    "floyd-warshall",
    "minimum-spanning-tree",
    "coloring",
    "clique",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["graaf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
