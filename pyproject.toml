[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "bitcraft"
version = "0.1.0"
description = "Bit manipulation helpers, bitmask dynamic programming and shortest-path algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["bits", "bitmask", "dynamic-programming", "tsp", "superstring", "dijkstra", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bitcraft-bits = "bitcraft.bits:main"
bitcraft-subsets = "bitcraft.subsets:main"
bitcraft-tsp = "bitcraft.tsp:main"
bitcraft-dijkstra = "bitcraft.dijkstra:main"

[tool.setuptools.packages.find]
include = ["bitcraft*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
