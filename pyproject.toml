[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netlistdb"
version = "0.1.0"
description = "In-memory database of digital circuit netlists with graph queries"
requires-python = ">=3.10"
dependencies = []
keywords = ["netlist", "hdl", "eda", "circuit", "graph", "hardware"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["netlistdb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
