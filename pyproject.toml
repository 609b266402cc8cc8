[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osroute"
version = "0.1.0"
description = "Street-network routing building blocks: way graphs, turn restrictions, BIL elevation tiles, segment elevation storage and path data"
requires-python = ">=3.10"
dependencies = []
keywords = ["routing", "openstreetmap", "elevation", "gis", "graph", "dem", "bil"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["osroute"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
