[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "knowhere"
version = "0.1.0"
description = "Building blocks for vector similarity search: configs, datasets, bitsets, binary sets, distance kernels, a thread pool and visit records"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["vector search", "similarity", "nearest neighbour", "distance", "bitset"]
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
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["knowhere"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
