[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "genomic_structures"
version = "0.1.0"
description = "Structures, types and functions for identifying mobile elements and structural variants from genomic alignment data."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "genetics",
    "genomics",
    "bioinformatics",
    "computational-biology",
    "sam",
    "cigar",
    "mobile-elements",
    "structural-variants",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["genomic_structures"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
