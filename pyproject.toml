[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mclay"
version = "0.1.0"
description = "Commutative algebra toolkit: polynomials over prime fields, monomial ideals, ring maps and Koszul matrices"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "commutative algebra",
    "polynomial ring",
    "monomial ideal",
    "koszul complex",
    "ring map",
    "computer algebra",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mclay"]

[tool.hatch.build.targets.sdist]
include = ["mclay", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
