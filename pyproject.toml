[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "typeconv"
version = "0.1.0"
description = "Loose value conversion, map flattening, binary packing and decimal helpers"
requires-python = ">=3.10"
keywords = ["conversion", "casting", "binary", "decimal", "aes"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["typeconv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
