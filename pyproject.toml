[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dicutil"
version = "0.1.0"
description = "Building blocks for binary dictionary data: copy-on-write little-endian integer arrays and the Fx hash"
requires-python = ">=3.10"
dependencies = []
keywords = ["dictionary", "morphological-analysis", "hashing", "fxhash", "binary"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["dicutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
