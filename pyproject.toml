[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roarstore"
version = "0.1.0"
description = "Roaring-bitmap style containers for sets of 16-bit integers: sorted arrays, dense bitmaps and a store that wraps either"
requires-python = ">=3.10"
dependencies = []
keywords = ["roaring", "bitmap", "bitset", "container", "set", "integers"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["roarstore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
