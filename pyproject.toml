[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atrocious_sort"
version = "0.1.6"
description = "Some of the most useless sorting algorithms."
requires-python = ">=3.10"
dependencies = []
keywords = ["silly", "useless", "sort"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["atrocious_sort"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
