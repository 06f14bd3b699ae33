[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bstmap"
version = "0.1.0"
description = "An ordered map on an unbalanced binary search tree with a cursor, upper bound search and in-order stepping"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "ordered map", "tree map", "data structures"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bstmap-demo = "bstmap.demo:main"
bstmap-grader = "bstmap.grader:main"

[tool.hatch.build.targets.wheel]
packages = ["bstmap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
