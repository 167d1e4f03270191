[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bintreekit"
version = "0.1.0"
description = "Check parenthesised tree notation for binary trees, with small stack and queue containers"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary tree", "stack", "queue", "parentheses", "data structures"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bintreekit = "bintreekit.bintree:main"

[tool.hatch.build.targets.wheel]
packages = ["bintreekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
