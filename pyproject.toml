[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edjudge"
version = "0.1.0"
description = "Classic data structures and judge-style problem solvers: linked lists, stacks, deques, binary trees and search sets"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "linked-list",
    "binary-tree",
    "binary-search-tree",
    "stack",
    "queue",
    "deque",
    "online-judge",
    "exercises",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
edjudge = "edjudge.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["edjudge"]

[tool.hatch.build.targets.sdist]
include = ["edjudge", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
