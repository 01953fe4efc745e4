[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubestructs"
version = "0.1.0"
description = "Small teaching data structures: cubes, a Tower of Hanoi game, a BST dictionary, a binary min-heap and a linked list."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "data structures", "binary search tree", "heap", "tower of hanoi", "linked list"]
classifiers = [
    "Development Status :: 4 - Beta",
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
cubestructs-tower = "cubestructs.tower:main"
cubestructs-heap = "cubestructs.heap:main"
cubestructs-bst = "cubestructs.bst_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["cubestructs"]

[tool.pytest.ini_options]
addopts = "-ra"
