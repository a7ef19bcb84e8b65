[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lexitools"
version = "0.1.0"
description = "Synonym and antonym dictionary tools: lists, stacks, binary search trees and recursive word utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["dictionary", "synonyms", "antonyms", "binary-search-tree", "recursion", "words"]
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
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lexitools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
