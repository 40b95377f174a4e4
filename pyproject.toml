[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "namehash"
version = "0.1.0"
description = "Hash tables with linear probing, chaining and cuckoo hashing, plus the basic containers they are built from, for counting first names."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hash table",
    "cuckoo hashing",
    "linear probing",
    "separate chaining",
    "heap",
    "linked list",
    "data structures",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[project.scripts]
namehash = "namehash.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["namehash"]

[tool.pytest.ini_options]
addopts = "-ra"
