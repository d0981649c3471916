[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stormlib"
version = "0.1.0"
description = "Utility library: C-style strings, hashing, UTF-8, big integers, intrusive containers and threading primitives"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bignum",
    "hash",
    "utf-8",
    "strings",
    "containers",
    "priority-queue",
    "linked-list",
    "threading",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stormlib"]

[tool.pytest.ini_options]
addopts = "-ra"
