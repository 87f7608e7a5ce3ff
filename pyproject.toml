[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslabs"
version = "0.1.0"
description = "Classic operating-system algorithms: banker's deadlock avoidance, first-fit memory allocation and page replacement"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "banker's algorithm",
    "deadlock avoidance",
    "memory allocation",
    "first fit",
    "page replacement",
    "LRU-K",
    "LFU",
    "FIFO",
    "OPT",
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

[tool.hatch.build.targets.wheel]
packages = ["oslabs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
