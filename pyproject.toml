[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iterwright"
version = "0.1.0"
description = "Lazy iterator adaptors and sources: merging, peeking, tuples, permutations, zipping and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["iterator", "itertools", "adaptor", "generator", "merge", "peek", "permutations"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["iterwright"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
