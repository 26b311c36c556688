[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsaprep"
version = "0.1.0"
description = "Classic array, subarray and matrix algorithms as small, well-tested functions."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "arrays", "matrix", "subarray"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsaprep"]

[tool.pytest.ini_options]
addopts = "-ra"
