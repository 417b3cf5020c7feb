[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillbits"
version = "0.1.0"
description = "Small routines for bit twiddling, array puzzles, linked lists, searching, sorting and thread coordination"
requires-python = ">=3.10"
dependencies = []
keywords = ["bits", "bitwise", "linked-list", "sorting", "searching", "algorithms", "exercises"]
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
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["drillbits"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
