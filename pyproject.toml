[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsprimer"
version = "0.1.0"
description = "Classic textbook data structures and stack algorithms: sequential and linked lists, stacks, queues and expression evaluation."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "linked list",
    "stack",
    "queue",
    "circular buffer",
    "postfix",
    "expression evaluation",
    "education",
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsprimer-seqlist = "dsprimer.seqlist:main"
dsprimer-recursion = "dsprimer.recursion:main"
dsprimer-expressions = "dsprimer.expressions:main"

[tool.hatch.build.targets.wheel]
packages = ["dsprimer"]

[tool.hatch.build.targets.sdist]
include = ["dsprimer", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["dsprimer"]
