[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drtodo"
version = "0.1.0"
description = "Simple creation of daily TODO files carrying over tasks from previous days"
requires-python = ">=3.10"
dependencies = []
keywords = ["todo", "markdown", "daily", "tasks", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dr-todo = "drtodo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["drtodo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
