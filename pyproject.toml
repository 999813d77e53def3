[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cliforge"
version = "0.1.0"
description = "Command-line option model with validators, flag values and INI configuration reading"
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "command-line", "options", "argument-parsing", "ini", "configuration"]
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
packages = ["cliforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
