[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labelenum"
version = "0.1.0"
description = "Integer enumerations backed by string labels, with JSON, YAML, text, binary and SQL conversion helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["enum", "enumeration", "labels", "serialization", "json", "yaml", "binary", "sql"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["labelenum"]

[tool.hatch.build.targets.sdist]
include = ["labelenum", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
