[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dragonir"
version = "1.0.1"
description = "Data model of a small compiler intermediate representation: types, values, def-use edges, variables, scopes and index sets"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "ir", "intermediate-representation", "symbol-table", "def-use"]
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
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dragonir"]

[tool.pytest.ini_options]
addopts = "-ra"
