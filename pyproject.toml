[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "afrilang"
version = "0.1.0"
description = "A small line-oriented interpreter for the Afrilang toy language"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "toy-language", "lexer", "parser", "repl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
afrilang = "afrilang.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["afrilang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
