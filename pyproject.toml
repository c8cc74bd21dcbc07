[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordbase"
version = "0.1.0"
description = "Data types for dictionaries, terms, profiles and lookup records, with Yomitan structured content rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["dictionary", "yomitan", "japanese", "lookup", "glossary"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Natural Language :: Japanese",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wordbase"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
