[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "souplang"
version = "0.1.0"
description = "Parser and error reporter for the soup language, built on small combinable parsers"
requires-python = ">=3.10"
dependencies = []
keywords = ["parser", "parser-combinators", "language", "syntax-errors"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
souplang = "souplang.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["souplang"]

[tool.pytest.ini_options]
addopts = "-ra"
