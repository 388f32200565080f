[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "beakerlang"
version = "0.1.0"
description = "Lexer, parser, type system and value model for the Beaker teaching language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "parser", "language", "ast", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
packages = ["beakerlang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
