[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cminus"
version = "0.1.0"
description = "Syntax tree nodes and scoped semantic analysis for a small C-minus language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "c-minus", "semantic-analysis", "symbol-table", "ast"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cminus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
