[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "regexlite"
version = "0.1.0"
description = "A small backtracking regular expression engine that matches whole strings"
requires-python = ">=3.10"
dependencies = []
keywords = ["regex", "regular-expressions", "pattern-matching", "parser", "backtracking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
regexlite = "regexlite.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["regexlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
