[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqlinlist"
version = "0.1.0"
description = "Turn a column of values into a quoted SQL value list or chunked IN clauses"
requires-python = ">=3.10"
dependencies = []
keywords = ["sql", "in-clause", "formatting", "text", "filter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sqlinlist = "sqlinlist.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sqlinlist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
