[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cctr"
version = "0.1.0"
description = "A tr-like character translation and deletion filter with ranges and character classes"
requires-python = ">=3.10"
keywords = ["tr", "translate", "filter", "text", "characters", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cctr = "cctr.translator:main"

[tool.hatch.build.targets.wheel]
packages = ["cctr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
