[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wish"
version = "0.1.0"
description = "Test assertion helpers, line diffs, tab indentation tools and a plain-text fixture file format"
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "assertions", "diff", "fixtures", "golden files", "dedent"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wish"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
