[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filescout"
version = "0.1.0"
description = "Search text files and ZIP archives for a string, or show their contents"
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "grep", "zip", "files", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
filescout = "filescout.cli:main"
filescout-server = "filescout.server:main"

[tool.hatch.build.targets.wheel]
packages = ["filescout"]

[tool.pytest.ini_options]
addopts = "-ra"
