[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terrier"
version = "0.1.0"
description = "Command-line tool for quick codebase inspection: fuzzy keyword search, function counts and cross-file function links"
requires-python = ">=3.10"
keywords = ["code-analysis", "grep", "fuzzy-search", "call-graph", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development",
    "Topic :: Utilities",
]
dependencies = [
    "tabulate",
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
terrier = "terrier.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["terrier"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
