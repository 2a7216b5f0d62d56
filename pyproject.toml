[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datashed"
version = "0.1.0"
description = "Create and manage datasheds: versioned data directories with TOML metadata"
requires-python = ">=3.11"
keywords = ["data", "dataset", "toml", "metadata", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
]
dependencies = [
    "semver",
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
datashed = "datashed.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["datashed"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
