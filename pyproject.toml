[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nebuladb"
version = "0.1.0"
description = "A small in-memory table store with comma-separated file persistence, behind a login-protected interactive command line."
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "table", "csv", "cli", "authentication", "sha256"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nebuladb = "nebuladb.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nebuladb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
