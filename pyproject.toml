[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shuruhoja"
version = "1.0.0"
description = "Read-only filesystem analyzer that finds large, old and cleanable files"
requires-python = ">=3.10"
keywords = ["filesystem", "disk-usage", "cleanup", "logs", "analyzer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: System :: Systems Administration",
]
dependencies = [
    "tabulate",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
shuru-hoja = "shuruhoja.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shuruhoja"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
