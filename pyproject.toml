[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minibash"
version = "0.1.0"
description = "Bash-compatible shell built-ins, an ordered environment table and C-style string, number and printf helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "bash", "builtins", "environment", "printf", "cd", "export"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minibash"]

[tool.hatch.build.targets.sdist]
include = ["minibash", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
