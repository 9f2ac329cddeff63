[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchdrills"
version = "0.1.0"
description = "Solutions to classic grid search, backtracking, recursion and simulation exercises"
requires-python = ">=3.10"
dependencies = []
keywords = ["bfs", "dfs", "backtracking", "recursion", "simulation", "algorithms", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["searchdrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
