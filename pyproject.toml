[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "knapsolve"
version = "0.1.0"
description = "0/1 knapsack solvers: branch and bound, genetic algorithm and greedy heuristics, with batch runners over instance folders"
requires-python = ">=3.10"
dependencies = []
keywords = ["knapsack", "optimization", "branch-and-bound", "genetic-algorithm", "greedy", "heuristics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
knapsolve-compare = "knapsolve.compare:main"
knapsolve-greedy = "knapsolve.greedy:main"

[tool.hatch.build.targets.wheel]
packages = ["knapsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
