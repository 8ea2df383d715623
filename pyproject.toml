[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classics"
version = "1.0.0"
description = "Classic data structures, algorithms, games, simulations and small utilities in plain Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "linked-list",
    "stack",
    "hash-table",
    "binary-search-tree",
    "heap",
    "graph",
    "tic-tac-toe",
    "minimax",
    "perceptron",
    "molecular-dynamics",
    "echo-server",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
classics-math = "classics.mathutils:main"
classics-tictactoe = "classics.tictactoe:main"
classics-perceptron = "classics.perceptron:main"
classics-moldyn = "classics.moldyn:main"
classics-echo-server = "classics.echo:server_main"
classics-echo-client = "classics.echo:client_main"

[tool.hatch.build.targets.wheel]
packages = ["classics"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
