[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phantomcore"
version = "0.1.0"
description = "Core building blocks of a small game engine: vector and matrix maths, animation curves, sorting, events, configuration and asset loading."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game-engine",
    "linear-algebra",
    "matrix",
    "bezier",
    "animation",
    "events",
    "assets",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["phantomcore"]

[tool.hatch.build.targets.sdist]
include = [
    "phantomcore",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
