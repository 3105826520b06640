[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "1.0.0"
description = "Small teaching programs: a chess rules engine, a crossword generator, Game of Life and assorted console exercises"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "chess",
    "crossword",
    "game-of-life",
    "exercises",
    "console",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labkit-crossword = "labkit.crossword_cli:main"
labkit-football = "labkit.football:main"
labkit-grades = "labkit.grades:main"
labkit-primes = "labkit.primes:main"
labkit-life = "labkit.playlife:main"
labkit-states = "labkit.usastates:main"
labkit-path = "labkit.path:main"
labkit-sayings = "labkit.sayings:main"
labkit-letterfreq = "labkit.letterfreq:main"
labkit-graph = "labkit.graph:main"
labkit-mortgage = "labkit.mortgage:main"
labkit-table = "labkit.table:main"
labkit-points = "labkit.points:main"
labkit-triangle = "labkit.triangle:main"
labkit-menucalc = "labkit.menucalc:main"
labkit-polar = "labkit.polar:main"
labkit-quadratics = "labkit.quadratics:main"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

[tool.hatch.build.targets.sdist]
include = ["labkit", "tests", "README.md", "pyproject.toml"]

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
