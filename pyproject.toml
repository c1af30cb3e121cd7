[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eulerkit"
version = "0.1.0"
description = "Number-theory puzzle solvers: a multi-limb natural-number type, primes, digit problems, sequences, grids and a block-world simulator."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "number theory",
    "primes",
    "big integers",
    "puzzles",
    "digits",
    "sequences",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
eulerkit-bignum = "eulerkit.bignum:main"
eulerkit-blocks = "eulerkit.blocks:main"

[tool.hatch.build.targets.wheel]
packages = ["eulerkit"]

[tool.hatch.build.targets.sdist]
include = ["eulerkit", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
