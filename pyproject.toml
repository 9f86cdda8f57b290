[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pellgamal"
version = "0.1.0"
description = "ElGamal-style encryption over the parametrized Pell hyperbola, with projective and PISO message encodings"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "elgamal",
    "pell",
    "hyperbola",
    "public-key",
    "encryption",
    "number-theory",
    "benchmark",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
pellgamal = "pellgamal.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pellgamal"]

[tool.hatch.build.targets.sdist]
include = [
    "pellgamal",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["pellgamal"]
warn_unused_ignores = true
