[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arithkit"
version = "0.1.0"
description = "Number theory helpers: gcd and lcm, modular arithmetic, primes, digit-string arithmetic and combinatorial generation"
requires-python = ">=3.10"
dependencies = []
keywords = ["number theory", "primes", "gcd", "modular arithmetic", "combinatorics", "big integers"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["arithkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
