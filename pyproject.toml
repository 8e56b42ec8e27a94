[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dailyalgos"
version = "0.1.0"
description = "Classic algorithm exercises on integers, strings and matrices: Fibonacci, GCD, palindromes, anagrams, DNA repeats and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "exercises", "interview", "strings", "math"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["dailyalgos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
