[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "0.1.0"
description = "Small console exercises: magic squares, a 4x4 matrix calculator, number words and palindromes"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "matrix", "magic-square", "palindrome", "number-words"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labkit-magic = "labkit.magic:main"
labkit-matcalc = "labkit.matcalc:main"
labkit-numwords = "labkit.numwords:main"
labkit-palindrome = "labkit.palindrome:main"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
