[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "countprint"
version = "0.1.0"
description = "A small printf with a fixed set of conversions that reports how many characters it wrote."
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "formatting", "output", "hex", "conversion"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["countprint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
