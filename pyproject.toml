[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lifesim"
version = "0.1.0"
description = "Project a person's balance over the years from their capital, incomes and expenses."
requires-python = ">=3.10"
dependencies = []
keywords = ["finance", "budget", "simulation", "projection", "expenses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lifesim = "lifesim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lifesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
