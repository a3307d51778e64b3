[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vororacle"
version = "0.1.0"
description = "Command-line client, data models and analytics for a VOR randomness oracle daemon"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["oracle", "randomness", "vor", "xfund", "cli", "analytics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
test = [
    "pytest",
    "responses",
]

[project.scripts]
oraclecli = "vororacle.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vororacle"]

[tool.pytest.ini_options]
addopts = "-ra"
