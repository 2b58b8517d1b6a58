[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weathercheck"
version = "0.1.0"
description = "Fetch current weather for a location and report whether it suits outdoor activities."
requires-python = ">=3.10"
dependencies = []
keywords = ["weather", "open-meteo", "forecast", "wind", "temperature"]
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
    "Topic :: Scientific/Engineering :: Atmospheric Science",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
weathercheck = "weathercheck.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["weathercheck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
