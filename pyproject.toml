[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moonclock"
version = "1.0.0"
description = "Binary clock with moon-emoji, ASCII, JSON and raw displays"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary", "clock", "time", "emoji", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
moonclock = "moonclock.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["moonclock"]

[tool.pytest.ini_options]
addopts = "-ra"
