[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "feedcat"
version = "0.1.0"
description = "Feed Cat: a four-lane terminal rhythm game played with the arrow keys"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rhythm", "terminal", "console", "arrow-keys"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
feedcat = "feedcat.app:main"

[tool.hatch.build.targets.wheel]
packages = ["feedcat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
