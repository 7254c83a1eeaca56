[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "my_defender"
version = "0.1.0"
description = "A small tower defense game: place towers and survive waves of enemies marching on your castle."
requires-python = ">=3.10"
keywords = ["game", "tower-defense", "pygame", "strategy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
my_defender = "my_defender.app:main"

[tool.hatch.build.targets.wheel]
packages = ["my_defender"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
