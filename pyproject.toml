[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonfarm"
version = "0.1.0"
description = "A small text role-playing game: pick a hero, clear dungeon floors, collect bread from the farm."
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "text-game", "dungeon", "console", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Korean",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dungeonfarm = "dungeonfarm.game:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeonfarm"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
