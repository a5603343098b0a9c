[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "splatdungeon"
version = "0.1.0"
description = "Two-player local arcade game: paint a randomly generated dungeon in your colour with bombs before time runs out."
requires-python = ">=3.10"
keywords = ["game", "arcade", "dungeon", "local-multiplayer", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
splatdungeon = "splatdungeon.app:main"

[tool.hatch.build.targets.wheel]
packages = ["splatdungeon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
