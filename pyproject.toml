[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dwarfgame"
version = "0.1.0"
description = "A small tile-based arcade game with an entity-component-system core"
requires-python = ">=3.10"
keywords = ["game", "arcade", "ecs", "entity-component-system", "pygame", "sprites"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
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
dwarfgame = "dwarfgame.main:main"

[tool.hatch.build.targets.wheel]
packages = ["dwarfgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
