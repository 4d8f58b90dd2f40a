[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bonvoyage"
version = "0.1.0"
description = "Screens, sprites and game logic for a two-level side-scrolling runner game built on pygame."
requires-python = ">=3.10"
keywords = ["game", "side-scroller", "runner", "arcade", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bonvoyage"]

[tool.pytest.ini_options]
addopts = "-ra"
