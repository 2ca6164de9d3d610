[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lostgame"
version = "0.1.0"
description = "A small side-scrolling platform game built on pygame"
requires-python = ">=3.10"
keywords = ["game", "platformer", "side-scroller", "pygame", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
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

[project.scripts]
lostgame = "lostgame.game:main"

[tool.hatch.build.targets.wheel]
packages = ["lostgame"]

[tool.pytest.ini_options]
addopts = "-ra"
