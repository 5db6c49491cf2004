[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcadecases"
version = "0.1.0"
description = "Two small arcade games, Pong and Flappy Bird, built on pygame"
requires-python = ">=3.10"
keywords = ["game", "arcade", "pong", "flappy-bird", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
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
arcadecases-pong = "arcadecases.pong.app:main"
arcadecases-flappy = "arcadecases.flappy.app:main"

[tool.hatch.build.targets.wheel]
packages = ["arcadecases"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
