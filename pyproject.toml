[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "splice"
version = "0.1.0"
description = "Core of a small 2D game framework: vector and matrix math, colours, input state, camera, entities and a GUI toolkit that draws to a recording canvas"
requires-python = ">=3.10"
keywords = ["game", "2d", "gui", "entity", "vector", "matrix", "input", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["splice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
