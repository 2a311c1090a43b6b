[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wallcaster"
version = "0.1.0"
description = "A small grid-based raycasting engine that renders textured walls in a window"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "3d", "dda", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pygame",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wallcaster = "wallcaster.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wallcaster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
