[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vigil"
version = "0.1.0"
description = "A small modal terminal text editor with vi-style key bindings"
requires-python = ">=3.10"
keywords = ["editor", "terminal", "vi", "modal", "text"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
vigil = "vigil.terminal:main"

[tool.hatch.build.targets.wheel]
packages = ["vigil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
