[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vtcore"
version = "0.1.0"
description = "Building blocks of a VT100/xterm-style terminal: screen buffer, selection, escape-sequence buffers and UTF-8 handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "vt100", "xterm", "emulator", "ansi", "escape-sequences", "utf-8"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vtcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
