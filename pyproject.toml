[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xpmkit"
version = "0.1.0"
description = "Reader for XPM pixmap images, with X11 colour names and small text, byte and list helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["xpm", "pixmap", "image", "x11", "colors", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xpmkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
