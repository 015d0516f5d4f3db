[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "satty"
version = "0.16.0"
description = "Screenshot annotation core: configuration, styles, geometry, undo stack and output handling."
requires-python = ">=3.11"
dependencies = [
    "pillow",
]
keywords = ["screenshot", "annotation", "image", "png", "clipboard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
satty = "satty.app:main"

[tool.hatch.build.targets.wheel]
packages = ["satty"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
