[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netpbm-editor"
version = "0.1.0"
description = "Command-driven editor for PGM and PPM (Netpbm) images"
requires-python = ">=3.10"
dependencies = []
keywords = ["netpbm", "pgm", "ppm", "image", "editor", "filters", "histogram"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netpbm-editor = "netpbm_editor.editor:main"

[tool.hatch.build.targets.wheel]
packages = ["netpbm_editor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
