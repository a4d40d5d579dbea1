[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fdfview"
version = "0.1.0"
description = "Render integer height maps as coloured grid images, with XPM image reading"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["heightmap", "wireframe", "grid", "xpm", "raster", "x11-colors"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fdfview = "fdfview.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fdfview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
