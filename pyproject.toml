[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fdfview"
version = "0.1.0"
description = "Wireframe viewer for .fdf height maps with rotation, zoom and extrusion"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["fdf", "wireframe", "heightmap", "isometric", "bresenham", "xpm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fdfview = "fdfview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fdfview"]

[tool.pytest.ini_options]
addopts = "-ra"
