[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lightscene"
version = "0.1.0"
description = "Vector, matrix, quaternion and rigid-transform math, mesh generation, PPM images and a window-independent model of a lit 3D scene"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "3d",
    "graphics",
    "linear-algebra",
    "quaternion",
    "matrix",
    "mesh",
    "ppm",
    "lighting",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lightscene"]

[tool.hatch.build.targets.sdist]
include = ["lightscene", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["lightscene"]
warn_unused_ignores = true
