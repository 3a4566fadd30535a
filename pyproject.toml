[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshview"
version = "0.1.0"
description = "Geometry, mesh loading and camera maths for a small interactive 3D mesh viewer"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "mesh",
    "obj",
    "wavefront",
    "arcball",
    "quaternion",
    "primitives",
    "tangent-space",
    "3d",
    "rendering",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["meshview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
