"""Geometry, OBJ mesh loading and camera maths for an interactive 3D mesh viewer."""

__version__ = "0.1.0"

__all__ = [
    "arcball",
    "objmodel",
    "primitives",
    "quaternion",
    "textured",
    "transforms",
    "vectors",
    "viewer",
]