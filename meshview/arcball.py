"""Arcball: turns mouse positions on a window into rotations."""

from __future__ import annotations

import math

from meshview.quaternion import Quaternion
from meshview.vectors import Vector2D, Vector3D


class Arcball:
    """Maps window positions onto a virtual sphere and tracks drags across it."""

    def __init__(self, width: int, height: int, ox: int, oy: int) -> None:
        half_w = (width // 2 * width) // 2
        half_h = (height // 2 * height) // 2
        self.width = float(width)
        self.height = float(height)
        self.radius = math.sqrt(half_w + half_h)
        self.center = Vector2D(width // 2, height // 2)
        self.position = self._plane_to_sphere(Vector2D(ox, oy))

    def _plane_to_sphere(self, p: Vector2D) -> Vector3D:
        f = p / self.radius
        length = math.sqrt(f.dot(f))
        if length > 1.0:
            return Vector3D(f.x / length, f.y / length, 0.0)
        return Vector3D(f.x, f.y, math.sqrt(1.0 - length * length))

    def update(self, nx: int, ny: int) -> Quaternion:
        """Move to (nx, ny) and return the rotation from the previous point."""
        position = self._plane_to_sphere(Vector2D(nx, ny))
        axis = self.position.cross(position)
        rotation = Quaternion(self.position.dot(position), axis.x, axis.y, axis.z)
        self.position = position
        return rotation