"""Rotation quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

import numpy as np

from meshview.vectors import Vector3D


@dataclass(frozen=True)
class Quaternion:
    """An immutable quaternion w + xi + yj + zk; the default is the identity."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def vector(self) -> Vector3D:
        return Vector3D(self.x, self.y, self.z)

    def __add__(self, other: Quaternion) -> Quaternion:
        return Quaternion(
            self.w + other.w, self.x + other.x, self.y + other.y, self.z + other.z
        )

    def __sub__(self, other: Quaternion) -> Quaternion:
        return Quaternion(
            self.w - other.w, self.x - other.x, self.y - other.y, self.z - other.z
        )

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            vp, vq = self.vector, other.vector
            w = self.w * other.w - vp.dot(vq)
            v = other.w * vp + self.w * vq + vp.cross(vq)
            return Quaternion(w, v.x, v.y, v.z)
        if isinstance(other, Real):
            return Quaternion(
                self.w * other, self.x * other, self.y * other, self.z * other
            )
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __pow__(self, p: float) -> Quaternion:
        return self.power(p)

    def normalized(self) -> Quaternion:
        """Unit quaternion; a (nearly) zero quaternion becomes the identity."""
        squared = self.dot(self)
        if squared < 1e-20:
            return Quaternion()
        length = math.sqrt(squared)
        return Quaternion(
            self.w / length, self.x / length, self.y / length, self.z / length
        )

    def power(self, p: float) -> Quaternion:
        """The normalized rotation with its angle multiplied by p."""
        q = self.normalized()
        theta = 2.0 * math.acos(max(-1.0, min(1.0, q.w)))
        if theta < 1e-10:
            return q
        axis = q.vector.normalized()
        theta *= p
        axis = axis * math.sin(theta * 0.5)
        return Quaternion(math.cos(theta * 0.5), axis.x, axis.y, axis.z)

    def dot(self, other: Quaternion) -> float:
        return self.w * other.w + self.x * other.x + self.y * other.y + self.z * other.z

    def rotate(self, v: Vector3D) -> Vector3D:
        """Apply the rotation q * v * q^-1 to a vector."""
        result = self * Quaternion(0.0, v.x, v.y, v.z) * self.power(-1)
        return result.vector

    def to_matrix(self) -> np.ndarray:
        """4x4 rotation matrix laid out column by column, as OpenGL expects.

        Element [i, j] is column i, row j of the rotation; its transpose acts
        on column vectors.
        """
        s = 2.0 / self.dot(self)
        xs, ys, zs = self.x * s, self.y * s, self.z * s
        wx, wy, wz = self.w * xs, self.w * ys, self.w * zs
        xx, xy, xz = self.x * xs, self.x * ys, self.x * zs
        yy, yz, zz = self.y * ys, self.y * zs, self.z * zs
        return np.array(
            [
                [1.0 - (yy + zz), xy + wz, xz - wy, 0.0],
                [xy - wz, 1.0 - (xx + zz), yz + wx, 0.0],
                [xz + wy, yz - wx, 1.0 - (xx + yy), 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )