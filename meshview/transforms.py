"""4x4 transformation matrices.

Matrices are in mathematical layout: they act on column vectors as M @ v.
Transpose them for column-major upload to the GPU.
"""

from __future__ import annotations

import math
from typing import Sequence, Union

import numpy as np

from meshview.quaternion import Quaternion

Vec3 = Sequence[float]


def _vec3(values: Vec3) -> np.ndarray:
    array = np.asarray(values, dtype=np.float64)
    if array.shape != (3,):
        raise ValueError("expected three components")
    return array


def _normalize(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero vector")
    return v / length


def translation_matrix(offset: Vec3) -> np.ndarray:
    """Matrix moving points by offset."""
    matrix = np.eye(4)
    matrix[:3, 3] = _vec3(offset)
    return matrix


def scale_matrix(factor: Union[float, Vec3]) -> np.ndarray:
    """Matrix scaling by one factor on every axis, or by three per-axis factors."""
    if np.isscalar(factor):
        factors = np.full(3, float(factor))
    else:
        factors = _vec3(factor)
    return np.diag([*factors, 1.0])


def angle_axis(angle: float, axis: Vec3) -> Quaternion:
    """Rotation of angle radians about axis, which should have unit length."""
    x, y, z = _vec3(axis)
    s = math.sin(angle * 0.5)
    return Quaternion(math.cos(angle * 0.5), x * s, y * s, z * s)


def quaternion_matrix(q: Quaternion) -> np.ndarray:
    """Rotation matrix of a unit quaternion."""
    w, x, y, z = q.w, q.x, q.y, q.z
    xx, yy, zz = x * x, y * y, z * z
    xy, xz, yz = x * y, x * z, y * z
    wx, wy, wz = w * x, w * y, w * z
    return np.array(
        [
            [1.0 - 2.0 * (yy + zz), 2.0 * (xy - wz), 2.0 * (xz + wy), 0.0],
            [2.0 * (xy + wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz - wx), 0.0],
            [2.0 * (xz - wy), 2.0 * (yz + wx), 1.0 - 2.0 * (xx + yy), 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def look_at(eye: Vec3, center: Vec3, up: Vec3) -> np.ndarray:
    """Right-handed view matrix: the camera at eye looks down -z towards center."""
    eye_v, center_v, up_v = _vec3(eye), _vec3(center), _vec3(up)
    f = _normalize(center_v - eye_v)
    s = _normalize(np.cross(f, up_v))
    u = np.cross(s, f)
    matrix = np.eye(4)
    matrix[0, :3] = s
    matrix[1, :3] = u
    matrix[2, :3] = -f
    matrix[0, 3] = -s.dot(eye_v)
    matrix[1, 3] = -u.dot(eye_v)
    matrix[2, 3] = f.dot(eye_v)
    return matrix


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed projection mapping depth near..far to clip range -1..1.

    fovy is the vertical field of view in radians.
    """
    if aspect == 0.0:
        raise ValueError("aspect must not be zero")
    if near == far:
        raise ValueError("near and far must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0.0:
        raise ValueError("field of view must not be zero")
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix