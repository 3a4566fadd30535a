"""Two- and three-dimensional vectors used by the arcball controller."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

EPSILON = 1e-16


def _is_zero(value: float) -> bool:
    return abs(value) < EPSILON


@dataclass(frozen=True)
class Vector2D:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def __mul__(self, factor: float) -> Vector2D:
        return Vector2D(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vector2D:
        """Divide by a scalar; a divisor of (almost) zero leaves the vector unchanged."""
        if _is_zero(divisor):
            return self
        return Vector2D(self.x / divisor, self.y / divisor)

    def length(self) -> float:
        return math.sqrt(self.length2())

    def length2(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Vector2D:
        """Unit vector in the same direction; a zero vector is returned as is."""
        length = self.length()
        if _is_zero(length):
            return self
        return Vector2D(self.x / length, self.y / length)

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    def at_where(self, v0: Vector2D, v1: Vector2D) -> int:
        """Side of the directed line v0 -> v1: 1 right, -1 left, 0 on it."""
        normal = Vector2D(v1.y - v0.y, v0.x - v1.x)
        offset = Vector2D(self.x - v0.x, self.y - v0.y)
        d = normal.dot(offset)
        if _is_zero(d):
            return 0
        return 1 if d > 0 else -1

    def at_right(self, v0: Vector2D, v1: Vector2D) -> bool:
        return self.at_where(v0, v1) == 1

    def at_left(self, v0: Vector2D, v1: Vector2D) -> bool:
        return self.at_where(v0, v1) == -1

    def on_line(self, v0: Vector2D, v1: Vector2D) -> bool:
        return self.at_where(v0, v1) == 0

    def area(self, other: Vector2D) -> float:
        """Signed parallelogram area (2D cross product) of self and other."""
        return self.x * other.y - other.x * self.y


@dataclass(frozen=True)
class Vector3D:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3D:
        return Vector3D(-self.x, -self.y, -self.z)

    def __mul__(self, factor: float) -> Vector3D:
        return Vector3D(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vector3D:
        """Divide by a scalar; a divisor of (almost) zero leaves the vector unchanged."""
        if _is_zero(divisor):
            return self
        return Vector3D(self.x / divisor, self.y / divisor, self.z / divisor)

    def length(self) -> float:
        return math.sqrt(self.length2())

    def length2(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> Vector3D:
        """Unit vector in the same direction; a zero vector is returned as is."""
        length = self.length()
        if _is_zero(length):
            return self
        return Vector3D(self.x / length, self.y / length, self.z / length)

    def distance_to(self, other: Vector3D) -> float:
        return (self - other).length()

    def dot(self, other: Vector3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


def unit_circle_intersection(v1: Vector2D, v2: Vector2D) -> Vector2D:
    """Intersect the line through v1 and v2 with the unit circle.

    Returns the intersection point ahead of the foot of the perpendicular
    from the origin, in the direction v1 -> v2. A line through the origin
    yields its unit direction. Raises ValueError if the line misses the circle.
    """
    side = Vector2D().at_where(v1, v2)
    direction = (v2 - v1).normalized()
    if side == 0:
        return direction
    if side == 1:
        normal = Vector2D(-direction.y, direction.x)
    else:
        normal = Vector2D(direction.y, -direction.x)
    d = normal.dot(v1)
    remainder = 1.0 - d * d
    if remainder < 0:
        raise ValueError("line does not meet the unit circle")
    return direction * math.sqrt(remainder) + normal * d


def line_intersection(
    v1: Vector2D, v2: Vector2D, v3: Vector2D, v4: Vector2D
) -> Optional[Vector2D]:
    """Intersection of line v1-v2 with line v3-v4, or None if they are parallel."""
    d = (v4.y - v3.y) * (v1.x - v2.x) - (v2.y - v1.y) * (v3.x - v4.x)
    if _is_zero(d):
        return None
    d1 = v1.x * v2.y - v2.x * v1.y
    d2 = v3.x * v4.y - v4.x * v3.y
    return Vector2D(
        ((v4.x - v3.x) * d1 - (v2.x - v1.x) * d2) / d,
        ((v4.y - v3.y) * d1 - (v2.y - v1.y) * d2) / d,
    )