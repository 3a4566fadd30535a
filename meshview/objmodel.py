"""Wavefront OBJ triangle meshes: reading, normalisation and normals."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np


def _vec3(values=(0.0, 0.0, 0.0)) -> np.ndarray:
    return np.array(values, dtype=np.float32).reshape(3)


@dataclass
class Point:
    """A mesh vertex: its position and its accumulated normal."""

    pos: np.ndarray = field(default_factory=_vec3)
    normal: np.ndarray = field(default_factory=_vec3)

    def __post_init__(self) -> None:
        self.pos = _vec3(self.pos)
        self.normal = _vec3(self.normal)


@dataclass
class Face:
    """A triangle given by three 1-based vertex indices, with its unit normal."""

    pts: Tuple[int, int, int]
    normal: np.ndarray = field(default_factory=_vec3)

    def __post_init__(self) -> None:
        self.pts = tuple(int(i) for i in self.pts)
        if len(self.pts) != 3:
            raise ValueError("a face needs exactly three vertex indices")
        self.normal = _vec3(self.normal)


@dataclass
class ObjModel:
    """Vertices and triangular faces of a mesh."""

    points: List[Point] = field(default_factory=list)
    faces: List[Face] = field(default_factory=list)

    def _vertex(self, index: int) -> np.ndarray:
        if not 1 <= index <= len(self.points):
            raise ValueError(
                f"face refers to vertex {index}, but only {len(self.points)} are defined"
            )
        return self.points[index - 1].pos

    def unify(self) -> None:
        """Centre the model on the origin and scale its largest extent to 1."""
        if not self.points:
            return
        positions = np.stack([p.pos for p in self.points])
        upper = positions.max(axis=0)
        lower = positions.min(axis=0)
        center = (upper + lower) * np.float32(0.5)
        extent = float((upper - lower).max())
        for point in self.points:
            moved = point.pos - center
            point.pos = _vec3(moved / extent if extent > 0.0 else moved)

    def compute_face_normal(self, face: Face) -> np.ndarray:
        """Set and return the unit normal of a face (winding v1 -> v2 -> v3).

        A degenerate face gets a zero normal.
        """
        v1, v2, v3 = (self._vertex(i) for i in face.pts)
        normal = np.cross(v2 - v1, v3 - v2)
        length = float(np.linalg.norm(normal))
        face.normal = _vec3(normal / length if length > 0.0 else (0.0, 0.0, 0.0))
        return face.normal

    def compute_point_normals(self) -> None:
        """Set each vertex normal to the sum of the normals of its faces.

        The sums are left unnormalised.
        """
        for point in self.points:
            point.normal = _vec3()
        for face in self.faces:
            for index in face.pts:
                point = self.points[index - 1]
                point.normal = _vec3(point.normal + face.normal)


def _parse_index(token: str) -> int:
    return int(token.split("/", 1)[0])


def parse_obj(lines: Iterable[str]) -> ObjModel:
    """Build a model from OBJ text lines.

    Only "v" and "f" records are used; a face takes its first three vertex
    indices. The result is unified and carries face and vertex normals.
    Raises ValueError on malformed records or out-of-range indices.
    """
    model = ObjModel()
    for number, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue
        kind = tokens[0]
        try:
            if kind == "v":
                coords: Sequence[float] = [float(t) for t in tokens[1:4]]
                if len(coords) < 3:
                    raise ValueError("a vertex needs three coordinates")
                model.points.append(Point(pos=coords))
            elif kind == "f":
                indices = [_parse_index(t) for t in tokens[1:4]]
                if len(indices) < 3:
                    raise ValueError("a face needs three vertex indices")
                face = Face(pts=tuple(indices))
                model.compute_face_normal(face)
                model.faces.append(face)
        except ValueError as exc:
            raise ValueError(f"line {number}: {exc}") from exc
    model.unify()
    model.compute_point_normals()
    return model


def read_obj(path: Union[str, PathLike]) -> ObjModel:
    """Read an OBJ file; raises OSError if it cannot be opened."""
    with open(path, "r", encoding="utf-8", errors="replace") as handle:
        return parse_obj(handle)