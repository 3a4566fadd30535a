"""Flat-coloured primitive shapes and the skybox cube."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

import numpy as np

MAX_VERTICES = 6000
"""Capacity of the vertex buffers for generated shapes (cone and cylinder)."""

RED = (1.0, 0.0, 0.0, 1.0)
GREEN = (0.0, 1.0, 0.0, 1.0)
BLUE = (0.0, 0.0, 1.0, 1.0)

SKYBOX_FACE_NAMES: Tuple[str, ...] = ("right", "left", "top", "bottom", "front", "back")
DEFAULT_SKYBOX_DIR = "../../../resources/textures/skybox"


@dataclass
class ColoredMesh:
    """Unindexed triangles: one position (x, y, z) and one RGBA colour per vertex."""

    positions: np.ndarray
    colors: np.ndarray

    def __post_init__(self) -> None:
        self.positions = np.asarray(self.positions, dtype=np.float32).reshape(-1, 3)
        self.colors = np.asarray(self.colors, dtype=np.float32).reshape(-1, 4)
        if len(self.positions) != len(self.colors):
            raise ValueError("positions and colors must have the same length")

    def count(self) -> int:
        """Number of vertices to draw."""
        return len(self.positions)


def _skybox_vertices() -> np.ndarray:
    data = [
        -1.0, 1.0, -1.0, -1.0, -1.0, -1.0, 1.0, -1.0, -1.0,
        1.0, -1.0, -1.0, 1.0, 1.0, -1.0, -1.0, 1.0, -1.0,

        -1.0, -1.0, 1.0, -1.0, -1.0, -1.0, -1.0, 1.0, -1.0,
        -1.0, 1.0, -1.0, -1.0, 1.0, 1.0, -1.0, -1.0, 1.0,

        1.0, -1.0, -1.0, 1.0, -1.0, 1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0, 1.0, -1.0, 1.0, -1.0, -1.0,

        -1.0, -1.0, 1.0, -1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0, -1.0, 1.0, -1.0, -1.0, 1.0,

        -1.0, 1.0, -1.0, 1.0, 1.0, -1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, -1.0, 1.0, 1.0, -1.0, 1.0, -1.0,

        -1.0, -1.0, -1.0, -1.0, -1.0, 1.0, 1.0, -1.0, -1.0,
        1.0, -1.0, -1.0, -1.0, -1.0, 1.0, 1.0, -1.0, 1.0,
    ]
    return np.array(data, dtype=np.float32).reshape(36, 3)


@dataclass
class SkyBox:
    """Cube vertices for a skybox and the six cube-map image paths.

    The faces are in cube-map order: right, left, top, bottom, front, back.
    """

    faces: List[str]
    vertices: np.ndarray = field(default_factory=_skybox_vertices)


def triangle() -> ColoredMesh:
    """A single triangle with red, green and blue corners."""
    return ColoredMesh(
        positions=[(-1.0, -1.0, 0.0), (1.0, -1.0, 0.0), (0.0, 1.0, 0.0)],
        colors=[RED, GREEN, BLUE],
    )


def quad() -> ColoredMesh:
    """A square in the z=0 plane made of two triangles."""
    return ColoredMesh(
        positions=[
            (-1.0, -1.0, 0.0),
            (1.0, -1.0, 0.0),
            (1.0, 1.0, 0.0),
            (1.0, 1.0, 0.0),
            (-1.0, 1.0, 0.0),
            (-1.0, -1.0, 0.0),
        ],
        colors=[RED, GREEN, BLUE, BLUE, RED, RED],
    )


def cube() -> ColoredMesh:
    """A cube from -1 to 1; front/back red, left/right green, top/bottom blue."""
    positions = [
        # front
        (-1, -1, 1), (1, -1, 1), (1, 1, 1),
        (-1, -1, 1), (1, 1, 1), (-1, 1, 1),
        # back
        (1, -1, -1), (-1, -1, -1), (-1, 1, -1),
        (1, -1, -1), (-1, 1, -1), (1, 1, -1),
        # left
        (-1, -1, -1), (-1, -1, 1), (-1, 1, 1),
        (-1, -1, -1), (-1, 1, 1), (-1, 1, -1),
        # right
        (1, -1, 1), (1, -1, -1), (1, 1, -1),
        (1, -1, 1), (1, 1, -1), (1, 1, 1),
        # up
        (-1, 1, 1), (1, 1, 1), (1, 1, -1),
        (-1, 1, 1), (1, 1, -1), (-1, 1, -1),
        # down
        (-1, -1, -1), (1, -1, -1), (1, -1, 1),
        (-1, -1, -1), (1, -1, 1), (-1, -1, 1),
    ]
    colors = [RED] * 12 + [GREEN] * 12 + [BLUE] * 12
    return ColoredMesh(positions=positions, colors=colors)


def _check_slices(slices: int, per_slice: int) -> None:
    if slices < 1:
        raise ValueError("slices must be at least 1")
    if slices * per_slice > MAX_VERTICES:
        raise ValueError(
            f"{slices} slices need {slices * per_slice} vertices; "
            f"at most {MAX_VERTICES} are supported"
        )


def _rim(radius: float, y: float, slices: int) -> List[Tuple[float, float, float]]:
    step = 2.0 * math.pi / slices
    return [
        (radius * math.cos(i * step), y, radius * math.sin(i * step))
        for i in range(slices + 1)
    ]


def cone(radius: float = 1.0, height: float = 2.0, slices: int = 100) -> ColoredMesh:
    """A cone centred on the origin with its tip up the y axis.

    The base is a fan of triangles around its centre, followed by the sides.
    Centre and tip are green, rim vertices blue.
    """
    _check_slices(slices, 6)
    bottom_y = -height / 2.0
    rim = _rim(radius, bottom_y, slices)
    bottom_center = (0.0, bottom_y, 0.0)
    tip = (0.0, height / 2.0, 0.0)

    positions: List[Tuple[float, float, float]] = []
    colors: List[Tuple[float, float, float, float]] = []
    for apex in (bottom_center, tip):
        for current, following in zip(rim, rim[1:]):
            positions += [apex, current, following]
            colors += [GREEN, BLUE, BLUE]
    return ColoredMesh(positions=positions, colors=colors)


def cylinder(radius: float = 1.0, height: float = 2.0, slices: int = 500) -> ColoredMesh:
    """A cylinder centred on the origin along the y axis.

    Each slice adds a top cap triangle, a bottom cap triangle and two side
    triangles. Cap centres are red, everything else green.
    """
    _check_slices(slices, 12)
    top_y, bottom_y = height / 2.0, -height / 2.0
    top_rim = _rim(radius, top_y, slices)
    bottom_rim = _rim(radius, bottom_y, slices)
    top_center = (0.0, top_y, 0.0)
    bottom_center = (0.0, bottom_y, 0.0)

    positions: List[Tuple[float, float, float]] = []
    colors: List[Tuple[float, float, float, float]] = []
    for i in range(slices):
        top1, top2 = top_rim[i], top_rim[i + 1]
        bottom1, bottom2 = bottom_rim[i], bottom_rim[i + 1]
        positions += [
            top_center, top1, top2,
            bottom_center, bottom1, bottom2,
            bottom1, bottom2, top2,
            top2, top1, bottom1,
        ]
        colors += [RED, GREEN, GREEN, RED, GREEN, GREEN] + [GREEN] * 6
    return ColoredMesh(positions=positions, colors=colors)


def skybox(texture_dir: str = DEFAULT_SKYBOX_DIR) -> SkyBox:
    """The skybox cube with its face images looked up in texture_dir."""
    base = Path(texture_dir)
    return SkyBox(faces=[str(base / f"{name}.jpg") for name in SKYBOX_FACE_NAMES])