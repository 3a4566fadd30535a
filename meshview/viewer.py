"""Interactive view state: which shape is shown and how it is transformed."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Sequence, Tuple

import numpy as np

from meshview.objmodel import ObjModel
from meshview.quaternion import Quaternion
from meshview.transforms import (
    angle_axis,
    look_at,
    perspective,
    quaternion_matrix,
    scale_matrix,
    translation_matrix,
)

TRANSLATE_SENSITIVITY = 0.01
ROTATE_SENSITIVITY = 0.005
SCALE_STEP = 0.1
MIN_SCALE = 0.1
FIELD_OF_VIEW_DEGREES = 60.0
NEAR_PLANE = 1.0
FAR_PLANE = 1000.0


class ShapeId(IntEnum):
    """What the viewer draws, in the order of its selection buttons."""

    TRIANGLE = 0
    QUAD = 1
    CUBE = 2
    CONE = 3
    CYLINDER = 4
    MODEL = 5
    NORMAL_TEXTURE = 6
    SKYBOX = 7
    DISPLACEMENT = 8

    @property
    def is_colored(self) -> bool:
        """True for the flat-coloured primitives drawn with per-vertex colours."""
        return self <= ShapeId.CYLINDER


def _identity() -> np.ndarray:
    return np.eye(4)


@dataclass
class ViewState:
    """Mouse-driven translation, rotation and zoom of the displayed object."""

    shape: ShapeId = ShapeId.TRIANGLE
    line_mode: bool = False
    model_texture: bool = False
    camera_pos: Tuple[float, float, float] = (0.0, 0.0, 10.0)
    scale_num: float = 2.0
    translation: np.ndarray = field(default_factory=_identity)
    q_rot: Quaternion = field(default_factory=Quaternion)
    rotation: np.ndarray = field(default_factory=_identity)
    last_x: float = 400.0
    last_y: float = 300.0
    first_mouse: bool = True

    def on_mouse_move(
        self, x: float, y: float, left_pressed: bool, right_pressed: bool
    ) -> None:
        """Pan with the left button held, rotate with the right button held."""
        if self.first_mouse:
            self.last_x = float(x)
            self.last_y = float(y)
            self.first_mouse = False

        x_offset = float(x) - self.last_x
        y_offset = self.last_y - float(y)
        self.last_x = float(x)
        self.last_y = float(y)

        if left_pressed:
            x_offset *= TRANSLATE_SENSITIVITY
            y_offset *= TRANSLATE_SENSITIVITY
            self.translation = self.translation @ translation_matrix(
                (x_offset, y_offset, 0.0)
            )

        if right_pressed:
            x_offset *= ROTATE_SENSITIVITY
            y_offset *= ROTATE_SENSITIVITY
            pitch = angle_axis(-y_offset, (1.0, 0.0, 0.0))
            yaw = angle_axis(-x_offset, (0.0, 1.0, 0.0))
            self.q_rot = yaw * pitch * self.q_rot
            self.rotation = quaternion_matrix(self.q_rot)

    def on_scroll(self, offset: float) -> None:
        """Zoom in on a positive wheel offset, out on a negative one."""
        if offset > 0:
            self.scale_num += SCALE_STEP
        elif offset < 0:
            self.scale_num -= SCALE_STEP
            if self.scale_num < MIN_SCALE:
                self.scale_num = MIN_SCALE

    def model_matrix(self) -> np.ndarray:
        """Translation, then uniform scale, then rotation."""
        return self.translation @ scale_matrix(self.scale_num) @ self.rotation

    def mvp(self, width: int, height: int) -> np.ndarray:
        """Model-view-projection matrix for a framebuffer of the given size."""
        if height == 0:
            raise ValueError("framebuffer height must not be zero")
        ratio = width / float(height)
        view = look_at(self.camera_pos, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
        projection = perspective(
            math.radians(FIELD_OF_VIEW_DEGREES), ratio, NEAR_PLANE, FAR_PLANE
        )
        return projection @ view @ self.model_matrix()


def spherical_uv(position: Sequence[float]) -> Tuple[float, float]:
    """Texture coordinates from a point's longitude and latitude about the origin.

    The origin itself has no latitude; its v is NaN.
    """
    x, y, z = (float(c) for c in position)
    u = 0.5 + math.atan2(z, x) / (2.0 * math.pi)
    length = math.sqrt(x * x + y * y + z * z)
    if length == 0.0:
        return u, math.nan
    ratio = max(-1.0, min(1.0, y / length))
    v = 0.5 - math.asin(ratio) / math.pi
    return u, v


def model_buffers(model: ObjModel) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """GPU-ready arrays for a model.

    Returns interleaved position and normal rows (n x 6), spherical texture
    coordinates (n x 2) and zero-based triangle indices.
    """
    vertex_data = np.array(
        [np.concatenate([p.pos, p.normal]) for p in model.points], dtype=np.float32
    ).reshape(-1, 6)
    tex_coords = np.array(
        [spherical_uv(p.pos) for p in model.points], dtype=np.float32
    ).reshape(-1, 2)
    indices = np.array(
        [index - 1 for face in model.faces for index in face.pts], dtype=np.uint32
    )
    return vertex_data, tex_coords, indices