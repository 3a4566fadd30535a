"""Meshes carrying texture coordinates and tangent frames for normal mapping."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

VERTEX_STRIDE = 14
"""Floats per vertex in the textured layouts."""


@dataclass
class IndexedMesh:
    """Interleaved vertex rows and triangle indices.

    For ball meshes each row is position (3), uv (2), normal (3),
    tangent (3), bitangent (3).
    """

    vertices: np.ndarray
    indices: np.ndarray

    @property
    def positions(self) -> np.ndarray:
        return self.vertices[:, 0:3]

    @property
    def uvs(self) -> np.ndarray:
        return self.vertices[:, 3:5]

    @property
    def normals(self) -> np.ndarray:
        return self.vertices[:, 5:8]

    @property
    def tangents(self) -> np.ndarray:
        return self.vertices[:, 8:11]

    @property
    def bitangents(self) -> np.ndarray:
        return self.vertices[:, 11:14]


def _tangent_basis(p1, p2, p3, uv1, uv2, uv3):
    edge1 = p2 - p1
    edge2 = p3 - p1
    duv1 = uv2 - uv1
    duv2 = uv3 - uv1
    f = 1.0 / (duv1[0] * duv2[1] - duv2[0] * duv1[1])
    tangent = f * (duv2[1] * edge1 - duv1[1] * edge2)
    bitangent = f * (-duv2[0] * edge1 + duv1[0] * edge2)
    return tangent, bitangent


def wall_vertices() -> np.ndarray:
    """Six vertices of a textured square in the z=0 plane facing +z.

    Each row is position (3), normal (3), uv (2), tangent (3), bitangent (3).
    """
    p1, p2, p3, p4 = (
        np.array(p, dtype=np.float64)
        for p in ((-1.0, 1.0, 0.0), (-1.0, -1.0, 0.0), (1.0, -1.0, 0.0), (1.0, 1.0, 0.0))
    )
    uv1, uv2, uv3, uv4 = (
        np.array(uv, dtype=np.float64)
        for uv in ((0.0, 1.0), (0.0, 0.0), (1.0, 0.0), (1.0, 1.0))
    )
    normal = np.array((0.0, 0.0, 1.0))

    t1, b1 = _tangent_basis(p1, p2, p3, uv1, uv2, uv3)
    t2, b2 = _tangent_basis(p1, p3, p4, uv1, uv3, uv4)

    corners = [
        (p1, uv1, t1, b1),
        (p2, uv2, t1, b1),
        (p3, uv3, t1, b1),
        (p1, uv1, t2, b2),
        (p3, uv3, t2, b2),
        (p4, uv4, t2, b2),
    ]
    rows = [np.concatenate([p, normal, uv, t, b]) for p, uv, t, b in corners]
    return np.array(rows, dtype=np.float32)


def _normalize_rows(vectors: np.ndarray) -> np.ndarray:
    lengths = np.linalg.norm(vectors, axis=1, keepdims=True)
    safe = np.where(lengths > 0.0, lengths, 1.0)
    return np.where(lengths > 0.0, vectors / safe, vectors)


def ball(x_segments: int = 64, y_segments: int = 64, radius: float = 1.0) -> IndexedMesh:
    """A UV sphere centred on the origin with per-vertex tangent frames.

    Vertices run latitude by latitude from the +y pole, with one extra column
    closing the seam. Tangents and bitangents are summed over the triangles
    sharing a vertex and normalized; a vertex whose sum is zero keeps zeros.
    """
    if x_segments < 1 or y_segments < 1:
        raise ValueError("segment counts must be at least 1")
    if radius <= 0:
        raise ValueError("radius must be positive")

    u = np.arange(x_segments + 1, dtype=np.float64) / x_segments
    v = np.arange(y_segments + 1, dtype=np.float64) / y_segments
    uu, vv = np.meshgrid(u, v)
    uu, vv = uu.ravel(), vv.ravel()

    sin_v = np.sin(vv * math.pi)
    unit = np.stack(
        [
            np.cos(uu * 2.0 * math.pi) * sin_v,
            np.cos(vv * math.pi),
            np.sin(uu * 2.0 * math.pi) * sin_v,
        ],
        axis=1,
    )
    positions = radius * unit
    uvs = np.stack([uu, vv], axis=1)

    row = x_segments + 1
    ys, xs = np.meshgrid(np.arange(y_segments), np.arange(x_segments), indexing="ij")
    a = (ys * row + xs).ravel()
    b = ((ys + 1) * row + xs).ravel()
    indices = np.stack([b, a, a + 1, b, a + 1, b + 1], axis=1).ravel().astype(np.uint32)

    tris = indices.reshape(-1, 3).astype(np.int64)
    p = positions[tris]
    t = uvs[tris]
    d_pos1 = p[:, 1] - p[:, 0]
    d_pos2 = p[:, 2] - p[:, 0]
    d_uv1 = t[:, 1] - t[:, 0]
    d_uv2 = t[:, 2] - t[:, 0]
    r = 1.0 / (d_uv1[:, 0] * d_uv2[:, 1] - d_uv1[:, 1] * d_uv2[:, 0])
    tri_tangent = (d_pos1 * d_uv2[:, 1:2] - d_pos2 * d_uv1[:, 1:2]) * r[:, None]
    tri_bitangent = (d_pos2 * d_uv1[:, 0:1] - d_pos1 * d_uv2[:, 0:1]) * r[:, None]

    tangents = np.zeros_like(positions)
    bitangents = np.zeros_like(positions)
    for corner in range(3):
        np.add.at(tangents, tris[:, corner], tri_tangent)
        np.add.at(bitangents, tris[:, corner], tri_bitangent)

    vertices = np.concatenate(
        [positions, uvs, unit, _normalize_rows(tangents), _normalize_rows(bitangents)],
        axis=1,
    ).astype(np.float32)
    return IndexedMesh(vertices=vertices, indices=indices)