import numpy as np
import pytest

from meshview.textured import VERTEX_STRIDE, ball, wall_vertices


def test_wall_layout():
    rows = wall_vertices()
    assert rows.shape == (6, VERTEX_STRIDE)
    np.testing.assert_allclose(rows[:, 3:6], np.tile([0, 0, 1], (6, 1)))
    np.testing.assert_allclose(rows[0], rows[3][:8].tolist() + rows[0][8:].tolist())
    np.testing.assert_allclose(rows[:, 2], 0.0)


def test_wall_uvs_follow_positions():
    rows = wall_vertices()
    np.testing.assert_allclose(rows[:, 6:8], (rows[:, 0:2] + 1.0) / 2.0)


def test_wall_tangent_frame_is_in_plane_and_orthogonal():
    rows = wall_vertices()
    tangents, bitangents = rows[:, 8:11], rows[:, 11:14]
    np.testing.assert_allclose(tangents[:, 2], 0.0)
    np.testing.assert_allclose(tangents[:, 1], 0.0, atol=1e-6)
    assert np.all(tangents[:, 0] > 0)
    np.testing.assert_allclose(np.sum(tangents * bitangents, axis=1), 0.0, atol=1e-6)
    assert np.all(bitangents[:, 1] > 0)


def test_ball_sizes():
    mesh = ball(8, 6)
    assert mesh.vertices.shape == (9 * 7, VERTEX_STRIDE)
    assert mesh.indices.shape == (6 * 8 * 6,)
    assert mesh.indices.max() < len(mesh.vertices)


def test_ball_positions_normals_and_uvs():
    mesh = ball(16, 12, radius=2.5)
    np.testing.assert_allclose(np.linalg.norm(mesh.positions, axis=1), 2.5, rtol=1e-5)
    np.testing.assert_allclose(np.linalg.norm(mesh.normals, axis=1), 1.0, rtol=1e-5)
    np.testing.assert_allclose(mesh.normals * 2.5, mesh.positions, atol=1e-5)
    assert mesh.uvs.min() >= 0.0 and mesh.uvs.max() <= 1.0


def test_ball_tangents_are_unit_or_zero():
    mesh = ball()
    for vectors in (mesh.tangents, mesh.bitangents):
        lengths = np.linalg.norm(vectors, axis=1)
        assert np.all((np.abs(lengths - 1.0) < 1e-4) | (lengths == 0.0))
        assert not np.isnan(vectors).any()


def test_ball_equator_tangent_follows_u():
    segments = 64
    mesh = ball(segments, segments)
    row = segments + 1
    index = (segments // 2) * row + segments // 4
    tangent = mesh.tangents[index]
    normal = mesh.normals[index]
    expected = np.cross([0.0, 1.0, 0.0], normal)
    assert float(np.dot(tangent, -expected)) > 0.99 or float(np.dot(tangent, expected)) > 0.99
    assert abs(float(np.dot(tangent, normal))) < 0.05


def test_ball_rejects_bad_arguments():
    with pytest.raises(ValueError):
        ball(0, 4)
    with pytest.raises(ValueError):
        ball(4, 0)
    with pytest.raises(ValueError):
        ball(4, 4, radius=0.0)