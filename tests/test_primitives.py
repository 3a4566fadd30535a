import numpy as np
import pytest

from meshview.primitives import (
    MAX_VERTICES,
    ColoredMesh,
    SkyBox,
    cone,
    cube,
    cylinder,
    quad,
    skybox,
    triangle,
)


def test_triangle_vertices_and_colors():
    mesh = triangle()
    assert mesh.count() == 3
    np.testing.assert_allclose(
        mesh.positions, [[-1, -1, 0], [1, -1, 0], [0, 1, 0]]
    )
    np.testing.assert_allclose(
        mesh.colors, [[1, 0, 0, 1], [0, 1, 0, 1], [0, 0, 1, 1]]
    )


def test_quad_two_triangles_share_corners():
    mesh = quad()
    assert mesh.count() == 6
    np.testing.assert_allclose(mesh.positions[0], mesh.positions[5])
    np.testing.assert_allclose(mesh.positions[2], mesh.positions[3])
    assert np.all(mesh.positions[:, 2] == 0.0)


def test_cube_faces_are_planar_and_coloured():
    mesh = cube()
    assert mesh.count() == 36
    assert set(np.unique(mesh.positions)) == {-1.0, 1.0}
    for face in range(6):
        block = mesh.positions[face * 6:(face + 1) * 6]
        constant_axes = [axis for axis in range(3) if len(set(block[:, axis])) == 1]
        assert len(constant_axes) == 1
    np.testing.assert_allclose(mesh.colors[:12], np.tile([1, 0, 0, 1], (12, 1)))
    np.testing.assert_allclose(mesh.colors[12:24], np.tile([0, 1, 0, 1], (12, 1)))
    np.testing.assert_allclose(mesh.colors[24:], np.tile([0, 0, 1, 1], (12, 1)))


def test_cone_geometry():
    slices = 12
    mesh = cone(radius=2.0, height=4.0, slices=slices)
    assert mesh.count() == 6 * slices
    base = mesh.positions[: 3 * slices].reshape(slices, 3, 3)
    sides = mesh.positions[3 * slices:].reshape(slices, 3, 3)
    np.testing.assert_allclose(base[:, 0], np.tile([0, -2, 0], (slices, 1)))
    np.testing.assert_allclose(sides[:, 0], np.tile([0, 2, 0], (slices, 1)))
    rim = np.concatenate([base[:, 1:], sides[:, 1:]]).reshape(-1, 3)
    np.testing.assert_allclose(rim[:, 1], -2.0)
    np.testing.assert_allclose(np.hypot(rim[:, 0], rim[:, 2]), 2.0, rtol=1e-5)


def test_cone_default_fits_capacity():
    assert cone().count() <= MAX_VERTICES


def test_cylinder_fills_capacity_by_default():
    mesh = cylinder()
    assert mesh.count() == MAX_VERTICES


def test_cylinder_rings():
    slices = 8
    mesh = cylinder(radius=1.5, height=3.0, slices=slices)
    assert mesh.count() == 12 * slices
    ys = np.unique(np.round(mesh.positions[:, 1], 5))
    np.testing.assert_allclose(ys, [-1.5, 1.5])
    off_axis = mesh.positions[np.hypot(mesh.positions[:, 0], mesh.positions[:, 2]) > 1e-6]
    np.testing.assert_allclose(
        np.hypot(off_axis[:, 0], off_axis[:, 2]), 1.5, rtol=1e-5
    )


@pytest.mark.parametrize("factory", [cone, cylinder])
def test_bad_slice_counts(factory):
    with pytest.raises(ValueError):
        factory(slices=0)
    with pytest.raises(ValueError):
        factory(slices=MAX_VERTICES)


def test_colored_mesh_length_mismatch():
    with pytest.raises(ValueError):
        ColoredMesh(positions=[(0, 0, 0)], colors=[])


def test_skybox_faces_and_vertices(tmp_path):
    box = skybox(str(tmp_path))
    assert isinstance(box, SkyBox)
    names = [p.rsplit("/", 1)[-1].rsplit("\\", 1)[-1] for p in box.faces]
    assert names == ["right.jpg", "left.jpg", "top.jpg", "bottom.jpg", "front.jpg", "back.jpg"]
    assert all(p.startswith(str(tmp_path)) for p in box.faces)
    assert box.vertices.shape == (36, 3)
    assert set(np.unique(box.vertices)) == {-1.0, 1.0}