import math

import numpy as np
import pytest

from meshview.objmodel import parse_obj
from meshview.transforms import angle_axis
from meshview.viewer import ShapeId, ViewState, model_buffers, spherical_uv


def test_shape_ids_follow_button_order():
    assert [s.name for s in ShapeId][:3] == ["TRIANGLE", "QUAD", "CUBE"]
    assert ShapeId(5) is ShapeId.MODEL
    assert ShapeId.CYLINDER.is_colored
    assert not ShapeId.MODEL.is_colored
    assert not ShapeId.DISPLACEMENT.is_colored


def test_initial_model_matrix_is_scale_two():
    state = ViewState()
    np.testing.assert_allclose(state.model_matrix(), np.diag([2.0, 2.0, 2.0, 1.0]))


def test_scroll_up_and_down_are_inverse():
    state = ViewState()
    state.on_scroll(1)
    assert state.scale_num == pytest.approx(2.1)
    state.on_scroll(-1)
    assert state.scale_num == pytest.approx(2.0)


def test_scroll_zero_changes_nothing():
    state = ViewState()
    state.on_scroll(0)
    assert state.scale_num == 2.0


def test_scroll_down_clamps_at_minimum():
    state = ViewState()
    for _ in range(100):
        state.on_scroll(-1)
    assert state.scale_num == pytest.approx(0.1)


def test_first_mouse_move_does_not_translate():
    state = ViewState()
    state.on_mouse_move(123.0, 45.0, True, False)
    np.testing.assert_allclose(state.translation, np.eye(4))
    assert (state.last_x, state.last_y) == (123.0, 45.0)


def test_left_drag_translates():
    state = ViewState()
    state.on_mouse_move(100.0, 100.0, False, False)
    state.on_mouse_move(110.0, 90.0, True, False)
    np.testing.assert_allclose(state.model_matrix()[:3, 3], [0.1, 0.1, 0.0])


def test_move_without_buttons_keeps_transform():
    state = ViewState()
    state.on_mouse_move(100.0, 100.0, False, False)
    state.on_mouse_move(300.0, 20.0, False, False)
    np.testing.assert_allclose(state.model_matrix(), np.diag([2.0, 2.0, 2.0, 1.0]))


def test_right_drag_horizontal_is_yaw():
    state = ViewState()
    state.on_mouse_move(100.0, 100.0, False, False)
    state.on_mouse_move(110.0, 100.0, False, True)
    expected = angle_axis(-10.0 * 0.005, (0.0, 1.0, 0.0))
    assert state.q_rot.w == pytest.approx(expected.w)
    assert state.q_rot.y == pytest.approx(expected.y)
    assert state.q_rot.x == pytest.approx(0.0)


def test_right_drag_keeps_rotation_orthonormal():
    state = ViewState()
    state.on_mouse_move(0.0, 0.0, False, False)
    for x, y in [(30.0, 12.0), (-40.0, 80.0), (90.0, -5.0)]:
        state.on_mouse_move(x, y, False, True)
    r = state.rotation[:3, :3]
    np.testing.assert_allclose(r @ r.T, np.eye(3), atol=1e-12)
    assert np.linalg.det(r) == pytest.approx(1.0)


def test_mvp_puts_origin_at_screen_centre():
    state = ViewState()
    clip = state.mvp(700, 700) @ np.array([0.0, 0.0, 0.0, 1.0])
    assert clip[0] == pytest.approx(0.0)
    assert clip[1] == pytest.approx(0.0)
    assert clip[3] == pytest.approx(10.0)


def test_mvp_rejects_zero_height():
    with pytest.raises(ValueError):
        ViewState().mvp(700, 0)


def test_spherical_uv_on_axes():
    assert spherical_uv((1.0, 0.0, 0.0)) == pytest.approx((0.5, 0.5))
    assert spherical_uv((0.0, 1.0, 0.0))[1] == pytest.approx(0.0)


def test_spherical_uv_independent_of_radius():
    assert spherical_uv((0.3, -0.2, 0.5)) == pytest.approx(spherical_uv((3.0, -2.0, 5.0)))


def test_spherical_uv_origin_has_nan_latitude():
    u, v = spherical_uv((0.0, 0.0, 0.0))
    assert u == pytest.approx(0.5)
    assert math.isnan(v)


def test_model_buffers_layout():
    model = parse_obj(
        [
            "v 1 0 0",
            "v 0 1 0",
            "v 0 0 1",
            "v 1 1 1",
            "f 1 2 3",
            "f 2 4 3",
        ]
    )
    vertex_data, tex_coords, indices = model_buffers(model)
    assert vertex_data.shape == (4, 6)
    assert tex_coords.shape == (4, 2)
    assert indices.tolist() == [0, 1, 2, 1, 3, 2]
    for row, point, uv in zip(vertex_data, model.points, tex_coords):
        np.testing.assert_allclose(row[:3], point.pos)
        np.testing.assert_allclose(row[3:], point.normal)
        np.testing.assert_allclose(uv, spherical_uv(point.pos), rtol=1e-6)