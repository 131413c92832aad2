import math

import pytest

from phantomcore.mat3 import Mat3, SingularMatrixError
from phantomcore.mat4 import (
    Mat4,
    compose,
    decompose,
    polar_decompose,
    rotation_x,
    rotation_y,
    rotation_z,
    scale_matrix,
    with_translation,
)
from phantomcore.vector import Vec3, Vec4

SAMPLE = Mat4(
    2.0, 1.0, 0.0, 0.0,
    0.0, 3.0, 1.0, 0.0,
    1.0, 0.0, 4.0, 0.0,
    5.0, -2.0, 7.0, 1.0,
)


def assert_mat_close(a, b, tol=1e-6):
    assert a.elements == pytest.approx(b.elements, abs=tol)


def test_default_is_identity():
    assert Mat4() == Mat4.identity()
    assert Mat4.diagonal(1.0) == Mat4.identity()


def test_wrong_element_count_raises():
    with pytest.raises(ValueError):
        Mat4(1.0, 2.0)


def test_identity_is_neutral_for_multiplication():
    assert Mat4.identity() * SAMPLE == SAMPLE
    assert SAMPLE * Mat4.identity() == SAMPLE


def test_transpose_twice_is_original():
    assert SAMPLE.transpose().transpose() == SAMPLE
    assert SAMPLE.transpose().elements[1] == SAMPLE.elements[4]


def test_inverse_times_matrix_is_identity():
    assert_mat_close(SAMPLE.inverse() * SAMPLE, Mat4.identity())
    assert_mat_close(SAMPLE * SAMPLE.inverse(), Mat4.identity())


def test_inverse_of_singular_raises():
    with pytest.raises(SingularMatrixError):
        Mat4.diagonal(0.0).inverse()


def test_translation_moves_point_not_direction():
    m = Mat4.translation(Vec3(1.0, 2.0, 3.0))
    moved = m * Vec4(4.0, 5.0, 6.0, 1.0)
    assert tuple(moved) == pytest.approx((5.0, 7.0, 9.0, 1.0))
    direction = m * Vec4(4.0, 5.0, 6.0, 0.0)
    assert tuple(direction) == pytest.approx((4.0, 5.0, 6.0, 0.0))


def test_translation_inverse_undoes_translation():
    m = Mat4.translation(Vec3(1.0, -2.0, 3.5))
    assert_mat_close(m.inverse() * m, Mat4.identity())


def test_rotation_about_z_quarter_turn():
    m = Mat4.rotation(90.0, Vec3(0.0, 0.0, 1.0))
    result = m * Vec4(1.0, 0.0, 0.0, 0.0)
    assert tuple(result) == pytest.approx((0.0, 1.0, 0.0, 0.0), abs=1e-6)


def test_scaling_and_scale_matrix_agree():
    assert Mat4.scaling(Vec3(2.0, 3.0, 4.0)) == scale_matrix(2.0, 3.0, 4.0)
    scaled = scale_matrix(2.0, 3.0, 4.0) * Vec4(1.0, 1.0, 1.0, 1.0)
    assert tuple(scaled) == pytest.approx((2.0, 3.0, 4.0, 1.0))


def test_column_returns_vec4_and_rejects_bad_index():
    assert SAMPLE.column(3) == Vec4(5.0, -2.0, 7.0, 1.0)
    with pytest.raises(IndexError):
        SAMPLE.column(4)


def test_orthographic_maps_box_corners_to_unit_range():
    m = Mat4.orthographic(-10.0, 30.0, -5.0, 15.0, 1.0, 100.0)
    low = m * Vec4(-10.0, -5.0, 1.0, 1.0)
    high = m * Vec4(30.0, 15.0, 1.0, 1.0)
    assert (low.x, low.y) == pytest.approx((-1.0, -1.0))
    assert (high.x, high.y) == pytest.approx((1.0, 1.0))


def test_perspective_sets_projection_row():
    m = Mat4.perspective(math.pi / 2, 2.0, 1.0, 100.0)
    assert m.elements[11] == -1.0
    assert m.elements[0] == pytest.approx(m.elements[5] / 2.0)
    assert m.elements[15] == 1.0


def test_look_at_maps_eye_to_origin_and_focal_onto_negative_z():
    eye = Vec3(3.0, 4.0, 5.0)
    focal = Vec3(0.0, 0.0, 0.0)
    view = Mat4.look_at(eye, focal, Vec3(0.0, 1.0, 0.0))
    at_eye = view * Vec4(3.0, 4.0, 5.0, 1.0)
    assert tuple(at_eye) == pytest.approx((0.0, 0.0, 0.0, 1.0), abs=1e-6)
    at_focal = view * Vec4(0.0, 0.0, 0.0, 1.0)
    assert at_focal.x == pytest.approx(0.0, abs=1e-6)
    assert at_focal.y == pytest.approx(0.0, abs=1e-6)
    assert at_focal.z < 0
    assert eye == Vec3(3.0, 4.0, 5.0)


def test_axis_rotations_with_zero_angle_are_identity():
    for rot in (rotation_x, rotation_y, rotation_z):
        assert_mat_close(rot(0.0), Mat4.identity())


def test_axis_rotations_are_orthogonal():
    for rot in (rotation_x, rotation_y, rotation_z):
        m = rot(0.7)
        assert_mat_close(m * m.transpose(), Mat4.identity())


def test_with_translation_only_changes_translation_column():
    m = with_translation(SAMPLE, 9.0, 8.0, 7.0)
    assert m.elements[12:15] == (9.0, 8.0, 7.0)
    assert m.elements[:12] == SAMPLE.elements[:12]
    assert m.elements[15] == SAMPLE.elements[15]


def test_polar_decompose_reconstructs_input():
    m = Mat3(2.0, 0.5, 0.0, 0.3, 1.5, 0.2, 0.0, 0.1, 3.0)
    u, p = polar_decompose(m)
    assert (u * p).elements == pytest.approx(m.elements, abs=1e-6)
    assert (u * u.transpose()).elements == pytest.approx(Mat3().elements, abs=1e-6)


def test_polar_decompose_singular_raises():
    with pytest.raises(SingularMatrixError):
        polar_decompose(Mat3.diagonal(0.0))


def test_compose_decompose_round_trip():
    rotation = Vec3(0.3, -0.2, 0.5)
    scalar = Vec3(2.0, 1.5, 0.5)
    translation = Vec3(1.0, -4.0, 2.5)
    m = compose(rotation, scalar, translation)
    r, s, t = decompose(m)
    assert tuple(r) == pytest.approx(tuple(rotation), abs=1e-5)
    assert tuple(s) == pytest.approx(tuple(scalar), abs=1e-5)
    assert tuple(t) == pytest.approx(tuple(translation), abs=1e-9)


def test_compose_with_no_rotation_or_scale_is_translation():
    m = compose(Vec3(), Vec3(1.0, 1.0, 1.0), Vec3(1.0, 2.0, 3.0))
    assert_mat_close(m, Mat4.translation(Vec3(1.0, 2.0, 3.0)))


def test_str_layout():
    text = str(Mat4.identity())
    lines = text.splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("mat4x4: (")
    assert lines[1].startswith("        (")