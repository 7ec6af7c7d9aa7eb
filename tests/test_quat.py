import math

import pytest

from lightscene.matrix4 import Matrix4
from lightscene.quat import (
    Quat,
    dot,
    inv,
    norm2,
    normalize,
    quat_pow,
    quat_to_matrix,
)
from lightscene.vec import Vec


def test_default_is_identity():
    assert list(Quat()) == [1.0, 0.0, 0.0, 0.0]


def test_from_scalar_vector_and_indexing():
    q = Quat.from_scalar_vector(2, Vec(3, 4, 5))
    assert (q[0], q[1], q[2], q[3]) == (2.0, 3.0, 4.0, 5.0)
    assert q.vector == Vec(3, 4, 5)


def test_add_sub_scale_divide():
    a = Quat(1, 2, 3, 4)
    b = Quat(4, 3, 2, 1)
    assert (a + b) - b == a
    assert a * 2 == Quat(2, 4, 6, 8)
    assert (a * 2) / 2 == a


def test_identity_multiplication():
    q = Quat(0.3, -1.2, 2.5, 0.7)
    assert list(Quat() * q) == pytest.approx(list(q), abs=1e-9)
    assert list(q * Quat()) == pytest.approx(list(q), abs=1e-9)


def test_inverse_product_is_identity():
    q = Quat(0.3, -1.2, 2.5, 0.7)
    assert list(q * inv(q)) == pytest.approx([1.0, 0.0, 0.0, 0.0], abs=1e-9)
    assert list(inv(q) * q) == pytest.approx([1.0, 0.0, 0.0, 0.0], abs=1e-9)


def test_inverse_of_zero_raises():
    with pytest.raises(ValueError):
        inv(Quat(0, 0, 0, 0))


def test_dot_and_norm2():
    a = Quat(1, 2, 3, 4)
    assert dot(a, Quat()) == 1.0
    assert norm2(a) == dot(a, a)


def test_normalize_gives_unit_length():
    assert norm2(normalize(Quat(3, -1, 2, 5))) == pytest.approx(1.0)


def test_rotation_of_vector_keeps_w_and_length():
    q = Quat.make_y_rotation(37)
    v = Vec(1.0, 2.0, -3.0, 0.5)
    r = q * v
    assert r[3] == 0.5
    assert sum(c * c for c in r[:3]) == pytest.approx(sum(c * c for c in v[:3]))


def test_z_rotation_quarter_turn():
    rotated = Quat.make_z_rotation(90) * Vec(1, 0, 0, 1)
    assert list(rotated) == pytest.approx([0.0, 1.0, 0.0, 1.0], abs=1e-9)


@pytest.mark.parametrize(
    "quat_maker, matrix_maker",
    [
        (Quat.make_x_rotation, Matrix4.make_x_rotation),
        (Quat.make_y_rotation, Matrix4.make_y_rotation),
        (Quat.make_z_rotation, Matrix4.make_z_rotation),
    ],
)
@pytest.mark.parametrize("angle", [0, 25, -70, 180])
def test_quat_to_matrix_matches_matrix_rotations(quat_maker, matrix_maker, angle):
    result = quat_to_matrix(quat_maker(angle))
    assert list(result) == pytest.approx(list(matrix_maker(angle)), abs=1e-9)


def test_quat_to_matrix_agrees_with_vector_rotation():
    q = Quat.make_x_rotation(20) * Quat.make_z_rotation(-45)
    v = Vec(0.4, -2.0, 1.5, 1.0)
    assert list(quat_to_matrix(q) * v) == pytest.approx(list(q * v), abs=1e-9)


def test_quat_to_matrix_of_zero_is_zero_matrix():
    assert quat_to_matrix(Quat(0, 0, 0, 0)) == Matrix4.filled(0.0)


def test_quat_pow_doubles_angle():
    doubled = quat_pow(Quat.make_z_rotation(30), 2)
    assert list(doubled) == pytest.approx(list(Quat.make_z_rotation(60)), abs=1e-9)


def test_quat_pow_half_squares_back():
    q = Quat.make_x_rotation(80)
    half = quat_pow(q, 0.5)
    assert list(half * half) == pytest.approx(list(q), abs=1e-9)


def test_quat_pow_of_pure_scalar_is_unchanged():
    q = Quat(1, 0, 0, 0)
    assert quat_pow(q, 3.5) == q


def test_equality_and_hash():
    assert Quat(1, 2, 3, 4) == Quat(1, 2, 3, 4)
    assert len({Quat(1, 2, 3, 4), Quat(1, 2, 3, 4)}) == 1
    assert math.isclose(Quat.make_x_rotation(0).w, 1.0)