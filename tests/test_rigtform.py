import pytest

from lightscene.matrix4 import Matrix4
from lightscene.quat import Quat
from lightscene.rigtform import (
    RigTForm,
    inv,
    lin_fact,
    rig_tform_to_matrix,
    trans_fact,
)
from lightscene.vec import Vec


def sample():
    return RigTForm(Vec(1.0, -2.0, 3.0), Quat.make_y_rotation(40) * Quat.make_x_rotation(15))


def test_default_is_identity():
    t = RigTForm()
    assert t.translation == Vec(0, 0, 0)
    assert t.rotation == Quat()
    assert rig_tform_to_matrix(t) == Matrix4.identity()


def test_translation_applies_to_points_only():
    t = RigTForm(Vec(1, 2, 3))
    assert t * Vec(0, 0, 0, 1) == Vec(1, 2, 3, 1)
    assert t * Vec(4, 5, 6, 0) == Vec(4, 5, 6, 0)


def test_inverse_undoes_transform():
    t = sample()
    p = Vec(0.5, -1.0, 2.0, 1.0)
    assert list(inv(t) * (t * p)) == pytest.approx(list(p), abs=1e-9)
    assert list(rig_tform_to_matrix(t * inv(t))) == pytest.approx(
        list(Matrix4.identity()), abs=1e-9
    )


def test_composition_matches_sequential_application():
    a = sample()
    b = RigTForm(Vec(-0.3, 0.7, 2.0), Quat.make_z_rotation(-65))
    p = Vec(1.5, 0.25, -4.0, 1.0)
    assert list((a * b) * p) == pytest.approx(list(a * (b * p)), abs=1e-9)


def test_composition_matches_matrix_product():
    a = sample()
    b = RigTForm(Vec(2.0, 0.0, -1.0), Quat.make_x_rotation(90))
    expected = rig_tform_to_matrix(a) * rig_tform_to_matrix(b)
    assert list(rig_tform_to_matrix(a * b)) == pytest.approx(list(expected), abs=1e-9)


def test_factors_recompose():
    t = sample()
    assert trans_fact(t).rotation == Quat()
    assert lin_fact(t).translation == Vec(0, 0, 0)
    assert list(rig_tform_to_matrix(trans_fact(t) * lin_fact(t))) == pytest.approx(
        list(rig_tform_to_matrix(t)), abs=1e-9
    )


def test_with_methods_return_copies():
    t = sample()
    moved = t.with_translation(Vec(9, 8, 7))
    turned = t.with_rotation(Quat())
    assert moved.translation == Vec(9, 8, 7)
    assert moved.rotation == t.rotation
    assert turned.rotation == Quat()
    assert t.translation == Vec(1.0, -2.0, 3.0)