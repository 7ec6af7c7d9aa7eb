"""Rigid-body transforms made of a translation and a rotation."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from .matrix4 import Matrix4
from .quat import Quat
from .quat import inv as quat_inv
from .quat import quat_to_matrix
from .vec import Vec


@dataclass(frozen=True)
class RigTForm:
    """A rotation followed by a translation."""

    translation: Vec = field(default_factory=lambda: Vec(0.0, 0.0, 0.0))
    rotation: Quat = field(default_factory=Quat)

    def with_translation(self, t: Vec) -> RigTForm:
        """A copy with the translation replaced."""
        return dataclasses.replace(self, translation=t)

    def with_rotation(self, r: Quat) -> RigTForm:
        """A copy with the rotation replaced."""
        return dataclasses.replace(self, rotation=r)

    def __mul__(self, other):
        """Compose with another transform, or apply to a 4-vector."""
        if isinstance(other, RigTForm):
            moved = self.rotation * other.translation.resized(4)
            return RigTForm(
                self.translation + moved.resized(3),
                self.rotation * other.rotation,
            )
        if isinstance(other, Vec):
            return Matrix4.make_translation(self.translation) * quat_to_matrix(self.rotation) * other
        return NotImplemented


def inv(tform: RigTForm) -> RigTForm:
    """Inverse of a rigid-body transform."""
    i = quat_inv(tform.rotation)
    return RigTForm(-(i * tform.translation.resized(4)).resized(3), i)


def trans_fact(tform: RigTForm) -> RigTForm:
    """The translation part alone."""
    return RigTForm(translation=tform.translation)


def lin_fact(tform: RigTForm) -> RigTForm:
    """The rotation part alone."""
    return RigTForm(rotation=tform.rotation)


def rig_tform_to_matrix(tform: RigTForm) -> Matrix4:
    """The 4x4 matrix of ``tform``."""
    return Matrix4.make_translation(tform.translation) * quat_to_matrix(tform.rotation)