"""Quaternions for representing 3D rotations."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterator

from .matrix4 import Matrix4
from .vec import EPS2, PI, Vec, cross
from .vec import dot as vec_dot
from .vec import norm as vec_norm


class Quat:
    """An immutable quaternion ``w + xi + yj + zk``; the default is the identity rotation."""

    __slots__ = ("_q",)

    def __init__(self, w: float = 1.0, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self._q = (float(w), float(x), float(y), float(z))

    @classmethod
    def from_scalar_vector(cls, w: float, v) -> Quat:
        """Build a quaternion from a scalar part and a 3-vector part."""
        x, y, z = v
        return cls(w, x, y, z)

    @property
    def w(self) -> float:
        return self._q[0]

    @property
    def x(self) -> float:
        return self._q[1]

    @property
    def y(self) -> float:
        return self._q[2]

    @property
    def z(self) -> float:
        return self._q[3]

    @property
    def vector(self) -> Vec:
        """The imaginary part as a 3-vector."""
        return Vec(*self._q[1:])

    def __getitem__(self, index: int) -> float:
        return self._q[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self._q)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quat):
            return NotImplemented
        return self._q == other._q

    def __hash__(self) -> int:
        return hash(self._q)

    def __repr__(self) -> str:
        return f"Quat({', '.join(repr(c) for c in self._q)})"

    def __add__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(*(a + b for a, b in zip(self._q, other._q)))

    def __sub__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(*(a - b for a, b in zip(self._q, other._q)))

    def __mul__(self, other):
        """Quaternion product, scaling by a number, or rotation of a 4-vector."""
        if isinstance(other, Quat):
            u, v = self.vector, other.vector
            return Quat.from_scalar_vector(
                self.w * other.w - vec_dot(u, v),
                v * self.w + u * other.w + cross(u, v),
            )
        if isinstance(other, Vec):
            if len(other) != 4:
                raise ValueError("a quaternion rotates only 4-vectors")
            r = self * (Quat(0.0, other[0], other[1], other[2]) * inv(self))
            return Vec(r[1], r[2], r[3], other[3])
        if isinstance(other, Real):
            return Quat(*(c * other for c in self._q))
        return NotImplemented

    def __truediv__(self, scalar: float) -> Quat:
        if not isinstance(scalar, Real):
            return NotImplemented
        inverse = 1 / scalar
        return Quat(*(c * inverse for c in self._q))

    @classmethod
    def make_x_rotation(cls, angle: float) -> Quat:
        """Rotation about the x axis by ``angle`` degrees."""
        h = 0.5 * angle * PI / 180
        return cls(math.cos(h), math.sin(h), 0.0, 0.0)

    @classmethod
    def make_y_rotation(cls, angle: float) -> Quat:
        """Rotation about the y axis by ``angle`` degrees."""
        h = 0.5 * angle * PI / 180
        return cls(math.cos(h), 0.0, math.sin(h), 0.0)

    @classmethod
    def make_z_rotation(cls, angle: float) -> Quat:
        """Rotation about the z axis by ``angle`` degrees."""
        h = 0.5 * angle * PI / 180
        return cls(math.cos(h), 0.0, 0.0, math.sin(h))


def dot(q: Quat, p: Quat) -> float:
    """Four-component dot product."""
    return sum(a * b for a, b in zip(q, p))


def norm2(q: Quat) -> float:
    """Squared length of ``q``."""
    return dot(q, q)


def inv(q: Quat) -> Quat:
    """Multiplicative inverse; raises ValueError for a near-zero quaternion."""
    n = norm2(q)
    if n <= EPS2:
        raise ValueError("cannot invert a quaternion of (near) zero length")
    return Quat(q.w, -q.x, -q.y, -q.z) * (1.0 / n)


def normalize(q: Quat) -> Quat:
    """``q`` scaled to unit length."""
    return q / math.sqrt(norm2(q))


def quat_to_matrix(q: Quat) -> Matrix4:
    """The rotation matrix of ``q``; the zero matrix if ``q`` is near zero."""
    n = norm2(q)
    if n < EPS2:
        return Matrix4.filled(0.0)
    w, x, y, z = q
    two = 2 / n
    return Matrix4.identity().replace(
        {
            (0, 0): 1 - (y * y + z * z) * two,
            (0, 1): (x * y - w * z) * two,
            (0, 2): (x * z + y * w) * two,
            (1, 0): (x * y + w * z) * two,
            (1, 1): 1 - (x * x + z * z) * two,
            (1, 2): (y * z - x * w) * two,
            (2, 0): (x * z - y * w) * two,
            (2, 1): (y * z + x * w) * two,
            (2, 2): 1 - (x * x + y * y) * two,
        }
    )


def quat_pow(q: Quat, p: float) -> Quat:
    """Raise a unit quaternion to the power ``p``, scaling its rotation angle."""
    y = vec_norm(q.vector)
    if y == 0.0:
        return q
    angle = math.atan2(y, q.w)
    s = math.sin(p * angle)
    return Quat(math.cos(angle * p), s * q.x / y, s * q.y / y, s * q.z / y)