"""Immutable 4x4 matrices for affine and projective transforms."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, Iterator, Mapping

from .vec import EPS, EPS2, EPS3, PI, Vec

_SIZE = 4


def _flat(row: int, col: int) -> int:
    if not (0 <= row < _SIZE and 0 <= col < _SIZE):
        raise IndexError(f"matrix index ({row}, {col}) out of range")
    return row * _SIZE + col


class Matrix4:
    """A 4x4 matrix of floats stored in row-major order; ``m[row, col]`` reads an entry."""

    __slots__ = ("_data",)

    def __init__(self, values: Iterable[float]) -> None:
        data = tuple(float(v) for v in values)
        if len(data) != _SIZE * _SIZE:
            raise ValueError(f"a 4x4 matrix needs 16 values, got {len(data)}")
        self._data = data

    @classmethod
    def identity(cls) -> Matrix4:
        """The identity matrix."""
        return cls(1.0 if row == col else 0.0 for row in range(_SIZE) for col in range(_SIZE))

    @classmethod
    def filled(cls, value: float) -> Matrix4:
        """A matrix whose every entry is ``value``."""
        return cls([value] * (_SIZE * _SIZE))

    @classmethod
    def from_column_major(cls, values: Iterable[float]) -> Matrix4:
        """Build a matrix from 16 values listed column after column."""
        return transpose(cls(values))

    def to_column_major(self) -> list[float]:
        """The 16 entries listed column after column."""
        return list(transpose(self)._data)

    def __getitem__(self, key):
        if isinstance(key, tuple):
            row, col = key
            return self._data[_flat(row, col)]
        return self._data[key]

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        rows = (
            "[" + ", ".join(repr(self._data[_flat(r, c)]) for c in range(_SIZE)) + "]"
            for r in range(_SIZE)
        )
        return f"Matrix4([{', '.join(rows)}])"

    def __add__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(a + b for a, b in zip(self._data, other._data))

    def __sub__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(a - b for a, b in zip(self._data, other._data))

    def __mul__(self, other):
        if isinstance(other, Matrix4):
            return Matrix4(
                sum(self[i, j] * other[j, k] for j in range(_SIZE))
                for i in range(_SIZE)
                for k in range(_SIZE)
            )
        if isinstance(other, Vec):
            if len(other) != _SIZE:
                raise ValueError("a 4x4 matrix multiplies only 4-vectors")
            return Vec(*(sum(self[i, j] * other[j] for j in range(_SIZE)) for i in range(_SIZE)))
        if isinstance(other, Real):
            return Matrix4(x * other for x in self._data)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Matrix4:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Matrix4(x * scalar for x in self._data)

    def replace(self, updates: Mapping[tuple[int, int], float]) -> Matrix4:
        """Return a copy with the entries at the given ``(row, col)`` keys replaced."""
        data = list(self._data)
        for (row, col), value in updates.items():
            data[_flat(row, col)] = float(value)
        return Matrix4(data)

    @classmethod
    def make_x_rotation(cls, angle: float) -> Matrix4:
        """Rotation about the x axis by ``angle`` degrees."""
        rad = angle * PI / 180
        return cls.make_x_rotation_cs(math.cos(rad), math.sin(rad))

    @classmethod
    def make_y_rotation(cls, angle: float) -> Matrix4:
        """Rotation about the y axis by ``angle`` degrees."""
        rad = angle * PI / 180
        return cls.make_y_rotation_cs(math.cos(rad), math.sin(rad))

    @classmethod
    def make_z_rotation(cls, angle: float) -> Matrix4:
        """Rotation about the z axis by ``angle`` degrees."""
        rad = angle * PI / 180
        return cls.make_z_rotation_cs(math.cos(rad), math.sin(rad))

    @classmethod
    def make_x_rotation_cs(cls, c: float, s: float) -> Matrix4:
        """Rotation about the x axis given the cosine and sine of the angle."""
        return cls.identity().replace({(1, 1): c, (2, 2): c, (1, 2): -s, (2, 1): s})

    @classmethod
    def make_y_rotation_cs(cls, c: float, s: float) -> Matrix4:
        """Rotation about the y axis given the cosine and sine of the angle."""
        return cls.identity().replace({(0, 0): c, (2, 2): c, (0, 2): s, (2, 0): -s})

    @classmethod
    def make_z_rotation_cs(cls, c: float, s: float) -> Matrix4:
        """Rotation about the z axis given the cosine and sine of the angle."""
        return cls.identity().replace({(0, 0): c, (1, 1): c, (0, 1): -s, (1, 0): s})

    @classmethod
    def make_translation(cls, t) -> Matrix4:
        """Translation by the 3-vector ``t``."""
        tx, ty, tz = t
        return cls.identity().replace({(0, 3): tx, (1, 3): ty, (2, 3): tz})

    @classmethod
    def make_scale(cls, s) -> Matrix4:
        """Axis-aligned scale by the 3-vector ``s``."""
        sx, sy, sz = s
        return cls.identity().replace({(0, 0): sx, (1, 1): sy, (2, 2): sz})

    @classmethod
    def make_frustum(
        cls,
        top: float,
        bottom: float,
        left: float,
        right: float,
        near_clip: float,
        far_clip: float,
    ) -> Matrix4:
        """Perspective projection for the given frustum; degenerate extents leave zeros."""
        entries: dict[tuple[int, int], float] = {(3, 2): -1.0}
        if abs(right - left) > EPS:
            entries[0, 0] = -2.0 * near_clip / (right - left)
            entries[0, 2] = (right + left) / (right - left)
        if abs(top - bottom) > EPS:
            entries[1, 1] = -2.0 * near_clip / (top - bottom)
            entries[1, 2] = (top + bottom) / (top - bottom)
        if abs(far_clip - near_clip) > EPS:
            entries[2, 2] = (far_clip + near_clip) / (far_clip - near_clip)
            entries[2, 3] = -2.0 * far_clip * near_clip / (far_clip - near_clip)
        return cls.filled(0.0).replace(entries)

    @classmethod
    def make_projection(
        cls, fovy: float, aspect_ratio: float, z_near: float, z_far: float
    ) -> Matrix4:
        """Perspective projection from a vertical field of view in degrees."""
        ang = fovy * 0.5 * PI / 180
        f = 0.0 if abs(math.sin(ang)) < EPS else 1 / math.tan(ang)
        entries: dict[tuple[int, int], float] = {(1, 1): f, (3, 2): -1.0}
        if abs(aspect_ratio) > EPS:
            entries[0, 0] = f / aspect_ratio
        if abs(z_far - z_near) > EPS:
            entries[2, 2] = (z_far + z_near) / (z_far - z_near)
            entries[2, 3] = -2.0 * z_far * z_near / (z_far - z_near)
        return cls.filled(0.0).replace(entries)


def is_affine(m: Matrix4) -> bool:
    """Whether the last row of ``m`` is (0, 0, 0, 1)."""
    return abs(m[15] - 1) + abs(m[14]) + abs(m[13]) + abs(m[12]) < EPS


def norm2(m: Matrix4) -> float:
    """Sum of the squares of all entries."""
    return sum(x * x for x in m)


def inv(m: Matrix4) -> Matrix4:
    """Inverse of an affine matrix; raises ValueError if ``m`` is not affine or is singular."""
    if not is_affine(m):
        raise ValueError("only affine matrices can be inverted")
    det = (
        m[0, 0] * (m[1, 1] * m[2, 2] - m[1, 2] * m[2, 1])
        + m[0, 1] * (m[1, 2] * m[2, 0] - m[1, 0] * m[2, 2])
        + m[0, 2] * (m[1, 0] * m[2, 1] - m[1, 1] * m[2, 0])
    )
    if abs(det) <= EPS3:
        raise ValueError("matrix is singular")

    lin = {
        (0, 0): (m[1, 1] * m[2, 2] - m[1, 2] * m[2, 1]) / det,
        (1, 0): -(m[1, 0] * m[2, 2] - m[1, 2] * m[2, 0]) / det,
        (2, 0): (m[1, 0] * m[2, 1] - m[1, 1] * m[2, 0]) / det,
        (0, 1): -(m[0, 1] * m[2, 2] - m[0, 2] * m[2, 1]) / det,
        (1, 1): (m[0, 0] * m[2, 2] - m[0, 2] * m[2, 0]) / det,
        (2, 1): -(m[0, 0] * m[2, 1] - m[0, 1] * m[2, 0]) / det,
        (0, 2): (m[0, 1] * m[1, 2] - m[0, 2] * m[1, 1]) / det,
        (1, 2): -(m[0, 0] * m[1, 2] - m[0, 2] * m[1, 0]) / det,
        (2, 2): (m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0]) / det,
    }
    for row in range(3):
        lin[row, 3] = -sum(m[k, 3] * lin[row, k] for k in range(3))
    result = Matrix4.identity().replace(lin)
    if not is_affine(result) or norm2(Matrix4.identity() - m * result) >= EPS2:
        raise ValueError("matrix inverse is numerically unreliable")
    return result


def transpose(m: Matrix4) -> Matrix4:
    """Transpose of ``m``."""
    return Matrix4(m[col, row] for row in range(_SIZE) for col in range(_SIZE))


def normal_matrix(m: Matrix4) -> Matrix4:
    """Inverse transpose of ``m`` with the translation removed, for transforming normals."""
    return transpose(inv(m).replace({(0, 3): 0.0, (1, 3): 0.0, (2, 3): 0.0}))


def trans_fact(m: Matrix4) -> Matrix4:
    """The pure translation part of ``m``."""
    return Matrix4.make_translation((m[0, 3], m[1, 3], m[2, 3]))


def lin_fact(m: Matrix4) -> Matrix4:
    """The upper-left 3x3 linear part of ``m`` embedded in an affine matrix."""
    return Matrix4.identity().replace({(i, j): m[i, j] for i in range(3) for j in range(3)})


def get_translation(m: Matrix4) -> Vec:
    """The translation column of ``m`` as a 3-vector."""
    return Vec(m[0, 3], m[1, 3], m[2, 3])