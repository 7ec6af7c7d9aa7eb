"""Fixed-length numeric vectors and the usual vector operations."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterator

PI = math.pi
EPS = 1e-8
EPS2 = EPS * EPS
EPS3 = EPS * EPS * EPS


class Vec:
    """An immutable vector of floats of any fixed length."""

    __slots__ = ("_data",)

    def __init__(self, *args: float) -> None:
        self._data = tuple(float(a) for a in args)

    @classmethod
    def filled(cls, value: float, size: int) -> Vec:
        """Return a vector of ``size`` components all equal to ``value``."""
        if size < 0:
            raise ValueError("vector size must not be negative")
        return cls(*([value] * size))

    def resized(self, size: int, fill: float = 0.0) -> Vec:
        """Truncate to ``size`` components, or extend with ``fill``."""
        if size < 0:
            raise ValueError("vector size must not be negative")
        kept = self._data[:size]
        return Vec(*kept, *([fill] * (size - len(kept))))

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vec(*self._data[index])
        return self._data[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"Vec({', '.join(repr(x) for x in self._data)})"

    def __neg__(self) -> Vec:
        return Vec(*(-x for x in self._data))

    def __add__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        _check_same_length(self, other)
        return Vec(*(a + b for a, b in zip(self._data, other._data)))

    def __sub__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        _check_same_length(self, other)
        return Vec(*(a - b for a, b in zip(self._data, other._data)))

    def __mul__(self, scalar: float) -> Vec:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec(*(x * scalar for x in self._data))

    def __rmul__(self, scalar: float) -> Vec:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vec:
        if not isinstance(scalar, Real):
            return NotImplemented
        inverse = 1 / scalar
        return Vec(*(x * inverse for x in self._data))


def _check_same_length(a: Vec, b: Vec) -> None:
    if len(a) != len(b):
        raise ValueError(f"vector lengths differ: {len(a)} and {len(b)}")


def cross(a: Vec, b: Vec) -> Vec:
    """Cross product of two 3-vectors."""
    if len(a) != 3 or len(b) != 3:
        raise ValueError("cross product needs two 3-vectors")
    return Vec(
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def dot(a: Vec, b: Vec) -> float:
    """Dot product of two vectors of equal length."""
    _check_same_length(a, b)
    return sum(x * y for x, y in zip(a, b))


def norm2(v: Vec) -> float:
    """Squared Euclidean length."""
    return dot(v, v)


def norm(v: Vec) -> float:
    """Euclidean length."""
    return math.sqrt(dot(v, v))


def normalize(v: Vec) -> Vec:
    """Return ``v`` scaled to unit length; raises ValueError for a near-zero vector."""
    squared = norm2(v)
    if squared <= EPS2:
        raise ValueError("cannot normalize a vector of (near) zero length")
    return v / math.sqrt(squared)