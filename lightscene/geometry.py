"""Vertex and index data for a plane, a cube and a sphere."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .vec import PI, Vec, cross


@dataclass(frozen=True)
class GenericVertex:
    """Position, normal, texture coordinate, tangent and binormal of a vertex."""

    pos: Vec
    normal: Vec
    tex: Vec
    tangent: Vec
    binormal: Vec


def _vertex(pos, normal, tex, tangent, binormal) -> GenericVertex:
    return GenericVertex(Vec(*pos), Vec(*normal), Vec(*tex), Vec(*tangent), Vec(*binormal))


def plane_buffer_sizes() -> tuple[int, int]:
    """Vertex and index counts of :func:`make_plane`."""
    return 4, 6


def make_plane(size: float) -> tuple[list[GenericVertex], list[int]]:
    """An x-z plane of side ``size`` centred at the origin, facing +Y."""
    h = size / 2.0
    tangent, binormal, normal = (1, 0, 0), (0, 0, -1), (0, 1, 0)
    corners = (((-h, 0, -h), (0, 0)), ((-h, 0, h), (0, 1)), ((h, 0, h), (1, 1)), ((h, 0, -h), (1, 0)))
    vertices = [_vertex(pos, normal, tex, tangent, binormal) for pos, tex in corners]
    return vertices, [0, 1, 2, 0, 2, 3]


def cube_buffer_sizes() -> tuple[int, int]:
    """Vertex and index counts of :func:`make_cube`."""
    return 24, 36


# normal, tangent, binormal, then four corners as (sign of x, y, z) and texture coordinate
_CUBE_FACES = (
    ((1, 0, 0), (0, 1, 0), (0, 0, 1),
     (((1, -1, -1), (0, 0)), ((1, 1, -1), (1, 0)), ((1, 1, 1), (1, 1)), ((1, -1, 1), (0, 1)))),
    ((-1, 0, 0), (0, 0, 1), (0, 1, 0),
     (((-1, -1, -1), (0, 0)), ((-1, -1, 1), (1, 0)), ((-1, 1, 1), (1, 1)), ((-1, 1, -1), (0, 1)))),
    ((0, 1, 0), (0, 0, 1), (1, 0, 0),
     (((-1, 1, -1), (0, 0)), ((-1, 1, 1), (1, 0)), ((1, 1, 1), (1, 1)), ((1, 1, -1), (0, 1)))),
    ((0, -1, 0), (1, 0, 0), (0, 0, 1),
     (((-1, -1, -1), (0, 0)), ((1, -1, -1), (1, 0)), ((1, -1, 1), (1, 1)), ((-1, -1, 1), (0, 1)))),
    ((0, 0, 1), (1, 0, 0), (0, 1, 0),
     (((-1, -1, 1), (0, 0)), ((1, -1, 1), (1, 0)), ((1, 1, 1), (1, 1)), ((-1, 1, 1), (0, 1)))),
    ((0, 0, -1), (0, 1, 0), (1, 0, 0),
     (((-1, -1, -1), (0, 0)), ((-1, 1, -1), (1, 0)), ((1, 1, -1), (1, 1)), ((1, -1, -1), (0, 1)))),
)


def make_cube(size: float) -> tuple[list[GenericVertex], list[int]]:
    """An axis-aligned cube of side ``size`` centred at the origin, four vertices per face."""
    h = size / 2.0
    vertices: list[GenericVertex] = []
    indices: list[int] = []
    for face, (normal, tangent, binormal, corners) in enumerate(_CUBE_FACES):
        for signs, tex in corners:
            pos = tuple(s * h for s in signs)
            vertices.append(_vertex(pos, normal, tex, tangent, binormal))
        base = 4 * face
        indices.extend((base, base + 1, base + 2, base, base + 2, base + 3))
    return vertices, indices


def _check_sphere_args(slices: int, stacks: int) -> None:
    if slices <= 1:
        raise ValueError("a sphere needs more than one slice")
    if stacks < 2:
        raise ValueError("a sphere needs at least two stacks")


def sphere_buffer_sizes(slices: int, stacks: int) -> tuple[int, int]:
    """Vertex and index counts of :func:`make_sphere`."""
    _check_sphere_args(slices, stacks)
    return (slices + 1) * (stacks + 1), slices * stacks * 6


def make_sphere(radius: float, slices: int, stacks: int) -> tuple[list[GenericVertex], list[int]]:
    """A UV sphere centred at the origin with its poles on the z axis."""
    _check_sphere_args(slices, stacks)
    rad_per_slice = 2 * PI / slices
    rad_per_stack = PI / stacks
    longitudes = [(math.sin(rad_per_slice * i), math.cos(rad_per_slice * i)) for i in range(slices + 1)]
    latitudes = [(math.sin(rad_per_stack * j), math.cos(rad_per_stack * j)) for j in range(stacks + 1)]

    vertices: list[GenericVertex] = []
    indices: list[int] = []
    ring = stacks + 1
    for i, (long_sin, long_cos) in enumerate(longitudes):
        for j, (lat_sin, lat_cos) in enumerate(latitudes):
            n = Vec(long_cos * lat_sin, long_sin * lat_sin, lat_cos)
            t = Vec(-long_sin, long_cos, 0)
            vertices.append(
                GenericVertex(
                    pos=n * radius,
                    normal=n,
                    tex=Vec(1.0 / slices * i, 1.0 / stacks * j),
                    tangent=t,
                    binormal=cross(n, t),
                )
            )
            if i < slices and j < stacks:
                a = ring * i + j
                b = ring * (i + 1) + j
                indices.extend((a, a + 1, b + 1, a, b + 1, b))
    return vertices, indices