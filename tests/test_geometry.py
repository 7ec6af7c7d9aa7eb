import pytest

from lightscene.geometry import (
    cube_buffer_sizes,
    make_cube,
    make_plane,
    make_sphere,
    plane_buffer_sizes,
    sphere_buffer_sizes,
)
from lightscene.vec import Vec, cross, dot, norm


def _triangles(indices):
    return [tuple(indices[k:k + 3]) for k in range(0, len(indices), 3)]


def test_plane_sizes_match_buffers():
    vertices, indices = make_plane(2.0)
    assert plane_buffer_sizes() == (4, 6)
    assert (len(vertices), len(indices)) == plane_buffer_sizes()


def test_plane_vertices_lie_in_xz_plane():
    vertices, indices = make_plane(3.0)
    for v in vertices:
        assert v.pos[1] == 0
        assert abs(v.pos[0]) == 1.5 and abs(v.pos[2]) == 1.5
        assert v.normal == Vec(0, 1, 0)
    assert indices == [0, 1, 2, 0, 2, 3]


def test_plane_triangles_face_up():
    vertices, indices = make_plane(2.0)
    for a, b, c in _triangles(indices):
        p0, p1, p2 = vertices[a].pos, vertices[b].pos, vertices[c].pos
        assert dot(cross(p1 - p0, p2 - p0), Vec(0, 1, 0)) > 0


def test_cube_sizes_match_buffers():
    vertices, indices = make_cube(1.0)
    assert cube_buffer_sizes() == (24, 36)
    assert (len(vertices), len(indices)) == cube_buffer_sizes()


def test_cube_indices_pattern():
    _, indices = make_cube(1.0)
    assert indices[:6] == [0, 1, 2, 0, 2, 3]
    assert max(indices) == 23 and min(indices) == 0


def test_cube_vertices_on_faces():
    size = 4.0
    vertices, _ = make_cube(size)
    for v in vertices:
        assert all(abs(c) == size / 2 for c in v.pos)
        assert dot(v.normal, v.pos) == pytest.approx(size / 2)
        assert norm(v.normal) == pytest.approx(1.0)
        assert dot(v.normal, v.tangent) == 0
        assert dot(v.normal, v.binormal) == 0


def test_cube_triangles_wind_outwards():
    vertices, indices = make_cube(2.0)
    for a, b, c in _triangles(indices):
        p0, p1, p2 = vertices[a].pos, vertices[b].pos, vertices[c].pos
        assert dot(cross(p1 - p0, p2 - p0), vertices[a].normal) > 0


def test_sphere_sizes_match_buffers():
    vertices, indices = make_sphere(0.5, 20, 20)
    assert (len(vertices), len(indices)) == sphere_buffer_sizes(20, 20)


def test_sphere_vertices_on_surface():
    radius = 2.5
    vertices, _ = make_sphere(radius, 8, 6)
    for v in vertices:
        assert norm(v.pos) == pytest.approx(radius)
        assert norm(v.normal) == pytest.approx(1.0)
        assert dot(v.normal, v.tangent) == pytest.approx(0, abs=1e-12)
        assert v.binormal == cross(v.normal, v.tangent)
        assert 0.0 <= v.tex[0] <= 1.0 and 0.0 <= v.tex[1] <= 1.0


def test_sphere_starts_at_pole():
    vertices, _ = make_sphere(3.0, 4, 3)
    assert vertices[0].pos == Vec(0, 0, 3.0)
    assert vertices[0].tex == Vec(0, 0)


def test_sphere_indices_in_range():
    vb_len, _ = sphere_buffer_sizes(5, 4)
    _, indices = make_sphere(1.0, 5, 4)
    assert min(indices) == 0
    assert max(indices) == vb_len - 1


@pytest.mark.parametrize("slices, stacks", [(1, 4), (0, 4), (4, 1)])
def test_sphere_rejects_bad_subdivision(slices, stacks):
    with pytest.raises(ValueError):
        sphere_buffer_sizes(slices, stacks)
    with pytest.raises(ValueError):
        make_sphere(1.0, slices, stacks)