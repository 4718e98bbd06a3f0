import math

import numpy as np
import pytest

from grafengine.mesh import Vertex, VertexAttributeType
from grafengine.primitives import average_normals, circle, cylinder, find_normals, square


def test_find_normals_single_triangle():
    vertices = [Vertex((0, 0, 0)), Vertex((1, 0, 0)), Vertex((0, 1, 0))]
    result = find_normals(vertices, [0, 1, 2])
    assert all(v.normal == (0.0, 0.0, 1.0) for v in result)
    assert vertices[0].normal == (0.0, 0.0, 0.0)


def test_find_normals_perpendicular_to_edges():
    vertices = [Vertex((1, 2, 3)), Vertex((4, -1, 0)), Vertex((2, 5, -2))]
    normal = np.array(find_normals(vertices, [0, 1, 2])[0].normal)
    p = [np.array(v.position) for v in vertices]
    assert np.dot(normal, p[1] - p[0]) == pytest.approx(0.0)
    assert np.dot(normal, p[2] - p[0]) == pytest.approx(0.0)


def test_find_normals_requires_whole_triangles():
    with pytest.raises(ValueError):
        find_normals([Vertex(), Vertex()], [0, 1])


def test_average_normals_leaves_distinct_positions():
    vertices = [Vertex((0, 0, 0), normal=(1, 0, 0)), Vertex((1, 0, 0), normal=(0, 1, 0))]
    assert average_normals(vertices) == vertices


def test_average_normals_merges_shared_position():
    vertices = [Vertex((0, 0, 0), normal=(1, 0, 0)), Vertex((0, 0, 0), normal=(0, 1, 0))]
    result = average_normals(vertices)
    assert result[0].normal == (0.5, 0.5, 0.0)
    assert result[1].normal[2] == 0.0


def test_square_layout_matches_table():
    mesh = square()
    assert mesh.attributes == (VertexAttributeType.POSITION, VertexAttributeType.TEXTURE)
    assert mesh.indices == (0, 1, 2, 3, 4, 5)
    data = mesh.interleaved()
    assert list(data[0]) == [-0.5, 0.5, 0.0, 0.0, 1.0]
    assert list(data[0]) == list(data[5])


def test_circle_points_lie_on_unit_circle():
    mesh = circle(10)
    assert len(mesh.vertices) == 360 // 10
    for v in mesh.vertices:
        x, y, z = v.position
        assert math.hypot(x, y) == pytest.approx(1.0)
        assert z == 0.0
        assert v.texture[0] == pytest.approx(0.5 + 0.5 * x)


def test_circle_fan_indices():
    mesh = circle(30)
    assert mesh.index_count == 3 * (len(mesh.vertices) - 2)
    assert all(mesh.indices[i] == 0 for i in range(0, mesh.index_count, 3))


@pytest.mark.parametrize("angle", [0, -5, 200])
def test_circle_rejects_bad_step(angle):
    with pytest.raises(ValueError):
        circle(angle)


def test_cylinder_geometry():
    radius, height = 2.0, 3.0
    mesh = cylinder(8, radius, height)
    for v in mesh.vertices:
        x, y, z = v.position
        assert abs(y) == pytest.approx(height / 2)
        r = math.hypot(x, z)
        assert r == pytest.approx(0.0) or r == pytest.approx(radius)
    assert mesh.index_count % 3 == 0
    assert max(mesh.indices) == len(mesh.vertices) - 1


def test_cylinder_side_texture_wraps():
    mesh = cylinder(8)
    side = mesh.vertices[2 * (8 + 1):]
    assert len(side) == 2 * (8 + 1)
    assert side[0].texture[0] == 0.0
    assert side[-1].texture == (1.0, 1.0)


def test_cylinder_needs_three_segments():
    with pytest.raises(ValueError):
        cylinder(2)