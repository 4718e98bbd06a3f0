"""Flat shapes, the cylinder, and normal helpers."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import replace

import numpy as np

from grafengine.mesh import Mesh, Vertex, VertexAttributeType

_PTN = (
    VertexAttributeType.POSITION,
    VertexAttributeType.TEXTURE,
    VertexAttributeType.NORMAL,
)


def find_normals(vertices: Sequence[Vertex], indices: Sequence[int]) -> list[Vertex]:
    """Give each triangle's vertices the negated cross of its edges (v2-v0) x (v1-v0)."""
    if len(indices) % 3:
        raise ValueError("index count must be a multiple of three")
    result = list(vertices)
    for start in range(0, len(indices), 3):
        i0, i1, i2 = indices[start:start + 3]
        v0 = np.array(result[i0].position)
        v1 = np.array(result[i1].position)
        v2 = np.array(result[i2].position)
        normal = tuple(-np.cross(v2 - v0, v1 - v0))
        for index in (i0, i1, i2):
            result[index] = replace(result[index], normal=normal)
    return result


def average_normals(vertices: Sequence[Vertex]) -> list[Vertex]:
    """Replace each normal with the mean of the normals sharing its position.

    Vertices are processed in order, so later averages see earlier results.
    """
    result = list(vertices)
    for i, vertex in enumerate(result):
        shared = [other.normal for other in result if other.position == vertex.position]
        mean = tuple(float(v) for v in np.mean(shared, axis=0))
        result[i] = replace(vertex, normal=mean)
    return result


def square() -> Mesh:
    """A unit square in the XY plane made of two triangles."""
    data = [
        (-0.5, 0.5, 0.0, 0.0, 1.0),
        (0.5, 0.5, 0.0, 1.0, 1.0),
        (0.5, -0.5, 0.0, 1.0, 0.0),
        (0.5, -0.5, 0.0, 1.0, 0.0),
        (-0.5, -0.5, 0.0, 0.0, 0.0),
        (-0.5, 0.5, 0.0, 0.0, 1.0),
    ]
    vertices = [Vertex(position=row[:3], texture=row[3:]) for row in data]
    return Mesh(
        vertices,
        range(len(vertices)),
        (VertexAttributeType.POSITION, VertexAttributeType.TEXTURE),
    )


def circle(angle_in_degrees: int = 10) -> Mesh:
    """A unit circle in the XY plane, one vertex every ``angle_in_degrees``."""
    if angle_in_degrees <= 0:
        raise ValueError("angle step must be positive")
    vertex_count = 360 // angle_in_degrees
    if vertex_count < 3:
        raise ValueError("angle step leaves fewer than three vertices")
    vertices = []
    for i in range(vertex_count):
        angle = math.radians(angle_in_degrees * i)
        c, s = math.cos(angle), math.sin(angle)
        vertices.append(Vertex(position=(c, s, 0.0), texture=(0.5 + 0.5 * c, 0.5 + 0.5 * s)))
    indices = [
        index
        for i in range(vertex_count - 2)
        for index in (0, i + 2, i + 1)
    ]
    return Mesh(vertices, indices, _PTN)


def _disk(y: float, segment_count: int, radius: float, base: int) -> tuple[list[Vertex], list[int]]:
    vertices = [Vertex(position=(0.0, y, 0.0), texture=(0.5, 0.5))]
    for i in range(segment_count):
        angle = 2.0 * math.pi * i / segment_count
        c, s = math.cos(angle), math.sin(angle)
        vertices.append(
            Vertex(
                position=(radius * c, y, radius * s),
                texture=(0.5 + 0.5 * c, 0.5 + 0.5 * s),
            )
        )
    indices = [
        index
        for i in range(segment_count)
        for index in (base, base + 1 + i, base + 1 + (i + 1) % segment_count)
    ]
    return vertices, indices


def cylinder(segment_count: int = 36, radius: float = 0.5, height: float = 1.0) -> Mesh:
    """A capped cylinder standing on the Y axis, centred at the origin."""
    if segment_count < 3:
        raise ValueError("a cylinder needs at least three segments")
    half = height * 0.5

    vertices, indices = _disk(-half, segment_count, radius, 0)
    top_vertices, top_indices = _disk(half, segment_count, radius, len(vertices))
    vertices += top_vertices
    indices += top_indices

    side_start = len(vertices)
    for i in range(segment_count + 1):
        angle = 2.0 * math.pi * i / segment_count
        x = radius * math.cos(angle)
        z = radius * math.sin(angle)
        u = i / segment_count
        vertices.append(Vertex(position=(x, -half, z), texture=(u, 0.0)))
        vertices.append(Vertex(position=(x, half, z), texture=(u, 1.0)))

    for i in range(segment_count):
        bottom1 = side_start + 2 * i
        top1 = bottom1 + 1
        bottom2 = bottom1 + 2
        top2 = bottom2 + 1
        indices += [bottom1, top1, bottom2, bottom2, top1, top2]

    return Mesh(vertices, indices, _PTN)