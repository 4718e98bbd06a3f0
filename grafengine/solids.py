"""Closed solids: cube, frustum and square pyramid."""

from __future__ import annotations

import math

from grafengine.mesh import Mesh, Vertex, VertexAttributeType

_PTN = (
    VertexAttributeType.POSITION,
    VertexAttributeType.TEXTURE,
    VertexAttributeType.NORMAL,
)

_QUAD_TEXTURE = ((0.0, 1.0), (1.0, 1.0), (1.0, 0.0), (0.0, 0.0))


def cube() -> Mesh:
    """A unit cube centred at the origin with one flat normal per face."""
    corners = [
        (-0.5, 0.5, 0.5),
        (0.5, 0.5, 0.5),
        (0.5, -0.5, 0.5),
        (-0.5, -0.5, 0.5),
        (-0.5, 0.5, -0.5),
        (0.5, 0.5, -0.5),
        (0.5, -0.5, -0.5),
        (-0.5, -0.5, -0.5),
    ]
    faces = [
        ((0, 1, 2, 3), (0.0, 0.0, 1.0)),
        ((1, 5, 6, 2), (1.0, 0.0, 0.0)),
        ((4, 5, 1, 0), (0.0, 1.0, 0.0)),
        ((4, 0, 3, 7), (-1.0, 0.0, 0.0)),
        ((5, 4, 7, 6), (0.0, 0.0, -1.0)),
        ((3, 2, 6, 7), (0.0, -1.0, 0.0)),
    ]
    vertices = [
        Vertex(position=corners[corner], texture=texture, normal=normal)
        for quad, normal in faces
        for corner, texture in zip(quad, _QUAD_TEXTURE)
    ]
    indices = [
        index
        for face in range(len(faces))
        for index in (4 * face, 4 * face + 2, 4 * face + 1,
                      4 * face, 4 * face + 3, 4 * face + 2)
    ]
    return Mesh(vertices, indices, _PTN)


def frustum() -> Mesh:
    """A square frustum: base edge 1, top edge 0.5, height sqrt(3)/4."""
    h = math.sqrt(3) / 8
    corners = [
        (-0.25, h, 0.25),
        (0.25, h, 0.25),
        (-0.5, -h, 0.5),
        (0.5, -h, 0.5),
        (-0.25, h, -0.25),
        (0.25, h, -0.25),
        (-0.5, -h, -0.5),
        (0.5, -h, -0.5),
    ]
    side_texture = ((0.25, 1.0), (0.0, 0.0), (1.0, 0.0), (0.75, 1.0))
    cap_texture = ((0.0, 1.0), (0.0, 0.0), (1.0, 0.0), (1.0, 1.0))
    faces = [
        ((0, 2, 3, 1), side_texture),
        ((4, 6, 2, 0), side_texture),
        ((5, 7, 6, 4), side_texture),
        ((1, 3, 7, 5), side_texture),
        ((4, 0, 1, 5), cap_texture),
        ((2, 6, 7, 3), cap_texture),
    ]
    vertices = [
        Vertex(position=corners[corner], texture=texture)
        for quad, textures in faces
        for corner, texture in zip(quad, textures)
    ]
    indices = [
        index
        for face in range(len(faces))
        for index in (4 * face, 4 * face + 1, 4 * face + 2,
                      4 * face, 4 * face + 2, 4 * face + 3)
    ]
    return Mesh(vertices, indices, _PTN)


def pyramid() -> Mesh:
    """A square pyramid with unit base edges and one shared apex vertex."""
    k = math.sqrt(3) / 2
    apex = (0.0, k * 2 / 3, 0.0)
    near_left = (-0.5, -k / 3, 0.5)
    near_right = (0.5, -k / 3, 0.5)
    far_left = (-0.5, -k / 3, -0.5)
    far_right = (0.5, -k / 3, -0.5)

    left, right = (0.0, 0.0), (1.0, 0.0)
    vertices = [
        Vertex(apex, (0.5, 1.0)),
        Vertex(near_left, left),
        Vertex(near_right, right),
        Vertex(far_left, left),
        Vertex(near_left, right),
        Vertex(far_right, left),
        Vertex(far_left, right),
        Vertex(near_right, left),
        Vertex(far_right, right),
        Vertex(near_left, (0.0, 1.0)),
        Vertex(far_left, (0.0, 0.0)),
        Vertex(far_right, (1.0, 0.0)),
        Vertex(near_right, (1.0, 1.0)),
    ]
    indices = [index for i in range(4) for index in (0, 2 * i + 1, 2 * i + 2)]
    indices += [9, 10, 11, 9, 11, 12]
    return Mesh(vertices, indices, _PTN)