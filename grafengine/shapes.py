"""Named shape kinds and a cache of their meshes."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from grafengine.mesh import Mesh
from grafengine.primitives import circle, cylinder, square
from grafengine.solids import cube, frustum, pyramid

_CIRCLE_STEP_DEGREES = 10


class ShapeType(Enum):
    """Built-in shapes; the values are the numbers used in saved scenes."""

    CIRCLE = 0
    SQUARE = 1
    CUBE = 2
    FRUSTUM = 3
    PYRAMID = 4
    CYLINDER = 5


_BUILDERS: dict[ShapeType, Callable[[], Mesh]] = {
    ShapeType.SQUARE: square,
    ShapeType.CIRCLE: lambda: circle(_CIRCLE_STEP_DEGREES),
    ShapeType.CUBE: cube,
    ShapeType.PYRAMID: pyramid,
    ShapeType.FRUSTUM: frustum,
    ShapeType.CYLINDER: cylinder,
}


class ShapeCreator:
    """Builds each shape's mesh once and hands out the cached copy after that."""

    def __init__(self) -> None:
        self._size_of_shape_types = 5
        self._meshes: dict[ShapeType, Mesh] = {}

    def create(self, shape: ShapeType) -> Mesh:
        """Return the mesh for ``shape``, building it on first request."""
        shape = ShapeType(shape)
        mesh = self._meshes.get(shape)
        if mesh is None:
            mesh = _BUILDERS[shape]()
            self._meshes[shape] = mesh
        return mesh

    def size_of_shape_types(self) -> int:
        return self._size_of_shape_types

    def clear(self) -> None:
        """Forget every cached mesh."""
        self._meshes.clear()

    def __contains__(self, shape: object) -> bool:
        return shape in self._meshes