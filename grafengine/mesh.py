"""Vertex layout and indexed triangle meshes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

import numpy as np

_FLOAT_SIZE = 4


class VertexAttributeType(Enum):
    """Kinds of per-vertex data a mesh can expose to a shader."""

    POSITION = "position"
    COLOR = "color"
    NORMAL = "normal"
    TEXTURE = "texture"


_COMPONENTS = {
    VertexAttributeType.POSITION: 3,
    VertexAttributeType.COLOR: 4,
    VertexAttributeType.NORMAL: 3,
    VertexAttributeType.TEXTURE: 2,
}


def attribute_size(attribute: VertexAttributeType) -> int:
    """Size in bytes of one attribute stored as 32-bit floats."""
    return _COMPONENTS[attribute] * _FLOAT_SIZE


def _floats(values: Iterable[float], count: int, name: str) -> tuple[float, ...]:
    result = tuple(float(v) for v in values)
    if len(result) != count:
        raise ValueError(f"{name} must have exactly {count} components")
    return result


@dataclass(frozen=True)
class Vertex:
    """A vertex with a position, a texture coordinate and a normal."""

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    texture: tuple[float, float] = (0.0, 0.0)
    normal: tuple[float, float, float] = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _floats(self.position, 3, "position"))
        object.__setattr__(self, "texture", _floats(self.texture, 2, "texture"))
        object.__setattr__(self, "normal", _floats(self.normal, 3, "normal"))

    def components(self, attribute: VertexAttributeType) -> tuple[float, ...]:
        """The floats this vertex supplies for ``attribute``."""
        if attribute is VertexAttributeType.POSITION:
            return self.position
        if attribute is VertexAttributeType.TEXTURE:
            return self.texture
        if attribute is VertexAttributeType.NORMAL:
            return self.normal
        raise ValueError(f"vertices carry no {attribute.value} data")


@dataclass(frozen=True)
class Mesh:
    """Vertices drawn as triangles through an index list.

    ``attributes`` gives the order in which vertex data is interleaved.
    """

    vertices: tuple[Vertex, ...]
    indices: tuple[int, ...]
    attributes: tuple[VertexAttributeType, ...]

    def __post_init__(self) -> None:
        vertices = tuple(self.vertices)
        indices = tuple(int(i) for i in self.indices)
        attributes = tuple(VertexAttributeType(a) for a in self.attributes)
        for index in indices:
            if not 0 <= index < len(vertices):
                raise ValueError(f"index {index} is outside the vertex list")
        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "indices", indices)
        object.__setattr__(self, "attributes", attributes)

    @property
    def stride(self) -> int:
        """Bytes between the starts of two consecutive vertices."""
        return sum(attribute_size(a) for a in self.attributes)

    def attribute_offsets(self) -> list[int]:
        """Byte offset of each attribute inside one vertex."""
        offsets = []
        location = 0
        for attribute in self.attributes:
            offsets.append(location)
            location += attribute_size(attribute)
        return offsets

    @property
    def index_count(self) -> int:
        return len(self.indices)

    def interleaved(self) -> np.ndarray:
        """Vertex data as float32 rows, one per vertex, attributes in order."""
        width = self.stride // _FLOAT_SIZE
        rows = [
            [value for attribute in self.attributes for value in vertex.components(attribute)]
            for vertex in self.vertices
        ]
        return np.array(rows, dtype=np.float32).reshape(len(rows), width)