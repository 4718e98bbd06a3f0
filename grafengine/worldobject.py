"""Objects placed in the scene."""

from __future__ import annotations

from collections.abc import Iterable

from grafengine.idcounter import IdCounter, default_counter
from grafengine.shapes import ShapeType
from grafengine.transform import Transform

GL_FILL = 0x1B02


def _vec2(values: Iterable[float]) -> tuple[float, float]:
    result = tuple(float(v) for v in values)
    if len(result) != 2:
        raise ValueError("texture repeat must have exactly two components")
    return result  # type: ignore[return-value]


class WorldObject:
    """A shaped, textured object with a transform and an identifier.

    An ``object_id`` of -1 asks ``counter`` for a fresh id; any other id is
    registered as given and must not already be in use.
    """

    def __init__(
        self,
        object_id: int = -1,
        texture_name: str = "container",
        shape_type: ShapeType = ShapeType.CUBE,
        shader_program_name: str = "TextureShader",
        fill_type: int = GL_FILL,
        texture_repeat: Iterable[float] = (1.0, 1.0),
        counter: IdCounter | None = None,
    ) -> None:
        self.counter = counter if counter is not None else default_counter
        if object_id != -1:
            if self.counter.id_in_use(object_id):
                raise ValueError(f"id {object_id} is already in use")
            self.id = object_id
            self.counter.register(object_id, self)
        else:
            self.id = self.counter.next_id(self)
        self.shader_program_name = shader_program_name
        self.transform = Transform()
        self.texture_name = texture_name
        self.shape_type = ShapeType(shape_type)
        self.texture_repeat = _vec2(texture_repeat)
        self.fill_type = fill_type
        self.children: list[WorldObject] = []

    def add_child(self, child: WorldObject) -> None:
        self.children.append(child)

    def remove_child(self, child: WorldObject) -> None:
        """Remove every occurrence of ``child``; absent children are ignored."""
        self.children = [c for c in self.children if c is not child]

    def change_texture(self, texture_name: str) -> None:
        self.texture_name = texture_name

    def change_shape(self, shape_type: ShapeType) -> None:
        self.shape_type = ShapeType(shape_type)

    def set_transform(self, transform: Transform) -> None:
        self.transform = transform

    def set_texture_repeat(self, repeat: Iterable[float]) -> None:
        self.texture_repeat = _vec2(repeat)

    def __repr__(self) -> str:
        return (
            f"WorldObject(id={self.id}, shape={self.shape_type.name}, "
            f"texture={self.texture_name!r})"
        )