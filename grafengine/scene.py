"""The collection of objects and cameras that make up a level."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from grafengine.cursor import Cursor
from grafengine.idcounter import IdCounter
from grafengine.playable_object import Action, Key, PlayableObject
from grafengine.settings import Settings
from grafengine.shapes import ShapeType
from grafengine.transform import Transform
from grafengine.worldobject import WorldObject

_TURN_STEP_DEGREES = 5.0

_EULER_KEYS: dict[int, tuple[int, float]] = {
    Key.E: (1, 1.0),
    Key.Q: (1, -1.0),
    Key.Y: (0, 1.0),
    Key.H: (0, -1.0),
    Key.U: (2, 1.0),
    Key.J: (2, -1.0),
}

_OBJECT_MOVES: dict[int, Callable[[Transform], None]] = {
    Key.UP: Transform.move_up,
    Key.DOWN: Transform.move_down,
    Key.RIGHT: Transform.move_right,
    Key.LEFT: Transform.move_left,
    Key.M: Transform.move_forward,
    Key.N: Transform.move_backward,
}


def _contains(items: list, item: object) -> bool:
    return any(existing is item for existing in items)


class Scene:
    """World objects, playable cameras, the selected object and its cursor."""

    def __init__(self, settings: Settings | None = None, counter: IdCounter | None = None) -> None:
        self.settings = settings if settings is not None else Settings()
        self.counter = counter if counter is not None else IdCounter()
        self.cursor = Cursor(
            WorldObject(0, "container", ShapeType.PYRAMID, "WhiteShader", counter=self.counter)
        )

        self.active_playable_object: PlayableObject | None = PlayableObject(
            WorldObject(-1, "cotton", counter=self.counter)
        )
        self.active_playable_object.camera.set_aspect(self.settings.main_aspect())

        self.top_camera: PlayableObject | None = PlayableObject(
            WorldObject(-1, "concrete", counter=self.counter)
        )
        self.top_camera.camera.set_aspect(self.settings.top_camera_aspect())

        self.playable_objects: list[PlayableObject] = [
            self.active_playable_object,
            self.top_camera,
        ]
        self.objects: list[WorldObject] = []

        self.active_object: WorldObject | None = WorldObject(-1, "wall", counter=self.counter)
        self.add_object(self.active_object)
        self.active_object.transform.set_position((2.0, 0.0, 4.0))

        grass = WorldObject(-1, "grass", counter=self.counter)
        self.add_object(grass)
        grass.transform.set_position((0.0, 0.0, 4.0))

    def reset(self) -> None:
        """Drop every object and camera; the cursor is kept."""
        self.playable_objects.clear()
        self.objects.clear()
        self.active_playable_object = None
        self.top_camera = None
        self.active_object = None

    def add_object(self, obj: WorldObject) -> None:
        if not _contains(self.objects, obj):
            self.objects.append(obj)

    def remove_object(self, obj: WorldObject) -> None:
        self.objects = [o for o in self.objects if o is not obj]

    def add_playable_object(self, playable: PlayableObject) -> None:
        if not _contains(self.playable_objects, playable):
            self.playable_objects.append(playable)

    def remove_playable_object(self, playable: PlayableObject) -> None:
        """Remove ``playable`` unless it is both the active and the top camera."""
        if not _contains(self.playable_objects, playable):
            return
        if playable is self.active_playable_object and playable is self.top_camera:
            return
        self.playable_objects = [p for p in self.playable_objects if p is not playable]

    def find_object(self, obj: WorldObject) -> WorldObject | None:
        return obj if _contains(self.objects, obj) else None

    def object_by_id(self, object_id: int) -> WorldObject | None:
        return next((o for o in self.objects if o.id == object_id), None)

    def keyboard(self, key: int, scancode: int, action: int) -> None:
        """Drive the active camera, then edit the active object."""
        if self.active_playable_object is not None:
            self.active_playable_object.keyboard(key, scancode, action)
        pressed = action == Action.PRESS

        if key == Key.T and pressed:
            self.active_playable_object, self.top_camera = (
                self.top_camera,
                self.active_playable_object,
            )
        if key == Key.O and pressed:
            self._grow(1.0)
        if key == Key.P and pressed:
            self._grow(-1.0)

        turn = _EULER_KEYS.get(key)
        if turn is not None:
            axis, sign = turn
            transform = self._active_transform()
            euler = transform.euler
            euler[axis] += sign * _TURN_STEP_DEGREES
            transform.set_euler(euler)

        if key == Key.SPACE and pressed:
            created = WorldObject(
                -1, "container", ShapeType.SQUARE, "TextureShader", counter=self.counter
            )
            self.add_object(created)
            self.active_object = created

        move = _OBJECT_MOVES.get(key)
        if move is not None and pressed:
            move(self._active_transform())

    def mouse(self, x: float, y: float) -> None:
        if self.active_playable_object is not None:
            self.active_playable_object.mouse(x, y)

    def update_cursor(self) -> np.ndarray:
        """Move the cursor above the active object and return its position."""
        if self.active_object is None:
            raise ValueError("there is no active object")
        return self.cursor.calculate_position(self.active_object)

    def _active_transform(self) -> Transform:
        if self.active_object is None:
            raise ValueError("there is no active object")
        return self.active_object.transform

    def _grow(self, amount: float) -> None:
        transform = self._active_transform()
        transform.set_scale(transform.scale + amount)