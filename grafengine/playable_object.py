"""Objects that carry a camera and respond to keyboard and mouse input."""

from __future__ import annotations

import copy
from collections.abc import Callable
from enum import IntEnum

from grafengine.camera import Camera
from grafengine.mouse import Mouse
from grafengine.shapes import ShapeType
from grafengine.transform import Transform
from grafengine.worldobject import WorldObject


class Key(IntEnum):
    """Keyboard key codes as reported by the windowing layer."""

    SPACE = 32
    NUM_0 = 48
    NUM_1 = 49
    A = 65
    C = 67
    D = 68
    E = 69
    H = 72
    J = 74
    M = 77
    N = 78
    O = 79
    P = 80
    Q = 81
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    Y = 89
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    LEFT_SHIFT = 340
    LEFT_CONTROL = 341


class Action(IntEnum):
    """What happened to a key."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


_CAMERA_MOVES: dict[int, Callable[[Transform], None]] = {
    Key.W: Transform.move_forward,
    Key.S: Transform.move_backward,
    Key.A: Transform.move_left,
    Key.D: Transform.move_right,
    Key.LEFT_CONTROL: Transform.move_up,
    Key.LEFT_SHIFT: Transform.move_down,
}


class PlayableObject(WorldObject):
    """A frustum-shaped object that follows its own camera.

    Built from a template object whose id, texture and transform it takes over.
    """

    def __init__(self, template: WorldObject) -> None:
        vars(self).update(vars(template))
        self.transform = copy.deepcopy(template.transform)
        self.children = list(template.children)
        self.counter.register(self.id, self)
        self.movement_speed = 0.1
        self.camera_speed = 0.1
        self.mouse_state = Mouse()
        self.camera = Camera()
        self.shape_type = ShapeType.FRUSTUM
        self.shader_program_name = "KenarShader"

    def set_camera(self, camera: Camera) -> None:
        self.camera = camera

    def keyboard(self, key: int, scancode: int, action: int) -> None:
        """Move the camera for movement keys and keep the body at its position."""
        move = _CAMERA_MOVES.get(key)
        if move is None:
            return
        move(self.camera.transform)
        self.transform.set_position(self.camera.transform.position)

    def mouse(self, x: float, y: float) -> None:
        """Turn the camera by the pointer movement since the previous call."""
        if self.mouse_state.is_unset():
            self.mouse_state.set_x(x)
            self.mouse_state.set_y(y)
            return
        dx = (x - self.mouse_state.current_x) * self.camera_speed
        dy = (y - self.mouse_state.current_y) * self.camera_speed
        self.turn_lr(dx)
        self.turn_ud(dy)
        self.mouse_state.set_x(x)
        self.mouse_state.set_y(y)

    def turn_lr(self, angle: float) -> None:
        self.camera.turn_lr(angle)
        self.transform.set_euler(self.camera.transform.euler)

    def turn_ud(self, angle: float) -> None:
        self.camera.turn_ud(angle)
        euler = self.camera.transform.euler
        euler[0] += 90
        self.transform.set_euler(euler)

    def __repr__(self) -> str:
        return f"PlayableObject(id={self.id}, texture={self.texture_name!r})"