"""Position, orientation and scale of an object in 3D space."""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np

Vector = Iterable[float]


def _vec3(value: Vector, name: str = "vector") -> np.ndarray:
    arr = np.array(value, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"{name} must have exactly three components")
    return arr


def _normalize(vec: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vec))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return vec / length


def rotation_matrix(angle_radians: float, axis: Vector) -> np.ndarray:
    """Return a 4x4 right-handed rotation of ``angle_radians`` about ``axis``."""
    x, y, z = _normalize(_vec3(axis, "axis"))
    c = math.cos(angle_radians)
    s = math.sin(angle_radians)
    cross = np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
    k = np.array([x, y, z])
    matrix = np.eye(4)
    matrix[:3, :3] = c * np.eye(3) + s * cross + (1.0 - c) * np.outer(k, k)
    return matrix


def translation_matrix(offset: Vector) -> np.ndarray:
    """Return a 4x4 matrix that translates points by ``offset``."""
    matrix = np.eye(4)
    matrix[:3, 3] = _vec3(offset, "offset")
    return matrix


def scale_matrix(factors: Vector) -> np.ndarray:
    """Return a 4x4 matrix that scales along each axis by ``factors``."""
    matrix = np.eye(4)
    matrix[:3, :3] = np.diag(_vec3(factors, "factors"))
    return matrix


class Transform:
    """Translation, rotation and scale composed into a world matrix.

    The world matrix is ``translate @ rotation @ scale``. Euler angles are in
    degrees and are applied about Z, then the rotated up axis, then the
    rotated right axis.
    """

    def __init__(
        self,
        position: Vector = (0.0, 0.0, 0.0),
        euler: Vector = (0.0, 0.0, 0.0),
        scale: Vector = (1.0, 1.0, 1.0),
    ) -> None:
        self._position = _vec3(position, "position")
        self._scale = _vec3(scale, "scale")
        self._euler = np.zeros(3)
        self._rotation = np.eye(4)
        self._world = np.eye(4)
        self.set_euler(euler)

    # -- read access -------------------------------------------------------

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @property
    def euler(self) -> np.ndarray:
        return self._euler.copy()

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @property
    def world_matrix(self) -> np.ndarray:
        return self._world.copy()

    @property
    def rotation_matrix(self) -> np.ndarray:
        return self._rotation.copy()

    @property
    def right(self) -> np.ndarray:
        """Local positive X axis."""
        return self._rotation[:3, 0].copy()

    @property
    def up(self) -> np.ndarray:
        """Local positive Y axis."""
        return self._rotation[:3, 1].copy()

    @property
    def look(self) -> np.ndarray:
        """Local positive Z axis."""
        return self._rotation[:3, 2].copy()

    # -- modification ------------------------------------------------------

    def _update(self) -> None:
        self._world = (
            translation_matrix(self._position)
            @ self._rotation
            @ scale_matrix(self._scale)
        )

    def set_position(self, position: Vector) -> None:
        self._position = _vec3(position, "position")
        self._update()

    def set_scale(self, scale: Vector) -> None:
        self._scale = _vec3(scale, "scale")
        self._update()

    def set_euler(self, euler: Vector) -> None:
        """Rebuild the rotation from Euler angles given in degrees."""
        angles = _vec3(euler, "euler")
        rad_x, rad_y, rad_z = np.radians(angles)

        right = np.array([1.0, 0.0, 0.0])
        up = np.array([0.0, 1.0, 0.0])
        look = np.array([0.0, 0.0, 1.0])

        rot_z = rotation_matrix(rad_z, look)[:3, :3]
        right = rot_z @ right
        up = rot_z @ up

        if rad_y:
            rot_y = rotation_matrix(rad_y, up)[:3, :3]
            right = rot_y @ right
            look = rot_y @ look

        if rad_x:
            rot_x = rotation_matrix(rad_x, right)[:3, :3]
            look = rot_x @ look
            up = rot_x @ up

        rotation = np.eye(4)
        rotation[:3, 0] = _normalize(right)
        rotation[:3, 1] = _normalize(up)
        rotation[:3, 2] = _normalize(look)

        self._euler = angles
        self._rotation = rotation
        self._update()

    def _rotate(self, axis: np.ndarray, angle: float) -> None:
        self._rotation = rotation_matrix(math.radians(angle), axis) @ self._rotation
        self._update()

    def rotate_local_x(self, angle: float) -> None:
        self._rotate(_normalize(self.right), angle)

    def rotate_local_y(self, angle: float) -> None:
        self._rotate(_normalize(self.up), angle)

    def rotate_local_z(self, angle: float) -> None:
        self._rotate(_normalize(self.look), angle)

    def rotate_global_x(self, angle: float) -> None:
        self._rotate(np.array([1.0, 0.0, 0.0]), angle)

    def rotate_global_y(self, angle: float) -> None:
        self._rotate(np.array([0.0, 1.0, 0.0]), angle)

    def rotate_global_z(self, angle: float) -> None:
        self._rotate(np.array([0.0, 0.0, 1.0]), angle)

    def _move(self, direction: np.ndarray) -> None:
        self._position = self._position + _normalize(direction)
        self._update()

    def move_forward(self) -> None:
        self._move(self.look)

    def move_backward(self) -> None:
        self._move(-self.look)

    def move_right(self) -> None:
        self._move(self.right)

    def move_left(self) -> None:
        self._move(-self.right)

    def move_up(self) -> None:
        self._move(self.up)

    def move_down(self) -> None:
        self._move(-self.up)