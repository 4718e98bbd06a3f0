"""Perspective camera driven by a Transform."""

from __future__ import annotations

import math

import numpy as np

from grafengine.transform import Transform, translation_matrix


def perspective_lh(fov_radians: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Left-handed perspective projection mapping depth to the range [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fov_radians / 2.0)
    if tan_half == 0:
        raise ValueError("field of view must be non-zero")
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = (far + near) / (far - near)
    matrix[3, 2] = 1.0
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    return matrix


class Camera:
    """A camera with a perspective projection; the field of view is in degrees."""

    def __init__(
        self,
        fov_degree: float = 90.0,
        aspect: float = 1.78,
        near: float = 1.0,
        far: float = 100.0,
        transform: Transform | None = None,
    ) -> None:
        self.transform = transform if transform is not None else Transform()
        self._apply(math.radians(fov_degree), aspect, near, far)

    def _apply(self, fov: float, aspect: float, near: float, far: float) -> None:
        projection = perspective_lh(fov, aspect, near, far)
        self._fov = fov
        self._aspect = aspect
        self._near = near
        self._far = far
        self._projection = projection

    @property
    def fov(self) -> float:
        """Field of view in degrees."""
        return math.degrees(self._fov)

    @property
    def aspect(self) -> float:
        return self._aspect

    @property
    def near(self) -> float:
        return self._near

    @property
    def far(self) -> float:
        return self._far

    def set_fov(self, fov_degree: float) -> None:
        self._apply(math.radians(fov_degree), self._aspect, self._near, self._far)

    def set_aspect(self, aspect: float) -> None:
        self._apply(self._fov, aspect, self._near, self._far)

    def set_near(self, near: float) -> None:
        self._apply(self._fov, self._aspect, near, self._far)

    def set_far(self, far: float) -> None:
        self._apply(self._fov, self._aspect, self._near, far)

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection.copy()

    @property
    def view_matrix(self) -> np.ndarray:
        """Inverse rotation applied after moving the camera to the origin."""
        inv_translate = translation_matrix(-self.transform.position)
        inv_rotation = np.linalg.inv(self.transform.rotation_matrix)
        return inv_rotation @ inv_translate

    def turn_lr(self, angle: float) -> None:
        """Turn left or right by adding ``angle`` degrees to the yaw."""
        euler = self.transform.euler
        euler[1] += angle
        self.transform.set_euler(euler)

    def turn_ud(self, angle: float) -> None:
        """Turn up or down by adding ``angle`` degrees to the pitch."""
        euler = self.transform.euler
        euler[0] += angle
        self.transform.set_euler(euler)