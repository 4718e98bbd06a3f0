"""A marker that bobs above the selected object."""

from __future__ import annotations

import copy

import numpy as np

from grafengine.worldobject import WorldObject

_OBJECT_HALF_HEIGHT = 0.5
_CURSOR_HALF_HEIGHT = 0.5
_BOB_RANGE = 0.5
_BOB_START = 0.4
_BOB_STEP = 0.001


class Cursor(WorldObject):
    """A copy of a template object, turned upside down, that hovers over a target.

    Each call to :meth:`calculate_position` moves the bobbing offset one step,
    reversing direction at the ends of its range.
    """

    def __init__(self, template: WorldObject) -> None:
        vars(self).update(vars(template))
        self.transform = copy.deepcopy(template.transform)
        self.children = list(template.children)
        self._bob = _BOB_START
        self._step = _BOB_STEP
        self.transform.rotate_global_x(180)

    def calculate_position(self, target: WorldObject) -> np.ndarray:
        """Place the cursor above ``target`` and return the new position."""
        position = target.transform.position
        scale = target.transform.scale
        top = position[1] + _OBJECT_HALF_HEIGHT * scale[1]
        position[1] = top + _CURSOR_HALF_HEIGHT + _BOB_RANGE - self._bob

        self._bob += self._step
        if self._bob >= _BOB_RANGE:
            self._step = -_BOB_STEP
        elif self._bob <= 0:
            self._step = _BOB_STEP

        self.transform.set_position(position)
        return position