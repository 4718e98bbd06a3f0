"""Allocation of object identifiers and lookup of objects by id."""

from __future__ import annotations

from typing import Any

_NO_ID = -1
_RESERVED_BELOW = 10


class IdCounter:
    """Hands out increasing ids and remembers which object owns each id.

    Ids up to and including 10 are reserved; the first allocated id is 11.
    """

    def __init__(self) -> None:
        self._id = _NO_ID
        self._objects: dict[int, Any] = {}

    @property
    def current_id(self) -> int:
        """The last id handed out, or -1 if none has been."""
        return self._id

    def next_id(self, obj: Any = None) -> int:
        """Allocate a new id, registering ``obj`` under it when given."""
        if self._id < _RESERVED_BELOW:
            self._id = _RESERVED_BELOW
        self._id += 1
        if obj is not None:
            self._objects[self._id] = obj
        return self._id

    def id_in_use(self, object_id: int) -> bool:
        return object_id in self._objects

    def object_by_id(self, object_id: int) -> Any:
        """The object registered under ``object_id``, or None."""
        return self._objects.get(object_id)

    def set_id(self, object_id: int) -> None:
        """Set the last handed-out id; allocation continues after it."""
        self._id = object_id

    def register(self, object_id: int, obj: Any) -> None:
        self._objects[object_id] = obj

    def reset(self) -> None:
        """Forget every id and registered object."""
        self._id = _NO_ID
        self._objects.clear()


default_counter = IdCounter()