"""Tracking of current and previous pointer coordinates."""

from __future__ import annotations

UNSET = -1.0


class Mouse:
    """Current and previous pointer position; -1 marks a coordinate never set."""

    def __init__(self) -> None:
        self.current_x = UNSET
        self.previous_x = UNSET
        self.current_y = UNSET
        self.previous_y = UNSET

    def set_x(self, xpos: float) -> None:
        self.previous_x = self.current_x
        self.current_x = xpos

    def set_y(self, ypos: float) -> None:
        self.previous_y = self.current_y
        self.current_y = ypos

    def is_unset(self) -> bool:
        """True until the first horizontal position has been recorded."""
        return self.current_x == UNSET

    def __repr__(self) -> str:
        return (
            f"Mouse(current=({self.current_x}, {self.current_y}), "
            f"previous=({self.previous_x}, {self.previous_y}))"
        )