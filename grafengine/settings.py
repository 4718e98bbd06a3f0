"""Screen and viewport dimensions."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass
class Settings:
    """Main screen size and the size of the top-camera inset, in pixels."""

    screen_width: int = 1920
    screen_height: int = 1080
    top_camera_width: int = 500
    top_camera_height: int = 400

    def __post_init__(self) -> None:
        for field in fields(self):
            if getattr(self, field.name) < 0:
                raise ValueError(f"{field.name} must not be negative")

    def main_aspect(self) -> float:
        return self.screen_width / self.screen_height

    def top_camera_aspect(self) -> float:
        return self.top_camera_width / self.top_camera_height

    def top_camera_viewport(self) -> tuple[int, int, int, int]:
        """Viewport (x, y, width, height) of the inset in the top-right corner."""
        return (
            self.screen_width - self.top_camera_width,
            self.screen_height - self.top_camera_height,
            self.top_camera_width,
            self.top_camera_height,
        )