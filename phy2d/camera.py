"""A simple 2D view camera."""

from __future__ import annotations

from dataclasses import dataclass, field

from phy2d.vector import Vector2D


@dataclass
class Camera:
    """Camera with a position and a zoom level."""

    position: Vector2D = field(default_factory=Vector2D)
    zoom: float = 1.0

    def move(self, direction: Vector2D) -> None:
        """Shift the camera by the given offset."""
        self.position = self.position + direction

    def zoom_by(self, zoom_factor: float) -> None:
        """Multiply the zoom level by the given factor."""
        self.zoom *= zoom_factor