"""Perspective camera that projects 3D points onto the screen plane."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_ZOOM = 300.0
DEFAULT_OFFSET_X = 400.0
DEFAULT_OFFSET_Y = 300.0


@dataclass
class Camera:
    """A simple perspective camera; the offsets place the origin on screen."""

    zoom: float = DEFAULT_ZOOM
    offset_x: float = DEFAULT_OFFSET_X
    offset_y: float = DEFAULT_OFFSET_Y

    def scale(self, z: float) -> float:
        """Perspective scale factor for a point at depth ``z``."""
        return self.zoom / (z + self.zoom)

    def project_x(self, x: float, z: float) -> float:
        """Screen X coordinate of a point at ``(x, z)``."""
        return x * self.scale(z) + self.offset_x

    def project_y(self, y: float, z: float) -> float:
        """Screen Y coordinate of a point at ``(y, z)``."""
        return y * self.scale(z) + self.offset_y