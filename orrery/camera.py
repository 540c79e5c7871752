"""World-to-screen camera with pan and zoom."""

from __future__ import annotations

from dataclasses import dataclass, field

from orrery.vector import Vector2D


@dataclass
class Camera:
    """Camera centred on a world point; ``scale`` is pixels per world unit at zoom 1."""

    center: Vector2D = field(default_factory=Vector2D.zero)
    zoom: float = 1.0
    scale: float = 250.0

    def move(self, offset: Vector2D) -> None:
        self.center = self.center + offset

    def pixels_per_unit(self) -> float:
        return self.scale * self.zoom

    def view_size(self, width: float, height: float) -> tuple[float, float]:
        """Size in world units of a window of the given pixel size."""
        ppu = self.pixels_per_unit()
        return (width / ppu, height / ppu)

    def screen_to_world(self, px: float, py: float, width: float, height: float) -> Vector2D:
        """World point under a pixel of a window of the given size."""
        view_w, view_h = self.view_size(width, height)
        return Vector2D(
            self.center.x + (px / width - 0.5) * view_w,
            self.center.y + (py / height - 0.5) * view_h,
        )