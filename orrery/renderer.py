"""Texture loading and drawing of the simulated world onto a surface."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from os import PathLike

import pygame

from orrery.body import Body
from orrery.camera import Camera
from orrery.selection import SelectionManager
from orrery.ui import UIManager

logger = logging.getLogger(__name__)

MISSING_TEXTURE_COLOR = (255, 0, 255)
TRAIL_COLOR = (255, 255, 255)


class AssetManager:
    """Loads textures once and hands out the cached copy afterwards.

    A texture that fails to load is remembered as missing (``None``).
    """

    def __init__(self) -> None:
        self._textures: dict[str, pygame.Surface | None] = {}

    def get_texture(self, filename: str | PathLike[str]) -> pygame.Surface | None:
        key = str(filename)
        if key not in self._textures:
            try:
                self._textures[key] = pygame.image.load(key)
            except (OSError, pygame.error) as exc:
                logger.error("failed to load the asset %s: %s", key, exc)
                self._textures[key] = None
        return self._textures[key]


def _circular(texture: pygame.Surface, radius: int) -> pygame.Surface:
    """The texture stretched over a disc of the given radius."""
    diameter = 2 * radius
    disc = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
    disc.blit(pygame.transform.scale(texture, (diameter, diameter)), (0, 0))
    disc.fill((0, 0, 0, 255), special_flags=pygame.BLEND_RGBA_MAX)
    mask = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
    pygame.draw.circle(mask, (255, 255, 255, 255), (radius, radius), radius)
    disc.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MIN)
    return disc


class Renderer:
    """Draws bodies, the selected body's trail and the UI onto a surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    def draw_world(
        self,
        bodies: Iterable[Body],
        camera: Camera,
        selection: SelectionManager,
    ) -> None:
        width, height = self.surface.get_size()
        view_size = camera.view_size(width, height)
        cx, cy = camera.center.as_tuple()
        ppu = camera.pixels_per_unit()

        def to_screen(x: float, y: float) -> tuple[float, float]:
            return ((x - cx) * ppu + width / 2, (y - cy) * ppu + height / 2)

        selected = selection.selected
        if selected is not None:
            for strip in selected.trail.segments():
                points = [to_screen(x, y) for x, y in strip]
                pygame.draw.lines(self.surface, TRAIL_COLOR, False, points)

        for body in bodies:
            if not body.is_in_view((cx, cy), view_size):
                continue
            radius = max(1, round(body.visual_radius * ppu))
            sx, sy = to_screen(body.position.x, body.position.y)
            centre = (round(sx), round(sy))
            if body.texture is None:
                pygame.draw.circle(self.surface, MISSING_TEXTURE_COLOR, centre, radius)
            else:
                disc = _circular(body.texture, radius)
                self.surface.blit(disc, (centre[0] - radius, centre[1] - radius))

    def draw_ui(self, ui_manager: UIManager) -> None:
        ui_manager.draw(self.surface)