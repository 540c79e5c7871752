"""Mouse control of the camera and of body selection."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pygame

from orrery.body import Body
from orrery.camera import Camera
from orrery.selection import SelectionManager
from orrery.vector import Vector2D

ZOOM_IN_FACTOR = 1.05
ZOOM_OUT_FACTOR = 0.95

_LEFT_BUTTON = 1
_RIGHT_BUTTON = 3


class InputHandler:
    """Wheel zooms, right-drag pans, left-click selects the body under the cursor."""

    def __init__(self) -> None:
        self.is_panning = False
        self.last_mouse_position: tuple[int, int] = (0, 0)

    def handle_event(
        self,
        event: Any,
        window_size: tuple[int, int],
        camera: Camera,
        bodies: Sequence[Body],
        selection: SelectionManager,
    ) -> None:
        if event.type == pygame.MOUSEWHEEL:
            factor = ZOOM_IN_FACTOR if event.y > 0 else ZOOM_OUT_FACTOR
            camera.zoom *= factor

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == _RIGHT_BUTTON:
            self.is_panning = True
            self.last_mouse_position = tuple(event.pos)

        if event.type == pygame.MOUSEBUTTONUP and event.button == _RIGHT_BUTTON:
            self.is_panning = False

        if self.is_panning and event.type == pygame.MOUSEMOTION:
            dx = event.pos[0] - self.last_mouse_position[0]
            dy = event.pos[1] - self.last_mouse_position[1]
            ppu = camera.pixels_per_unit()
            camera.move(Vector2D(-dx / ppu, -dy / ppu))
            self.last_mouse_position = tuple(event.pos)

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == _LEFT_BUTTON:
            width, height = window_size
            world = camera.screen_to_world(event.pos[0], event.pos[1], width, height)
            hit = next(
                (
                    body
                    for body in bodies
                    if Vector2D.squared_distance(body.position, world)
                    < body.visual_radius * body.visual_radius
                ),
                None,
            )
            if hit is not None:
                selection.select(hit)
            elif bodies:
                selection.clear()