"""Side panel describing the currently selected body."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from os import PathLike
from typing import Any

import pygame

from orrery.body import Body
from orrery.selection import SelectionManager
from orrery.ui import DEFAULT_FONT, FONT_DIR, Label, Panel, UIElement

_MIN_SUN_DISTANCE = 0.00001
_LABEL_X_OFFSET = 25

# (vertical offset, character size, font file) for each label, in display order.
_LABEL_LAYOUT: tuple[tuple[int, int, str], ...] = (
    (20, 56, "Gugi-Regular.ttf"),
    (100, 20, "ChakraPetch-Regular.ttf"),
    *((offset, 18, DEFAULT_FONT) for offset in (230, 265, 300, 335, 370, 405, 440, 475)),
    *((offset, 18, DEFAULT_FONT) for offset in (530, 565)),
    *((offset, 18, DEFAULT_FONT) for offset in (620, 655, 690, 725, 760)),
    *((offset, 18, DEFAULT_FONT) for offset in (815, 850, 885)),
    *((offset, 18, DEFAULT_FONT) for offset in (940, 975)),
)


def _f(value: float) -> str:
    return f"{value:f}"


def _guarded(compute: Callable[[], float]) -> float:
    """Evaluate a quantity, yielding inf or nan where the maths breaks down."""
    try:
        return compute()
    except ZeroDivisionError:
        return math.inf
    except ValueError:
        return math.nan


def format_body_info(body: Body, sun: Body) -> list[str]:
    """The sidebar's lines for ``body``, in label order."""
    speed = body.velocity.magnitude()
    sun_distance = max(_MIN_SUN_DISTANCE, (body.position - sun.position).magnitude())
    kinetic = body.kinetic_energy()
    potential = body.potential_energy(sun)
    return [
        body.name,
        body.description,
        f"Position: {_f(body.position.x)}, {_f(body.position.y)}",
        f"Distance from the Sun: {_f(sun_distance)}",
        f"Orbital Speed: {_f(speed)}",
        f"Orbital Period: {_f(_guarded(lambda: body.orbital_period(sun)))}",
        f"Orbital Phase: {_f(body.phase_angle)}",
        f"Orbits Completed: {body.orbits_completed:d}",
        f"Orbital Eccentricity: {_f(body.eccentricity)}",
        f"Angular Momentum: {_f(body.angular_momentum(sun))}",
        f"Acceleration: {_f(body.acceleration.magnitude())}",
        f"Centripetal Force: {_f(body.mass * speed * speed / sun_distance)}",
        f"Mass: {_f(body.mass)}",
        f"Surface Temperature: {int(body.surface_temperature):d}",
        f"Rotational Period: {_f(body.rotational_period)} earth hours",
        f"Gravity at Surface: {_f(_guarded(body.surface_gravity))}",
        f"Escape Velocity: {_f(_guarded(body.escape_velocity))}",
        f"Kinetic Energy: {_f(kinetic)}",
        f"Potential Energy: {_f(potential)}",
        f"Total Energy: {_f(kinetic + potential)}",
        f"No. of Moons: {int(body.moon_count):d}",
        f"Nicknames: {body.nicknames}",
    ]


class PlanetInfoSidebar(UIElement):
    """Shows the selected body's properties, relative to the Sun."""

    def __init__(
        self,
        position: Sequence[float],
        size: Sequence[float],
        selection: SelectionManager,
        sun: Body,
        font_dir: str | PathLike[str] = FONT_DIR,
    ) -> None:
        self.selection = selection
        self.sun = sun
        self.panel = Panel(position, size)
        x, y = self.panel.position
        self.labels: list[Label] = [
            Label((x + _LABEL_X_OFFSET, y + offset), "", char_size, font_name, font_dir)
            for offset, char_size, font_name in _LABEL_LAYOUT
        ]

    def update(self, dt: Any) -> None:
        selected = self.selection.selected
        if selected is None:
            return
        for label, text in zip(self.labels, format_body_info(selected, self.sun)):
            label.set_text(text)

    def draw(self, surface: pygame.Surface) -> None:
        if not self.selection.has_selection():
            return
        self.panel.draw(surface)
        for label in self.labels:
            label.draw(surface)