"""A celestial body and its physical quantities."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from orrery.orbit_trail import OrbitTrail
from orrery.orbits import G
from orrery.vector import Vector2D

_MIN_SQUARED_DISTANCE = 0.01


@dataclass(eq=False)
class Body:
    """A celestial body; compared by identity."""

    position: Vector2D = field(default_factory=Vector2D.zero)
    velocity: Vector2D = field(default_factory=Vector2D.zero)
    acceleration: Vector2D = field(default_factory=Vector2D.zero)
    mass: float = 1.0
    visual_radius: float = 1.0
    actual_radius: float = 0.0
    semi_major_axis: float = 0.0
    eccentricity: float = 0.0
    # Sidereal day in Earth hours; negative means retrograde rotation.
    rotational_period: float = 0.0
    surface_temperature: int = 0
    moon_count: int = 0
    orbits_completed: int = 0
    phase_angle: float = 0.0
    name: str = "Default Body"
    description: str = ""
    nicknames: str = ""
    texture: Any = None
    trail: OrbitTrail = field(default_factory=OrbitTrail)

    def apply_force(self, force: Vector2D) -> None:
        self.acceleration = self.acceleration + force / self.mass

    def reset_acceleration(self) -> None:
        self.acceleration = Vector2D.zero()

    def gravitational_force(self, other: Body) -> Vector2D:
        """Force that ``other`` exerts on this body, softened at short range."""
        squared = max(_MIN_SQUARED_DISTANCE, Vector2D.squared_distance(self.position, other.position))
        magnitude = G * self.mass * other.mass / squared
        return (other.position - self.position).normalized() * magnitude

    def is_colliding(self, other: Body) -> bool:
        radius_sum = self.visual_radius + other.visual_radius
        return Vector2D.squared_distance(self.position, other.position) < radius_sum * radius_sum

    def kinetic_energy(self) -> float:
        return 0.5 * self.mass * self.velocity.magnitude_squared()

    def potential_energy(self, other: Body) -> float:
        distance = (self.position - other.position).magnitude()
        if distance == 0:
            return 0.0
        return -G * self.mass * other.mass / distance

    def angular_momentum(self, other: Body) -> float:
        r = self.position - other.position
        return -self.mass * r.cross(self.velocity)

    def orbital_period(self, other: Body) -> float:
        a = self.semi_major_axis
        return 2 * math.pi * math.sqrt(a * a * a / G * other.mass)

    def surface_gravity(self) -> float:
        return G * self.mass / (self.actual_radius * self.actual_radius)

    def escape_velocity(self) -> float:
        return math.sqrt(2 * G * self.mass / self.actual_radius)

    def is_in_view(self, center: Sequence[float], size: Sequence[float]) -> bool:
        """Whether the body's bounding box overlaps a view of given center and size."""
        cx, cy = center
        width, height = size
        left, right = cx - width / 2, cx + width / 2
        top, bottom = cy - height / 2, cy + height / 2
        x, y, r = self.position.x, self.position.y, self.visual_radius
        return x + r > left and x - r < right and y + r > top and y - r < bottom