"""The solar system model and its time integration."""

from __future__ import annotations

import math
from collections.abc import Iterable

from orrery import orbits
from orrery.body import Body
from orrery.physics import calculate_forces
from orrery.vector import Vector2D

_SUN_NAME = "Sun"


def _planet(
    name: str,
    description: str,
    nicknames: str,
    mass: float,
    actual_radius: float,
    visual_radius: float,
    semi_major_axis: float,
    eccentricity: float,
    rotational_period: float,
    moon_count: int,
    surface_temperature: int,
) -> Body:
    position, velocity = orbits.perihelion_state(semi_major_axis, eccentricity)
    body = Body(
        position=position,
        velocity=-velocity,
        mass=mass,
        visual_radius=visual_radius,
        actual_radius=actual_radius,
        semi_major_axis=semi_major_axis,
        eccentricity=eccentricity,
        rotational_period=rotational_period,
        moon_count=moon_count,
        surface_temperature=surface_temperature,
        name=name,
        description=description,
        nicknames=nicknames,
    )
    body.trail.set_min_distance(semi_major_axis * 0.01)
    return body


def create_solar_system() -> list[Body]:
    """The Sun followed by the eight planets, with zero total momentum."""
    sun = Body(
        name=_SUN_NAME,
        description=(
            "The blazing heart of the solar system.\n"
            "Its immense gravity binds every orbiting body,\n"
            "and its energy fuels the rhythms of planets and life.\n"
            "A sphere of fusion, burning for billions of years."
        ),
        nicknames="Sol, Helios, The Day Star",
        mass=orbits.SUN_MASS,
        visual_radius=0.2,
        actual_radius=orbits.SUN_RADIUS,
        rotational_period=587,
        surface_temperature=5505,
    )

    planets = [
        _planet(
            "Mercury",
            "The swiftest and innermost planet.\n"
            "Its surface scorched by daylight and frozen in night.\n"
            "With no atmosphere to soften its extremes,\n"
            "it stands as a silent, cratered relic of the early solar system.",
            "The Swift Planet, Messenger of the Gods",
            orbits.MERCURY_MASS, orbits.MERCURY_RADIUS, 0.04,
            orbits.MERCURY_SEMI_MAJOR_AXIS, orbits.MERCURY_ECCENTRICITY,
            1407.5, 0, 167,
        ),
        _planet(
            "Venus",
            "A world drowned in golden haze, where sunlight\n"
            "melts into a sky of acid and storm.\n"
            "Its surface, a pressure-cooked wasteland of volcanic plains,\n"
            "remains hidden beneath clouds that never break.",
            "Earth's Twin, The Morning Star, The Evening Star",
            orbits.VENUS_MASS, orbits.VENUS_RADIUS, 0.06,
            orbits.VENUS_SEMI_MAJOR_AXIS, orbits.VENUS_ECCENTRICITY,
            -5832.5, 0, 464,
        ),
        _planet(
            "Earth",
            "The only known world with life, oceans, and oxygen.\n"
            "A delicate balance of atmosphere and water makes Earth a rare\n"
            "oasis in a vast, empty cosmos.\n"
            "It's our home, and so far, the only one we've got.",
            "The Blue Planet, Terra, The Pale Blue dot, Gaia",
            orbits.EARTH_MASS, orbits.EARTH_RADIUS, 0.07,
            orbits.EARTH_SEMI_MAJOR_AXIS, orbits.EARTH_ECCENTRICITY,
            24, 1, 15,
        ),
        _planet(
            "Mars",
            "A dry and barren world, its surface etched\n"
            "by canyons deeper than any on Earth.\n"
            "Thin air and bitter cold blanket its rusted sands, where\n"
            "rovers now chase the whispers of lost water.",
            "The Red Planet, God of War",
            orbits.MARS_MASS, orbits.MARS_RADIUS, 0.06,
            orbits.MARS_SEMI_MAJOR_AXIS, orbits.MARS_ECCENTRICITY,
            24.6, 2, -65,
        ),
        _planet(
            "Jupiter",
            "The largest planet and the colossal guardian of the solar system,\n"
            "so vast it bends the paths of comets and light.\n"
            "Its storms could swallow worlds whole,\n"
            "and its presence holds moons like a miniature solar system.",
            "The Gas Giant, King of the Gods, The Jovian Giant",
            orbits.JUPITER_MASS, orbits.JUPITER_RADIUS, 0.25,
            orbits.JUPITER_SEMI_MAJOR_AXIS, orbits.JUPITER_ECCENTRICITY,
            9.9, 95, -110,
        ),
        _planet(
            "Saturn",
            "Wrapped in icy rings stretching far beyond the planet,\n"
            "this gas giant hides a core deep beneath its haze.\n"
            "Winds roar faster than sound through its golden atmosphere,\n"
            "while dozens of moons orbit in complex, shifting patterns.",
            "The Ringed Planet, Lord of the Rings",
            orbits.SATURN_MASS, orbits.SATURN_RADIUS, 0.6,
            orbits.SATURN_SEMI_MAJOR_AXIS, orbits.SATURN_ECCENTRICITY,
            10.7, 146, -140,
        ),
        _planet(
            "Uranus",
            "Tilted on its side with poles facing the Sun,\n"
            "it rolls through space in quiet defiance.\n"
            "Its pale blue clouds hide an icy core,\n"
            "and faint rings circle a world few have truly seen.",
            "The Ice Giant, The Sideways Planet",
            orbits.URANUS_MASS, orbits.URANUS_RADIUS, 0.4,
            orbits.URANUS_SEMI_MAJOR_AXIS, orbits.URANUS_ECCENTRICITY,
            -17.2, 28, -195,
        ),
        _planet(
            "Neptune",
            "Far beyond the warmth of the Sun it circles,\n"
            "a deep blue world lashed by supersonic winds, and a faint \n"
            "glow that hints at heat from within its core.\n"
            "Since its discovery in 1846, it has completed only one orbit around the sun",
            "The Windy Planet, God of the Sea, The Blue Giant",
            orbits.NEPTUNE_MASS, orbits.NEPTUNE_RADIUS, 0.4,
            orbits.NEPTUNE_SEMI_MAJOR_AXIS, orbits.NEPTUNE_ECCENTRICITY,
            16.1, 16, -200,
        ),
    ]

    total_momentum = Vector2D.zero()
    for planet in planets:
        total_momentum = total_momentum + planet.velocity * planet.mass
    sun.velocity = -total_momentum / orbits.SUN_MASS

    return [sun, *planets]


class Simulation:
    """A set of bodies advanced with velocity Verlet integration.

    The first body is the reference for orbital phase and orbit counting.
    """

    def __init__(self, bodies: Iterable[Body] | None = None) -> None:
        self.bodies: list[Body] = list(bodies) if bodies is not None else create_solar_system()

    def update(self, dt: float) -> None:
        """Advance every body by ``dt`` time units."""
        for body in self.bodies:
            body.position = body.position + body.velocity * dt + body.acceleration * (0.5 * dt * dt)

        old_accelerations = [body.acceleration for body in self.bodies]
        calculate_forces(self.bodies)
        for body, old in zip(self.bodies, old_accelerations):
            body.velocity = body.velocity + (old + body.acceleration) * (0.5 * dt)

        if not self.bodies:
            return
        reference = self.bodies[0]
        for body in self.bodies:
            body.trail.add_vertex(body.position)
            if body.name == _SUN_NAME:
                continue
            previous_phase = body.phase_angle
            delta = body.position - reference.position
            angle = math.atan2(-delta.y, delta.x)
            if angle < 0:
                angle += 2 * math.pi
            body.phase_angle = math.degrees(angle)
            if previous_phase > 300.0 and body.phase_angle < 60.0:
                body.orbits_completed += 1