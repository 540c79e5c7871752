"""Simulation units, planetary data and initial orbital states."""

from __future__ import annotations

import math

from orrery.vector import Vector2D

# Simulation units: G = 1, one solar mass, one astronomical unit.
G = 1.0
PI = 3.14159265
SUN_MASS = 1.0
SUN_RADIUS = 0.00465046726
AU = 1.0

# Simulation time per update step. One time unit ("blip") is about 58.13
# days, so the Earth completes an orbit in 2*pi blips.
TIMESTEP = 0.01

EARTH_MASS = 3.0e-6
EARTH_RADIUS = 4.2635e-5 * AU
EARTH_SEMI_MAJOR_AXIS = AU
EARTH_ECCENTRICITY = 0.01671

MERCURY_MASS = 0.055 * EARTH_MASS
MERCURY_RADIUS = 1.63083872e-5
MERCURY_SEMI_MAJOR_AXIS = 0.387098 * AU
MERCURY_ECCENTRICITY = 0.20563

VENUS_MASS = 0.815 * EARTH_MASS
VENUS_RADIUS = 4.04537843e-5
VENUS_SEMI_MAJOR_AXIS = 0.7233 * AU
VENUS_ECCENTRICITY = 0.0068

MARS_MASS = 0.107 * EARTH_MASS
MARS_RADIUS = 2.26574081e-5
MARS_SEMI_MAJOR_AXIS = 1.524 * AU
MARS_ECCENTRICITY = 0.0935

JUPITER_MASS = 317.83 * EARTH_MASS
JUPITER_RADIUS = 0.00046732617
JUPITER_SEMI_MAJOR_AXIS = 5.204 * AU
JUPITER_ECCENTRICITY = 0.0483

SATURN_MASS = 95.16 * EARTH_MASS
SATURN_RADIUS = 0.000389256877
SATURN_SEMI_MAJOR_AXIS = 9.573 * AU
SATURN_ECCENTRICITY = 0.0565

URANUS_MASS = 14.53 * EARTH_MASS
URANUS_RADIUS = 0.000169534499
URANUS_SEMI_MAJOR_AXIS = 19.19126 * AU
URANUS_ECCENTRICITY = 0.04717

NEPTUNE_MASS = 17.15 * EARTH_MASS
NEPTUNE_RADIUS = 0.000164587904
NEPTUNE_SEMI_MAJOR_AXIS = 30.178 * AU
NEPTUNE_ECCENTRICITY = 0.00867


def perihelion_state(semi_major_axis: float, eccentricity: float) -> tuple[Vector2D, Vector2D]:
    """Position and velocity at perihelion around a solar mass at the origin.

    The perihelion lies on the +x axis and the velocity points along +y.
    """
    r = semi_major_axis * (1 - eccentricity)
    if semi_major_axis == 0 or r == 0:
        raise ValueError("orbit has no defined perihelion speed")
    radicand = G * SUN_MASS * (2 / r - 1 / semi_major_axis)
    if radicand < 0:
        raise ValueError("orbit parameters give no real perihelion speed")
    return Vector2D(r, 0.0), Vector2D(0.0, math.sqrt(radicand))