import math

import pytest

from orrery.orbits import (
    EARTH_SEMI_MAJOR_AXIS,
    G,
    MARS_ECCENTRICITY,
    MARS_SEMI_MAJOR_AXIS,
    MERCURY_ECCENTRICITY,
    MERCURY_SEMI_MAJOR_AXIS,
    SUN_MASS,
    perihelion_state,
)


def test_perihelion_lies_on_x_axis_with_tangential_velocity():
    position, velocity = perihelion_state(MARS_SEMI_MAJOR_AXIS, MARS_ECCENTRICITY)
    assert position.y == 0.0
    assert velocity.x == 0.0
    assert velocity.y > 0


def test_circular_orbit_speed_balances_gravity():
    position, velocity = perihelion_state(EARTH_SEMI_MAJOR_AXIS, 0.0)
    assert position.x == pytest.approx(EARTH_SEMI_MAJOR_AXIS)
    assert velocity.magnitude_squared() == pytest.approx(G * SUN_MASS / EARTH_SEMI_MAJOR_AXIS)


def test_eccentric_perihelion_is_inside_semi_major_axis():
    position, _ = perihelion_state(MERCURY_SEMI_MAJOR_AXIS, MERCURY_ECCENTRICITY)
    assert 0 < position.x < MERCURY_SEMI_MAJOR_AXIS


@pytest.mark.parametrize(
    "a, e",
    [(MERCURY_SEMI_MAJOR_AXIS, MERCURY_ECCENTRICITY), (MARS_SEMI_MAJOR_AXIS, MARS_ECCENTRICITY)],
)
def test_specific_orbital_energy_matches_semi_major_axis(a, e):
    position, velocity = perihelion_state(a, e)
    energy = velocity.magnitude_squared() / 2 - G * SUN_MASS / position.magnitude()
    assert energy == pytest.approx(-G * SUN_MASS / (2 * a))


@pytest.mark.parametrize(
    "a, e",
    [(MERCURY_SEMI_MAJOR_AXIS, MERCURY_ECCENTRICITY), (MARS_SEMI_MAJOR_AXIS, MARS_ECCENTRICITY)],
)
def test_specific_angular_momentum_matches_ellipse(a, e):
    position, velocity = perihelion_state(a, e)
    h = position.cross(velocity)
    assert h == pytest.approx(math.sqrt(G * SUN_MASS * a * (1 - e * e)))


def test_parabolic_eccentricity_is_rejected():
    with pytest.raises(ValueError):
        perihelion_state(1.0, 1.0)


def test_zero_semi_major_axis_is_rejected():
    with pytest.raises(ValueError):
        perihelion_state(0.0, 0.1)