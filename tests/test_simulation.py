import math

import pytest

from orrery import orbits
from orrery.body import Body
from orrery.simulation import Simulation, create_solar_system
from orrery.vector import Vector2D

PLANET_NAMES = [
    "Sun", "Mercury", "Venus", "Earth", "Mars",
    "Jupiter", "Saturn", "Uranus", "Neptune",
]


def _total_momentum(bodies):
    total = Vector2D.zero()
    for body in bodies:
        total = total + body.velocity * body.mass
    return total


def _total_energy(bodies):
    kinetic = sum(b.kinetic_energy() for b in bodies)
    potential = 0.0
    for i, a in enumerate(bodies):
        for b in bodies[i + 1:]:
            potential += a.potential_energy(b)
    return kinetic + potential


def test_solar_system_order():
    bodies = create_solar_system()
    assert [b.name for b in bodies] == PLANET_NAMES


def test_sun_properties():
    sun = create_solar_system()[0]
    assert sun.mass == orbits.SUN_MASS
    assert sun.actual_radius == orbits.SUN_RADIUS
    assert sun.position == Vector2D(0.0, 0.0)


def test_earth_starts_at_perihelion():
    earth = create_solar_system()[3]
    position, velocity = orbits.perihelion_state(
        orbits.EARTH_SEMI_MAJOR_AXIS, orbits.EARTH_ECCENTRICITY
    )
    assert earth.position == position
    assert earth.velocity == -velocity
    assert earth.velocity.y < 0
    assert earth.moon_count == 1
    assert earth.semi_major_axis == orbits.EARTH_SEMI_MAJOR_AXIS


def test_trail_spacing_follows_semi_major_axis():
    for body in create_solar_system()[1:]:
        expected = (body.semi_major_axis * 0.01) ** 2
        assert body.trail.min_distance_sq == pytest.approx(expected)


def test_total_momentum_is_zero():
    total = _total_momentum(create_solar_system())
    assert total.x == pytest.approx(0.0, abs=1e-15)
    assert total.y == pytest.approx(0.0, abs=1e-15)


def test_default_simulation_uses_solar_system():
    simulation = Simulation()
    assert [b.name for b in simulation.bodies] == PLANET_NAMES


def test_update_moves_bodies_and_records_trail():
    simulation = Simulation()
    before = [b.position for b in simulation.bodies]
    simulation.update(orbits.TIMESTEP)
    after = [b.position for b in simulation.bodies]
    assert all(a != b for a, b in zip(before, after))
    assert all(len(b.trail) == 1 for b in simulation.bodies)


def test_momentum_conserved_over_steps():
    simulation = Simulation()
    for _ in range(50):
        simulation.update(orbits.TIMESTEP)
    total = _total_momentum(simulation.bodies)
    assert total.magnitude() < 1e-12


def test_two_body_energy_conserved():
    sun = Body(name="Sun", mass=1.0)
    position, velocity = orbits.perihelion_state(1.0, 0.0)
    planet = Body(name="Planet", mass=1e-6, position=position, velocity=velocity)
    simulation = Simulation([sun, planet])
    start = _total_energy(simulation.bodies)
    for _ in range(300):
        simulation.update(orbits.TIMESTEP)
    assert _total_energy(simulation.bodies) == pytest.approx(start, rel=1e-4)


def test_phase_angles_stay_in_range():
    simulation = Simulation()
    for _ in range(100):
        simulation.update(orbits.TIMESTEP)
        for body in simulation.bodies[1:]:
            assert 0.0 <= body.phase_angle < 360.0


def test_mercury_completes_an_orbit_before_earth():
    simulation = Simulation()
    for _ in range(200):
        simulation.update(orbits.TIMESTEP)
    by_name = {b.name: b for b in simulation.bodies}
    assert by_name["Mercury"].orbits_completed == 1
    assert by_name["Earth"].orbits_completed == 0
    assert by_name["Sun"].orbits_completed == 0


def test_phase_increases_for_clockwise_on_screen_motion():
    simulation = Simulation()
    simulation.update(orbits.TIMESTEP)
    earth = simulation.bodies[3]
    assert 0.0 < earth.phase_angle < 1.0
    delta = earth.position - simulation.bodies[0].position
    assert earth.phase_angle == pytest.approx(math.degrees(math.atan2(-delta.y, delta.x)))


def test_empty_simulation_update_is_harmless():
    simulation = Simulation([])
    simulation.update(orbits.TIMESTEP)
    assert simulation.bodies == []