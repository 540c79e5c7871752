"""Pairwise gravitational interaction between bodies."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations

from orrery.body import Body


def calculate_forces(bodies: Sequence[Body]) -> None:
    """Reset every body's acceleration and accumulate mutual gravity."""
    for body in bodies:
        body.reset_acceleration()
    for first, second in combinations(bodies, 2):
        force = first.gravitational_force(second)
        first.apply_force(force)
        second.apply_force(-force)