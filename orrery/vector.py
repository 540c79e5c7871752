"""Immutable two-dimensional vector used for positions, velocities and forces."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Vector2D:
    """A 2D vector of floats with the usual arithmetic."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> Vector2D:
        return cls(0.0, 0.0)

    @staticmethod
    def squared_distance(a: Vector2D, b: Vector2D) -> float:
        dx = a.x - b.x
        dy = a.y - b.y
        return dx * dx + dy * dy

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Vector2D:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.magnitude()
        if length == 0:
            return Vector2D(0.0, 0.0)
        return Vector2D(self.x / length, self.y / length)

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2D) -> float:
        return self.x * other.y - self.y * other.x

    def angle_between(self, other: Vector2D) -> float:
        """Angle in radians between two vectors; 0 if either is the zero vector."""
        m1 = self.magnitude()
        m2 = other.magnitude()
        if m1 == 0 or m2 == 0:
            return 0.0
        cosine = self.dot(other) / (m1 * m2)
        return math.acos(max(-1.0, min(1.0, cosine)))

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: object) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: object) -> Vector2D:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Vector2D:
        """Divide by a scalar; dividing by zero leaves the vector unchanged."""
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            return self
        return Vector2D(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"