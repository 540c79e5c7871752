"""Bounded history of positions drawn behind an orbiting body."""

from __future__ import annotations

from collections import deque

from orrery.vector import Vector2D

MAX_TRAIL_SIZE = 942

Point = tuple[float, float]


class OrbitTrail:
    """Ring of the most recent positions, spaced at least a minimum distance apart."""

    def __init__(self) -> None:
        self._points: deque[Point] = deque(maxlen=MAX_TRAIL_SIZE)
        self._written = 0
        self._last: Point | None = None
        self.min_distance_sq = 0.0001

    def set_min_distance(self, min_distance: float) -> None:
        self.min_distance_sq = min_distance * min_distance

    def add_vertex(self, position: Vector2D) -> bool:
        """Record a position if it is far enough from the last one; report whether it was."""
        point = (position.x, position.y)
        if self._last is not None:
            dx = point[0] - self._last[0]
            dy = point[1] - self._last[1]
            if dx * dx + dy * dy <= self.min_distance_sq:
                return False
        self._points.append(point)
        self._written += 1
        self._last = point
        return True

    def segments(self) -> list[list[Point]]:
        """Line strips to draw, oldest point first.

        Once the ring is full the trail is drawn in two strips split at the
        ring's write position, and the newest point is left out of the second.
        Strips with fewer than two points are omitted.
        """
        points = list(self._points)
        if len(points) <= 1:
            return []
        if len(points) < MAX_TRAIL_SIZE:
            return [points]
        split = MAX_TRAIL_SIZE - self._written % MAX_TRAIL_SIZE
        strips = [points[:split], points[split:-1]]
        return [strip for strip in strips if len(strip) >= 2]

    def __len__(self) -> int:
        return len(self._points)