"""Tracks which body, if any, the user has selected."""

from __future__ import annotations

from orrery.body import Body


class SelectionManager:
    """Holds the currently selected body."""

    def __init__(self, selected: Body | None = None) -> None:
        self.selected = selected

    def select(self, body: Body | None) -> None:
        self.selected = body

    def clear(self) -> None:
        self.selected = None

    def has_selection(self) -> bool:
        return self.selected is not None