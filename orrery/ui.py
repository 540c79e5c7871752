"""Basic on-screen UI elements: labels, panels and a manager to drive them."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence
from datetime import timedelta
from os import PathLike
from pathlib import Path
from typing import Any

import pygame

logger = logging.getLogger(__name__)

FONT_DIR = Path("..") / "assets" / "fonts"
DEFAULT_FONT = "SpaceMono-Regular.ttf"

RGBA = tuple[int, int, int, int]

WHITE: RGBA = (255, 255, 255, 255)
TRANSPARENT: RGBA = (0, 0, 0, 0)


def _rgba(color: Iterable[int]) -> RGBA:
    """Normalise an RGB or RGBA colour to an RGBA tuple."""
    channels = tuple(int(c) for c in color)
    if len(channels) == 3:
        channels = (*channels, 255)
    if len(channels) != 4:
        raise ValueError(f"a colour needs 3 or 4 channels, got {len(channels)}")
    if any(not 0 <= c <= 255 for c in channels):
        raise ValueError(f"colour channels must lie in 0..255: {channels}")
    return channels  # type: ignore[return-value]


def _point(values: Sequence[float]) -> tuple[float, float]:
    x, y = values
    return (float(x), float(y))


def _seconds(dt: Any) -> float:
    if isinstance(dt, timedelta):
        return dt.total_seconds()
    return float(dt)


class UIElement(ABC):
    """Base class of everything the UI manager drives."""

    last_event: Any = None
    elapsed: float = 0.0

    def handle_event(self, event: Any) -> None:
        """Remember the most recent input event seen by this element."""
        self.last_event = event

    def update(self, dt: Any) -> None:
        """Advance the element's clock by ``dt`` seconds."""
        self.elapsed += _seconds(dt)

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Draw the element onto ``surface``."""


class Label(UIElement):
    """A piece of text at a fixed position; newlines start new lines."""

    def __init__(
        self,
        position: Sequence[float],
        content: str = "",
        character_size: int = 32,
        font_name: str = DEFAULT_FONT,
        font_dir: str | PathLike[str] = FONT_DIR,
    ) -> None:
        self.position = _point(position)
        self.text = content
        self.character_size = 0
        self.set_character_size(character_size)
        self.color: RGBA = WHITE
        self.font_path = Path(font_dir) / font_name
        self._font_available = self.font_path.is_file()
        if not self._font_available:
            logger.error("Unable to load font for label: %s", self.font_path)
        self._font: pygame.font.Font | None = None
        self._font_size: int | None = None

    def set_text(self, content: str) -> None:
        self.text = content

    def set_character_size(self, size: int) -> None:
        if size < 0:
            raise ValueError("character size cannot be negative")
        self.character_size = int(size)

    def set_color(self, color: Iterable[int]) -> None:
        self.color = _rgba(color)

    def _get_font(self) -> pygame.font.Font:
        if self._font is not None and self._font_size == self.character_size:
            return self._font
        if not pygame.font.get_init():
            pygame.font.init()
        font = None
        if self._font_available:
            try:
                font = pygame.font.Font(str(self.font_path), self.character_size)
            except (OSError, pygame.error):
                logger.error("Unable to load font for label: %s", self.font_path)
                self._font_available = False
        if font is None:
            font = pygame.font.Font(None, self.character_size)
        self._font = font
        self._font_size = self.character_size
        return font

    def draw(self, surface: pygame.Surface) -> None:
        font = self._get_font()
        x, y = self.position
        for line in self.text.split("\n"):
            if line:
                rendered = font.render(line, True, self.color)
                surface.blit(rendered, (round(x), round(y)))
            y += font.get_linesize()


class Panel(UIElement):
    """A filled rectangle, transparent until given a colour."""

    def __init__(self, position: Sequence[float], size: Sequence[float]) -> None:
        self.position = _point(position)
        self.size = _point(size)
        self.color: RGBA = TRANSPARENT

    def set_color(self, color: Iterable[int]) -> None:
        self.color = _rgba(color)

    def draw(self, surface: pygame.Surface) -> None:
        alpha = self.color[3]
        if alpha == 0:
            return
        rect = pygame.Rect(
            round(self.position[0]),
            round(self.position[1]),
            max(0, round(self.size[0])),
            max(0, round(self.size[1])),
        )
        if alpha == 255:
            surface.fill(self.color[:3], rect)
            return
        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        overlay.fill(self.color)
        surface.blit(overlay, rect.topleft)


class UIManager:
    """Owns UI elements and forwards events, updates and drawing in order."""

    def __init__(self) -> None:
        self.elements: list[UIElement] = []

    def add(self, element: UIElement) -> None:
        self.elements.append(element)

    def handle_event(self, event: Any) -> None:
        for element in self.elements:
            element.handle_event(event)

    def update(self, dt: Any) -> None:
        for element in self.elements:
            element.update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        for element in self.elements:
            element.draw(surface)

    def __iter__(self) -> Iterator[UIElement]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)