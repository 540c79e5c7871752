"""Random quotes shown on the loading screen."""

from __future__ import annotations

import logging
import random
from os import PathLike

logger = logging.getLogger(__name__)

EMPTY_QUOTE = "Loading..."


class QuoteManager:
    """Loads non-empty lines from a text file and hands them out at random."""

    def __init__(self, filename: str | PathLike[str], rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.quotes: list[str] = []
        try:
            with open(filename, encoding="utf-8") as file:
                self.quotes = [line for line in (raw.rstrip("\n") for raw in file) if line]
        except OSError:
            logger.error("Could not open quote file: %s", filename)

    def random_quote(self) -> str:
        """A random quote, or a placeholder when none were loaded."""
        if not self.quotes:
            return EMPTY_QUOTE
        return self._rng.choice(self.quotes)