"""The interactive solar system viewer: loading screen, then the simulation."""

from __future__ import annotations

import argparse
import enum
import logging
import time
from pathlib import Path

import pygame

from orrery.camera import Camera
from orrery.input_handler import InputHandler
from orrery.orbits import TIMESTEP
from orrery.quotes import QuoteManager
from orrery.renderer import AssetManager, Renderer
from orrery.selection import SelectionManager
from orrery.sidebar import PlanetInfoSidebar
from orrery.simulation import Simulation
from orrery.ui import UIManager

logger = logging.getLogger(__name__)

WINDOW_SIZE = (1920, 1080)
WINDOW_TITLE = "sim"
FRAME_RATE = 60
DEFAULT_ASSET_DIR = Path("..") / "assets"
TITLE_FONT = "GrenzeGotisch-Regular.ttf"
START_PROMPT = "Press any key to start the Simulation."
FADE_DURATION = 2.5
DELAY_BEFORE_FADE = 1.0
DEFAULT_SELECTION_INDEX = 3  # Earth


class GameState(enum.Enum):
    LOADING = enum.auto()
    RUNNING = enum.auto()


def loading_alpha(elapsed: float, delay: float, duration: float) -> int:
    """Opacity (0-255) of the loading screen's black overlay after ``elapsed`` seconds."""
    if duration <= 0:
        raise ValueError("fade duration must be positive")
    if elapsed < delay:
        return 255
    return int(255.0 * max(0.0, 1.0 - (elapsed - delay) / duration))


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="orrery", description="Interactive solar system simulation.")
    parser.add_argument("--assets", type=Path, default=DEFAULT_ASSET_DIR, help="asset directory")
    parser.add_argument(
        "--frames", type=int, default=0, help="stop after this many frames (0 runs until closed)"
    )
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames cannot be negative")
    return args


def _run(assets: Path, max_frames: int) -> int:
    window = pygame.display.set_mode(WINDOW_SIZE)
    pygame.display.set_caption(WINDOW_TITLE)
    width, height = window.get_size()

    quotes = QuoteManager(assets / "quotes.txt")
    font_path = assets / "fonts" / TITLE_FONT
    try:
        quote_font = pygame.font.Font(str(font_path), 32)
        prompt_font = pygame.font.Font(str(font_path), 24)
    except (OSError, pygame.error):
        logger.error("Could not load font: %s", font_path)
        return 1

    quote_text = quote_font.render(quotes.random_quote(), True, (255, 255, 255))
    quote_rect = quote_text.get_rect(center=(width / 2, height / 2 - 100))
    prompt_text = prompt_font.render(START_PROMPT, True, (200, 200, 200))
    prompt_rect = prompt_text.get_rect(center=(width / 2, 700))
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    loading_started = time.monotonic()

    simulation = Simulation()
    bodies = simulation.bodies
    textures = AssetManager()
    for body in bodies:
        body.texture = textures.get_texture(assets / "sprites" / f"{body.name.lower()}.png")

    camera = Camera()
    renderer = Renderer(window)
    input_handler = InputHandler()
    ui = UIManager()
    selection = SelectionManager(bodies[DEFAULT_SELECTION_INDEX])
    ui.add(PlanetInfoSidebar((10.0, 10.0), (350.0, 1000.0), selection, bodies[0], font_dir=assets / "fonts"))

    background_path = assets / "sprites" / "bg.png"
    try:
        background = pygame.image.load(str(background_path))
    except (OSError, pygame.error):
        logger.error("Unable to load the background image: %s", background_path)
        return 1

    clock = pygame.time.Clock()
    state = GameState.LOADING
    frames = 0
    running = True
    while running:
        dt = clock.tick(FRAME_RATE) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            if state is GameState.LOADING:
                if event.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN):
                    state = GameState.RUNNING
            else:
                ui.handle_event(event)
                input_handler.handle_event(event, (width, height), camera, bodies, selection)
        if not running:
            break

        if state is GameState.LOADING:
            alpha = loading_alpha(time.monotonic() - loading_started, DELAY_BEFORE_FADE, FADE_DURATION)
            window.fill((0, 0, 0))
            window.blit(quote_text, quote_rect)
            window.blit(prompt_text, prompt_rect)
            if alpha > 0:
                overlay.fill((0, 0, 0, alpha))
                window.blit(overlay, (0, 0))
        else:
            simulation.update(TIMESTEP)
            ui.update(dt)
            window.fill((0, 0, 0))
            window.blit(background, (0, 0))
            renderer.draw_world(bodies, camera, selection)
            renderer.draw_ui(ui)
        pygame.display.flip()

        frames += 1
        if max_frames and frames >= max_frames:
            break
    return 0


def main(argv: list[str] | None = None) -> int:
    """Open the window and run until it is closed; returns the exit status."""
    args = _parse_args(argv)
    pygame.display.init()
    pygame.font.init()
    try:
        return _run(args.assets, args.frames)
    finally:
        pygame.quit()