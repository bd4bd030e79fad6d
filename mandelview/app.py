"""Interactive window that shows the Mandelbrot set and reports frame timing."""

from __future__ import annotations

import argparse
import math
import sys
import time
from dataclasses import dataclass
from typing import Iterable

import pygame

from .render import compute_counts, render
from .settings import Key, Settings

FRAME_WINDOW = 256
_CLEAR_SCREEN = "\033[H\033[2J"
_TITLE = "Mandelbrot"

_KEYMAP = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_EQUALS: Key.EQUAL,
    pygame.K_KP_PLUS: Key.ADD,
    pygame.K_KP_MINUS: Key.SUBTRACT,
    pygame.K_MINUS: Key.HYPHEN,
    pygame.K_0: Key.NUM0,
    pygame.K_1: Key.NUM1,
    pygame.K_2: Key.NUM2,
    pygame.K_3: Key.NUM3,
}


@dataclass
class FrameStats:
    """Frames per second and a tick count averaged over blocks of 256 frames."""

    previous_seconds: float = 0.0
    previous_ticks: int = 0
    frames: int = 0
    ticks: int = 0
    ticks_average: int = 0
    fps: float = 0.0

    def tick(self, seconds: float, ticks: int) -> float:
        """Record a finished frame at the given clock readings; return its fps."""
        elapsed = seconds - self.previous_seconds
        self.fps = 1.0 / elapsed if elapsed else math.inf
        self.previous_seconds = seconds

        self.ticks += ticks - self.previous_ticks
        self.previous_ticks = ticks

        self.frames += 1
        if self.frames == FRAME_WINDOW:
            self.ticks_average = self.ticks >> 8
            self.frames = 0
            self.ticks = 0
        return self.fps

    def report(self, mode: int) -> str:
        """Status text for the current frame."""
        return (
            f"mode: {mode:d}\n"
            f"fps_SFML: {self.fps:.2f}\n"
            f"ticks_RDTSC: {self.ticks_average:d}\n"
        )


def translate_key(pygame_key: int) -> Key | None:
    """The view key for a pygame key code, or None if it has no meaning."""
    return _KEYMAP.get(pygame_key)


def handle_events(settings: Settings, events: Iterable) -> bool:
    """Apply pending events to the settings; return False when the window should close."""
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            key = translate_key(event.key)
            if key is None:
                continue
            shift = bool(getattr(event, "mod", 0) & pygame.KMOD_SHIFT)
            if settings.apply_key(key, shift):
                return False
    return True


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mandelview", description="Interactive Mandelbrot set viewer."
    )
    parser.add_argument(
        "--no-graphics",
        action="store_true",
        help="compute every frame but do not draw it",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the viewer until the window is closed or Escape is pressed."""
    args = _parse_args(argv)
    settings = Settings()

    pygame.init()
    try:
        screen = pygame.display.set_mode((settings.width, settings.height))
        pygame.display.set_caption(_TITLE)
        stats = FrameStats(time.perf_counter(), time.perf_counter_ns())

        while handle_events(settings, pygame.event.get()):
            if args.no_graphics:
                compute_counts(settings)
            else:
                image = render(settings)
                surface = pygame.image.frombuffer(
                    image.tobytes(), (settings.width, settings.height), "RGBA"
                )
                screen.blit(surface, (0, 0))
                pygame.display.flip()

            stats.tick(time.perf_counter(), time.perf_counter_ns())
            sys.stdout.write(_CLEAR_SCREEN + stats.report(settings.mode))
            sys.stdout.flush()
    finally:
        pygame.quit()
    return 0