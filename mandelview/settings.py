"""View parameters for the Mandelbrot viewer and their keyboard controls."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

WIDTH = 800
HEIGHT = 600

_PAN_STEP = 0.1
_PAN_SHIFT_FACTOR = 10
_ZOOM_FACTOR = 0.9
_ZOOM_SHIFT_FACTOR = 0.81


class Key(Enum):
    """Keys that change the view."""

    ESCAPE = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    EQUAL = auto()
    ADD = auto()
    SUBTRACT = auto()
    HYPHEN = auto()
    NUM0 = auto()
    NUM1 = auto()
    NUM2 = auto()
    NUM3 = auto()


_MODE_KEYS = {Key.NUM0: 0, Key.NUM1: 1, Key.NUM2: 2, Key.NUM3: 3}


@dataclass
class Settings:
    """Centre, zoom, iteration limits and render mode of the view.

    The default view covers x in [-2, 1] and y in [-1.25, 1.25].
    """

    x0: float = -0.5
    y0: float = 0.0
    scale: float = 1.0
    dx: float = 3 / 800
    dy: float = 2.5 / 600
    nmax: int = 256
    rmax: float = 10.0
    mode: int = 0
    width: int = WIDTH
    height: int = HEIGHT

    @property
    def rmax2(self) -> float:
        """Squared escape radius."""
        return self.rmax * self.rmax

    def apply_key(self, key: Key, shift: bool = False) -> bool:
        """Apply a key press; return True when the viewer should close."""
        pan = _PAN_STEP * self.scale * (_PAN_SHIFT_FACTOR if shift else 1)
        zoom = _ZOOM_FACTOR * (_ZOOM_SHIFT_FACTOR if shift else 1)

        if key is Key.ESCAPE:
            return True
        if key is Key.LEFT:
            self.x0 -= pan
        elif key is Key.RIGHT:
            self.x0 += pan
        elif key is Key.UP:
            self.y0 -= pan
        elif key is Key.DOWN:
            self.y0 += pan
        elif key in (Key.EQUAL, Key.ADD):
            self.scale *= zoom
        elif key in (Key.SUBTRACT, Key.HYPHEN):
            self.scale /= zoom
        elif key in _MODE_KEYS:
            self.mode = _MODE_KEYS[key]
        return False

    def pixel_step(self) -> tuple[float, float]:
        """Distance in the complex plane between neighbouring pixels (x, y)."""
        return self.dx * self.scale, self.dy * self.scale