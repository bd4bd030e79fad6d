"""Escape-count computation of the Mandelbrot set in four interchangeable modes."""

from __future__ import annotations

from enum import IntEnum

import numpy as np

from .colors import colorize
from .settings import Settings

LANE_WIDTH = 4

_f32 = np.float32


class Mode(IntEnum):
    """Ways of computing the escape counts."""

    SCALAR = 0
    LANES = 1
    MASKED = 2
    VECTOR = 3


def _offsets(count: int) -> np.ndarray:
    return (np.arange(count) - count // 2).astype(np.float32)


def _require_lanes(settings: Settings) -> None:
    if settings.width % LANE_WIDTH:
        raise ValueError(
            f"width {settings.width} is not a multiple of {LANE_WIDTH}"
        )


def _rows(settings: Settings) -> np.ndarray:
    return _f32(settings.y0) + _offsets(settings.height) * _f32(settings.dy) * _f32(
        settings.scale
    )


def _lane_columns(settings: Settings) -> np.ndarray:
    step = _f32(settings.dx) * _f32(settings.scale)
    return _f32(settings.x0) + _offsets(settings.width) * step


def _rmax2_f32(settings: Settings) -> np.float32:
    r = _f32(settings.rmax)
    return r * r


def _iterate_frozen(cx: np.ndarray, cy: np.ndarray, nmax: int, rmax2) -> np.ndarray:
    """Iterate while |z|^2 <= rmax2; escaped points stop counting for good."""
    x, y = cx.copy(), cy.copy()
    counts = np.zeros(cx.shape, dtype=np.int64)
    active = np.ones(cx.shape, dtype=bool)
    two = _f32(2.0)
    with np.errstate(over="ignore", invalid="ignore"):
        for _ in range(nmax):
            x2, y2, xy = x * x, y * y, x * y
            active &= (x2 + y2) <= rmax2
            if not active.any():
                break
            counts += active
            x = np.where(active, x2 - y2 + cx, x)
            y = np.where(active, two * xy + cy, y)
    return counts


def escape_counts_scalar(settings: Settings) -> np.ndarray:
    """Escape counts computed point by point in single precision."""
    scale, dx = _f32(settings.scale), _f32(settings.dx)
    columns = _f32(settings.x0) + _offsets(settings.width) * dx * scale
    cx, cy = np.meshgrid(columns, _rows(settings))
    return _iterate_frozen(cx, cy, settings.nmax, _rmax2_f32(settings))


def escape_counts_lanes(settings: Settings) -> np.ndarray:
    """Escape counts over groups of four pixels, escaped lanes held out."""
    _require_lanes(settings)
    cx, cy = np.meshgrid(_lane_columns(settings), _rows(settings))
    return _iterate_frozen(cx, cy, settings.nmax, _rmax2_f32(settings))


def escape_counts_masked(settings: Settings) -> np.ndarray:
    """Escape counts with a fresh strict comparison mask each step.

    Lanes that fail the test are parked at (rmax, rmax).
    """
    _require_lanes(settings)
    cx, cy = np.meshgrid(_lane_columns(settings), _rows(settings))
    rmax = _f32(settings.rmax)
    rmax2 = _rmax2_f32(settings)
    x, y = cx.copy(), cy.copy()
    counts = np.zeros(cx.shape, dtype=np.int64)
    with np.errstate(over="ignore", invalid="ignore"):
        for _ in range(settings.nmax):
            x2, y2, xy = x * x, y * y, x * y
            inside = (x2 + y2) < rmax2
            if not inside.any():
                break
            counts += inside
            x = np.where(inside, x2 - y2 + cx, rmax)
            y = np.where(inside, xy + xy + cy, rmax)
    return counts


def escape_counts_vector(settings: Settings) -> np.ndarray:
    """Escape counts in double precision over groups of four pixels.

    Every lane keeps iterating until all four in its group have escaped.
    """
    _require_lanes(settings)
    height, width = settings.height, settings.width
    step = _f32(settings.dx) * _f32(settings.scale)
    columns = np.float64(_f32(settings.x0)) + (
        _offsets(width) * step
    ).astype(np.float64)
    rows = np.float64(_f32(settings.y0)) + (
        _offsets(height) * _f32(settings.dy) * _f32(settings.scale)
    ).astype(np.float64)
    cx, cy = np.meshgrid(columns, rows)
    rmax2 = np.float64(_rmax2_f32(settings))

    x, y = cx.copy(), cy.copy()
    counts = np.zeros((height, width // LANE_WIDTH, LANE_WIDTH), dtype=np.int64)
    alive = np.ones((height, width // LANE_WIDTH), dtype=bool)
    with np.errstate(over="ignore", invalid="ignore"):
        for _ in range(settings.nmax):
            x2, y2, xy = x * x, y * y, x * y
            inside = ((x2 + y2) <= rmax2).reshape(counts.shape)
            alive &= inside.any(axis=2)
            if not alive.any():
                break
            counts += inside & alive[..., np.newaxis]
            x = x2 - y2 + cx
            y = xy + xy + cy
    return counts.reshape(height, width)


_COMPUTE = {
    Mode.SCALAR: escape_counts_scalar,
    Mode.LANES: escape_counts_lanes,
    Mode.MASKED: escape_counts_masked,
    Mode.VECTOR: escape_counts_vector,
}


def compute_counts(settings: Settings) -> np.ndarray:
    """Escape counts for the mode named in the settings."""
    return _COMPUTE[Mode(settings.mode)](settings)


def render(settings: Settings) -> np.ndarray:
    """RGBA image of the current view."""
    return colorize(compute_counts(settings), settings.nmax)