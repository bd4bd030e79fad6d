"""Colouring of escape counts."""

from __future__ import annotations

import numpy as np

_SPREAD = np.float32(10000.0)
_BLUE = 200
_OPAQUE = 255


def _check_nmax(nmax: int) -> None:
    if nmax <= 0:
        raise ValueError(f"nmax must be positive, got {nmax}")


def pixel_color(n: int, nmax: int) -> tuple[int, int, int, int]:
    """RGBA colour of a pixel whose orbit stayed bounded for n of nmax steps."""
    _check_nmax(nmax)
    if not 0 <= n <= nmax:
        raise ValueError(f"count {n} outside 0..{nmax}")
    if n == nmax:
        return (0, 0, 0, _OPAQUE)
    t = np.float32(1.0) - np.float32(n) / np.float32(nmax)
    root = np.sqrt(t)
    red = 255 - int(root * _SPREAD) % 200
    green = 200 - int(np.sqrt(root) * _SPREAD) % 200
    return (red & 0xFF, green & 0xFF, _BLUE, _OPAQUE)


def colorize(counts, nmax: int) -> np.ndarray:
    """Turn a 2-D array of escape counts into an RGBA uint8 image."""
    _check_nmax(nmax)
    counts = np.asarray(counts)
    if counts.ndim != 2:
        raise ValueError("counts must be a 2-D array")
    if counts.size and (counts.min() < 0 or counts.max() > nmax):
        raise ValueError(f"counts outside 0..{nmax}")

    t = np.float32(1.0) - counts.astype(np.float32) / np.float32(nmax)
    root = np.sqrt(t)
    red = 255 - (root * _SPREAD).astype(np.int64) % 200
    green = 200 - (np.sqrt(root) * _SPREAD).astype(np.int64) % 200

    image = np.empty(counts.shape + (4,), dtype=np.uint8)
    image[..., 0] = red & 0xFF
    image[..., 1] = green & 0xFF
    image[..., 2] = _BLUE
    image[..., 3] = _OPAQUE
    image[counts == nmax, :3] = 0
    return image