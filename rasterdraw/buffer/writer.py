"""
Writers - Span and Pixel Output Strategies
==========================================
Every rasterizer reduces a shape to three kinds of writes: full horizontal
spans, full vertical spans, and single pixels with a coverage weight.
A writer binds one color and opacity to a buffer and decides how each write
lands:

    SolidWriter  (opacity >= 1)  bulk overwrite, coverage < 1 blends
    BlendWriter  (opacity <  1)  per-pixel composite at coverage * opacity

Coordinates are never checked here. The caller clips once per shape.
"""

import math
from collections.abc import Sequence

from .framebuffer import RasterBuffer

__all__ = ["EPSILON", "split", "SolidWriter", "BlendWriter", "make_writer"]

# Boundary samples this close to an integer land exactly on a pixel
EPSILON = 1e-5


def split(value: float) -> tuple[int, float]:
    """Split a boundary coordinate into (base, frac).

    frac == 0.0 marks an exact hit on pixel `base`. Otherwise coverage is
    shared between `base` (1 - frac) and `base + 1` (frac).
    """
    base = math.floor(value)
    frac = value - base
    if frac < EPSILON:
        return base, 0.0
    if frac > 1.0 - EPSILON:
        return base + 1, 0.0
    return base, frac


class SolidWriter:
    """Opaque writes: spans are slice assignments."""

    __slots__ = ("_buf", "_color", "_packed")

    def __init__(self, buf: RasterBuffer, color: Sequence[int]):
        self._buf = buf
        self._color = tuple(color)
        self._packed = bytes(self._color)

    def hline(self, x0: int, x1: int, y: int) -> None:
        self._buf._hline(x0, x1, y, self._packed)

    def vline(self, x: int, y0: int, y1: int) -> None:
        self._buf._vline(x, y0, y1, self._packed)

    def pixel(self, x: int, y: int, coverage: float = 1.0) -> None:
        if coverage >= 1.0:
            self._buf._put(x, y, self._packed)
        else:
            self._buf._blend(x, y, self._color, coverage)


class BlendWriter:
    """Translucent writes: every pixel is composited."""

    __slots__ = ("_buf", "_color", "_opacity")

    def __init__(self, buf: RasterBuffer, color: Sequence[int], opacity: float):
        self._buf = buf
        self._color = tuple(color)
        self._opacity = opacity

    def hline(self, x0: int, x1: int, y: int) -> None:
        self._buf._blend_hline(x0, x1, y, self._color, self._opacity)

    def vline(self, x: int, y0: int, y1: int) -> None:
        self._buf._blend_vline(x, y0, y1, self._color, self._opacity)

    def pixel(self, x: int, y: int, coverage: float = 1.0) -> None:
        self._buf._blend(x, y, self._color, coverage * self._opacity)


def make_writer(buf: RasterBuffer, color: Sequence[int], opacity: float):
    """Pick the writer for an opacity already known to be > 0."""
    if opacity >= 1.0:
        return SolidWriter(buf, color)
    return BlendWriter(buf, color, opacity)
