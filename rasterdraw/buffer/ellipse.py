"""
Ellipse Rasterizer
==================
Anti-aliased ellipses centered on (cx, cy) with horizontal semi-axis `a` and
vertical semi-axis `b`.

Only the first quadrant is computed. Every write is mirrored into the other
three, and writes on the axes are deduplicated so no pixel is hit twice.

The quadrant is walked in two passes split where the boundary slope
reaches -1:

    X = round(a^2 / sqrt(a^2 + b^2))     last column of the x-driven pass
    Y = floor(fy(X))                     seam row between the passes

    x-driven pass   dx = 0..X   boundary row fy(dx), rows above Y
    y-driven pass   dy = 0..Y   boundary column fx(dy), rows up to Y

Callers guarantee a, b > 0 and that the bounding box fits in the buffer.
"""

import math

from .blend import round_half_away
from .writer import EPSILON, split

__all__ = ["fill_ellipse", "outline_ellipse", "split_point"]


def split_point(a: int, b: int):
    """Return (X, Y), the last x-pass column and the seam row."""
    col = round_half_away(a * a / math.sqrt(a * a + b * b))
    row = math.floor(_fy(a, b, col) + EPSILON)
    return col, row


def _fy(a: int, b: int, dx: int) -> float:
    return math.sqrt(a * a - dx * dx) * b / a


def _fx(a: int, b: int, dy: int) -> float:
    return math.sqrt(b * b - dy * dy) * a / b


# =============================================================================
# Mirroring
# =============================================================================

def _mirror_pixel(writer, cx, cy, dx, dy, coverage=1.0):
    writer.pixel(cx + dx, cy + dy, coverage)
    if dx:
        writer.pixel(cx - dx, cy + dy, coverage)
    if dy:
        writer.pixel(cx + dx, cy - dy, coverage)
        if dx:
            writer.pixel(cx - dx, cy - dy, coverage)


def _mirror_span(writer, cx, cy, half, dy):
    """Full span cx-half..cx+half on rows cy+dy and cy-dy."""
    if half < 0:
        return
    writer.hline(cx - half, cx + half, cy + dy)
    if dy:
        writer.hline(cx - half, cx + half, cy - dy)


# =============================================================================
# Filled
# =============================================================================

def fill_ellipse(writer, cx: int, cy: int, a: int, b: int) -> None:
    """Solid interior spans plus one coverage pixel per boundary sample."""
    last_col, seam = split_point(a, b)

    # x-driven pass: rows seam+1..b, each span emitted once, when the
    # boundary first drops below that row
    prev = b + 1
    for dx in range(last_col + 1):
        base, frac = split(_fy(a, b, dx))
        if frac:
            row, half = base + 1, dx - 1
        else:
            row, half = base, dx

        for rr in range(max(row, seam + 1), prev):
            _mirror_span(writer, cx, cy, half if rr == row else dx - 1, rr)

        if row > seam:
            if frac:
                _mirror_pixel(writer, cx, cy, dx, row, frac)
            elif row == prev:
                # Same row as the previous column, widen it by one pixel
                _mirror_pixel(writer, cx, cy, dx, row)
            prev = row
        else:
            prev = seam + 1

    # y-driven pass: rows 0..seam
    for dy in range(seam + 1):
        base, frac = split(_fx(a, b, dy))
        _mirror_span(writer, cx, cy, base, dy)
        if frac:
            _mirror_pixel(writer, cx, cy, base + 1, dy, frac)


# =============================================================================
# Outline
# =============================================================================

def outline_ellipse(writer, cx: int, cy: int, a: int, b: int) -> None:
    """One-pixel anti-aliased boundary."""
    last_col, seam = split_point(a, b)

    # x-driven pass covers rows >= seam for columns 0..last_col
    for dx in range(last_col + 1):
        base, frac = split(_fy(a, b, dx))
        if frac:
            _mirror_pixel(writer, cx, cy, dx, base + 1, frac)
            _mirror_pixel(writer, cx, cy, dx, base, 1.0 - frac)
        else:
            _mirror_pixel(writer, cx, cy, dx, base)

    # y-driven pass covers rows below the seam
    for dy in range(seam):
        base, frac = split(_fx(a, b, dy))
        if frac:
            _mirror_pixel(writer, cx, cy, base, dy, 1.0 - frac)
            _mirror_pixel(writer, cx, cy, base + 1, dy, frac)
        else:
            _mirror_pixel(writer, cx, cy, base, dy)

    # Seam row: only columns the x-driven pass never reached
    base, frac = split(_fx(a, b, seam))
    if frac:
        if base + 1 > last_col:
            _mirror_pixel(writer, cx, cy, base + 1, seam, frac)
        if base > last_col:
            _mirror_pixel(writer, cx, cy, base, seam, 1.0 - frac)
    elif base > last_col:
        _mirror_pixel(writer, cx, cy, base, seam)
