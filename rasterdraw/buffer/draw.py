"""
DrawBuffer - Shape Drawing Primitives
=====================================
Extends RasterBuffer with anti-aliased lines, rectangles and ellipses.

Geometry never raises. Shapes that fall off the buffer are clipped, clamped
or skipped, and opacity <= 0 (or NaN) is a no-op. Only a color of the wrong
arity is reported, as WrongColor.
"""

import logging
import math
from collections.abc import Sequence

from .ellipse import fill_ellipse, outline_ellipse
from .framebuffer import RasterBuffer
from .writer import EPSILON, make_writer, split

__all__ = ["DrawBuffer", "EPSILON"]

logger = logging.getLogger(__name__)


class DrawBuffer(RasterBuffer):
    """
    RasterBuffer with shape drawing capabilities.
    """

    # =========================================================================
    # Line
    # =========================================================================

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Sequence[int],
                  thickness: int = 1, opacity: float = 1.0) -> None:
        """Draw a one-pixel anti-aliased line.

        thickness 0 draws nothing; any other thickness draws a one-pixel line.
        Vertical and horizontal lines are clamped to the buffer, diagonal
        endpoints are projected onto the buffer edges along the line.
        """
        color = self._check_color(color)
        if thickness == 0 or not opacity > 0:
            return
        w, h = self.width, self.height
        writer = make_writer(self, color, opacity)

        if x1 == x2:
            if not 0 <= x1 < w:
                logger.debug("vertical line at x=%d is off the buffer", x1)
                return
            lo, hi = sorted((_clamp(y1, h), _clamp(y2, h)))
            writer.vline(x1, lo, hi)
            return

        if y1 == y2:
            if not 0 <= y1 < h:
                logger.debug("horizontal line at y=%d is off the buffer", y1)
                return
            lo, hi = sorted((_clamp(x1, w), _clamp(x2, w)))
            writer.hline(lo, hi, y1)
            return

        slope = (y1 - y2) / (x1 - x2)
        start = self._clip_endpoint(x1, y1, x1, y1, slope)
        end = self._clip_endpoint(x2, y2, x1, y1, slope)
        if start is None or end is None or start == end:
            logger.debug("line (%d, %d)-(%d, %d) is clipped away", x1, y1, x2, y2)
            return

        if abs(slope) <= 1.0:
            xa, xb = sorted((start[0], end[0]))
            for x in range(xa, xb + 1):
                base, frac = split(slope * (x - x1) + y1)
                if frac:
                    if 0 <= base + 1 < h:
                        writer.pixel(x, base + 1, frac)
                    if 0 <= base < h:
                        writer.pixel(x, base, 1.0 - frac)
                elif 0 <= base < h:
                    writer.pixel(x, base)
        else:
            ya, yb = sorted((start[1], end[1]))
            for y in range(ya, yb + 1):
                base, frac = split((y - y1) / slope + x1)
                if frac:
                    if 0 <= base < w:
                        writer.pixel(base, y, 1.0 - frac)
                    if 0 <= base + 1 < w:
                        writer.pixel(base + 1, y, frac)
                elif 0 <= base < w:
                    writer.pixel(base, y)

    def _clip_endpoint(self, x: int, y: int, x_ref: int, y_ref: int,
                       slope: float) -> tuple[int, int] | None:
        """Move an endpoint onto the buffer along the line, or None."""
        w, h = self.width, self.height
        x_inside = 0 <= x < w

        if not 0 <= y < h:
            edge_y = h - 1 if y >= h else 0
            cx = math.floor((edge_y - y_ref) / slope + x_ref)
            if 0 <= cx < w:
                return cx, edge_y
            if x_inside:
                return None

        if not x_inside:
            edge_x = w - 1 if x >= w else 0
            cy = math.floor(slope * (edge_x - x_ref) + y_ref)
            if 0 <= cy < h:
                return edge_x, cy
            return None

        return x, y

    # =========================================================================
    # Rectangle
    # =========================================================================

    def draw_rectangle(self, x1: int, y1: int, x2: int, y2: int, color: Sequence[int],
                       thickness: int = 1, opacity: float = 1.0) -> None:
        """Draw an axis-aligned rectangle between two inclusive corners.

        thickness 0 fills it. Otherwise nested borders are drawn inward, at
        most until they meet in the middle.
        """
        color = self._check_color(color)
        if not opacity > 0:
            return

        sx, bx = sorted((x1, x2))
        sy, by = sorted((y1, y2))
        sx, sy = max(sx, 0), max(sy, 0)
        bx, by = min(bx, self.width - 1), min(by, self.height - 1)
        if sx > bx or sy > by:
            logger.debug("rectangle (%d, %d)-(%d, %d) is off the buffer", x1, y1, x2, y2)
            return

        writer = make_writer(self, color, opacity)

        if thickness == 0:
            for y in range(sy, by + 1):
                writer.hline(sx, bx, y)
            return

        rings = min(thickness, min((bx - sx) // 2, (by - sy) // 2) + 1)
        for _ in range(rings):
            writer.hline(sx, bx, sy)
            if by != sy:
                writer.hline(sx, bx, by)
            if by - sy >= 2:
                writer.vline(sx, sy + 1, by - 1)
                if bx != sx:
                    writer.vline(bx, sy + 1, by - 1)
            sx += 1
            sy += 1
            bx -= 1
            by -= 1

    # =========================================================================
    # Ellipse / Circle
    # =========================================================================

    def draw_ellipse(self, x: int, y: int, horizontal_axis: int, vertical_axis: int,
                     color: Sequence[int], thickness: int = 1, opacity: float = 1.0) -> None:
        """Draw an ellipse centered on (x, y).

        thickness 0 fills it, anything else draws the anti-aliased outline.
        The whole bounding box must fit in the buffer, otherwise nothing is
        drawn.
        """
        color = self._check_color(color)
        a, b = horizontal_axis, vertical_axis
        if a <= 0 or b <= 0 or not opacity > 0:
            return
        if x - a < 0 or y - b < 0 or x + a >= self.width or y + b >= self.height:
            logger.debug("ellipse at (%d, %d) with axes %d, %d exceeds the buffer", x, y, a, b)
            return

        writer = make_writer(self, color, opacity)
        if thickness == 0:
            fill_ellipse(writer, x, y, a, b)
        else:
            outline_ellipse(writer, x, y, a, b)

    def draw_circle(self, x: int, y: int, radius: int, color: Sequence[int],
                    thickness: int = 1, opacity: float = 1.0) -> None:
        self.draw_ellipse(x, y, radius, radius, color, thickness, opacity)


def _clamp(value: int, size: int) -> int:
    return min(max(value, 0), size - 1)
