"""
RasterBuffer - Core Pixel Buffer
================================
Owns a flat, row-major pixel array with a bottom-left coordinate origin.

Layout:
    index(x, y) = (height - 1 - y) * width + x

Row 0 in buffer coordinates is the last row in storage, so the byte export
is top-to-bottom and can be handed to image encoders unchanged.

Supports:
- GRAY8 / GRAYA8 / RGB8 / RGBA8 layouts (one byte per channel)
- Solid-color or snapshot background, restored by clear()
- Range fills and range blends for collaborators

Internal helpers prefixed with an underscore take pre-validated coordinates
and perform no bounds checking. Validation happens once per shape in the
rasterizers, never per pixel.
"""

import math
from collections.abc import Sequence

from ..colors import BLACK, Color, ColorType, check_color
from ..errors import IndexOutOfBounds, InvalidOpacity, InvalidSize
from .blend import blend_into

__all__ = ["RasterBuffer", "AxisIndex"]

# An axis selector for range operations: a single coordinate or a slice
AxisIndex = int | slice


class RasterBuffer:
    """
    Fixed-size pixel buffer with a resettable background.
    """

    def __init__(self, width: int, height: int,
                 background: Sequence[int] = BLACK,
                 color_type: ColorType = ColorType.RGB8):
        if width <= 0 or height <= 0:
            raise InvalidSize(f"buffer dimensions must be positive, got {width}x{height}")

        self._width = width
        self._height = height
        self._color_type = color_type
        self._bpp = color_type.bytes_per_pixel
        self._row_bytes = width * self._bpp

        background = check_color(background, color_type)
        self._background: Color | None = background
        self._snapshot: bytes | None = None
        self._buffer = bytearray(bytes(background) * (width * height))

    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes,
                   color_type: ColorType = ColorType.RGB8) -> "RasterBuffer":
        """Build a buffer from raw pixel bytes (top row first).

        If every pixel is identical the background is that solid color,
        otherwise the bytes themselves are kept as the background snapshot.
        """
        bpp = color_type.bytes_per_pixel
        if width <= 0 or height <= 0 or len(data) != width * height * bpp:
            raise InvalidSize(
                f"{len(data)} bytes do not describe a {width}x{height} {color_type} image"
            )

        first = bytes(data[:bpp])
        uniform = bytes(data) == first * (width * height)

        buf = cls(width, height, tuple(first), color_type)
        if not uniform:
            buf._background = None
            buf._snapshot = bytes(data)
            buf._buffer[:] = data
        return buf

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def width(self) -> int: return self._width

    @property
    def height(self) -> int: return self._height

    @property
    def color_type(self) -> ColorType: return self._color_type

    @property
    def bytes_per_pixel(self) -> int: return self._bpp

    @property
    def background(self) -> Color | None:
        """Solid background color, or None when a snapshot is in use."""
        return self._background

    def __len__(self) -> int:
        return self._width * self._height

    def __eq__(self, other) -> bool:
        if not isinstance(other, RasterBuffer):
            return NotImplemented
        return (self._width == other._width and self._height == other._height
                and self._color_type == other._color_type
                and self._buffer == other._buffer)

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._width}x{self._height}, {self._color_type})"

    # =========================================================================
    # Coordinates
    # =========================================================================

    def index(self, x: int, y: int) -> int:
        """Flat pixel index of (x, y). Raises IndexOutOfBounds."""
        self._check_point(x, y)
        return (self._height - 1 - y) * self._width + x

    def _offset(self, x: int, y: int) -> int:
        """Byte offset of (x, y), no bounds check."""
        return (self._height - 1 - y) * self._row_bytes + x * self._bpp

    def _check_point(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexOutOfBounds(
                f"({x}, {y}) is outside a {self._width}x{self._height} buffer"
            )

    def _check_color(self, color: Sequence[int]) -> Color:
        return check_color(color, self._color_type)

    # =========================================================================
    # Pixel Ops
    # =========================================================================

    def get_pixel(self, x: int, y: int) -> Color:
        self._check_point(x, y)
        off = self._offset(x, y)
        return tuple(self._buffer[off:off + self._bpp])

    def set_pixel(self, x: int, y: int, color: Sequence[int]) -> None:
        self._check_point(x, y)
        color = self._check_color(color)
        off = self._offset(x, y)
        self._buffer[off:off + self._bpp] = bytes(color)

    # --- Unchecked primitives (for DrawBuffer's loops) ---

    def _put(self, x: int, y: int, color: bytes) -> None:
        """Overwrite one pixel. color is pre-packed bytes."""
        off = self._offset(x, y)
        self._buffer[off:off + self._bpp] = color

    def _blend(self, x: int, y: int, color: Color, weight: float) -> None:
        blend_into(self._buffer, self._offset(x, y), color, weight)

    def _hline(self, x0: int, x1: int, y: int, color: bytes) -> None:
        """Bulk-fill the inclusive span x0..x1 on row y."""
        start = self._offset(x0, y)
        self._buffer[start:start + (x1 - x0 + 1) * self._bpp] = color * (x1 - x0 + 1)

    def _blend_hline(self, x0: int, x1: int, y: int, color: Color, weight: float) -> None:
        buf, bpp = self._buffer, self._bpp
        off = self._offset(x0, y)
        for _ in range(x1 - x0 + 1):
            blend_into(buf, off, color, weight)
            off += bpp

    def _vline(self, x: int, y0: int, y1: int, color: bytes) -> None:
        """Fill the inclusive column span y0..y1 at x (y0 <= y1)."""
        buf, bpp, stride = self._buffer, self._bpp, self._row_bytes
        # Storage runs top-down, so start from the upper end
        off = self._offset(x, y1)
        for _ in range(y1 - y0 + 1):
            buf[off:off + bpp] = color
            off += stride

    def _blend_vline(self, x: int, y0: int, y1: int, color: Color, weight: float) -> None:
        buf, stride = self._buffer, self._row_bytes
        off = self._offset(x, y1)
        for _ in range(y1 - y0 + 1):
            blend_into(buf, off, color, weight)
            off += stride

    # =========================================================================
    # Range Ops
    # =========================================================================

    def _resolve(self, index: AxisIndex, size: int) -> tuple[int, int]:
        """Turn an axis selector into a half-open (start, stop) pair."""
        if isinstance(index, slice):
            if index.step not in (None, 1):
                raise ValueError("stepped ranges are not supported")
            start = 0 if index.start is None else index.start
            stop = size if index.stop is None else index.stop
        else:
            start, stop = index, index + 1

        if start < 0 or start >= size or stop > size:
            raise IndexOutOfBounds(f"range {start}..{stop} exceeds axis of size {size}")
        return start, max(start, stop)

    def set(self, xs: AxisIndex, ys: AxisIndex, color: Sequence[int]) -> None:
        """Overwrite every pixel in the selected block.

        Each selector is an int or a slice; slice(a, b + 1) selects the
        inclusive range a..b.
        """
        x0, x1 = self._resolve(xs, self._width)
        y0, y1 = self._resolve(ys, self._height)
        packed = bytes(self._check_color(color))
        if x1 == x0:
            return
        for y in range(y0, y1):
            self._hline(x0, x1 - 1, y, packed)

    def set_transparent(self, xs: AxisIndex, ys: AxisIndex,
                        color: Sequence[int], opacity: float) -> None:
        """Blend color over every pixel in the selected block."""
        x0, x1 = self._resolve(xs, self._width)
        y0, y1 = self._resolve(ys, self._height)
        color = self._check_color(color)
        if math.isnan(opacity) or not 0.0 <= opacity <= 1.0:
            raise InvalidOpacity(f"opacity must be within [0, 1], got {opacity}")
        if x1 == x0:
            return
        for y in range(y0, y1):
            self._blend_hline(x0, x1 - 1, y, color, opacity)

    # =========================================================================
    # Buffer Ops
    # =========================================================================

    def clear(self) -> None:
        """Restore the buffer from its background color or snapshot."""
        if self._snapshot is not None:
            self._buffer[:] = self._snapshot
        else:
            self._buffer[:] = bytes(self._background) * (self._width * self._height)

    def set_background_color(self, color: Sequence[int]) -> None:
        """Replace the background. Takes effect on the next clear()."""
        self._background = self._check_color(color)
        self._snapshot = None

    def as_bytes(self) -> memoryview:
        """Read-only view of the pixel bytes, top row first, no padding."""
        return memoryview(self._buffer).toreadonly()

    def to_bytes(self) -> bytes:
        return bytes(self._buffer)
