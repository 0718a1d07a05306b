"""
rasterdraw
==========
Anti-aliased 2D primitives rendered straight into an in-memory pixel buffer.

Architecture
------------
    DrawBuffer          Lines, rectangles, ellipses, circles
       │
       ├── writer       Solid (bulk span) or blended (per-pixel) output
       │      │
       │      └── blend       Per-channel compositing
       │
       ├── ellipse      Quadrant passes, mirrored four ways
       │
       └── RasterBuffer Pixel storage, bottom-left origin, background

    io              Image file load / save (Pillow)

Quick Start
-----------
    from rasterdraw import DrawBuffer, WHITE

    buf = DrawBuffer(64, 64)
    buf.draw_line(0, 0, 63, 40, WHITE)
    buf.draw_circle(32, 32, 20, (255, 0, 0), thickness=0, opacity=0.5)
    buf.clear()

Module Structure
----------------
    rasterdraw/
    ├── colors.py            ColorType, named colors, validation
    ├── errors.py            Error hierarchy
    ├── io.py                PNG and friends via Pillow
    └── buffer/
        ├── framebuffer.py   Core pixel buffer
        ├── blend.py         Compositing
        ├── writer.py        Span / pixel writers
        ├── ellipse.py       Ellipse passes
        └── draw.py          Shape drawing primitives
"""

from .colors import BLACK, WHITE, RED, GREEN, BLUE, Color, ColorType
from .errors import (
    RasterError,
    IndexOutOfBounds,
    WrongColor,
    InvalidOpacity,
    InvalidSize,
    InvalidType,
    FileExists,
)
from .buffer import RasterBuffer, DrawBuffer, EPSILON, composite
from .io import load_image, save_image

__all__ = [
    # Buffers
    "RasterBuffer",
    "DrawBuffer",
    "composite",
    "EPSILON",
    # Colors
    "Color",
    "ColorType",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    # Errors
    "RasterError",
    "IndexOutOfBounds",
    "WrongColor",
    "InvalidOpacity",
    "InvalidSize",
    "InvalidType",
    "FileExists",
    # I/O
    "load_image",
    "save_image",
]

__version__ = "0.1.0"
