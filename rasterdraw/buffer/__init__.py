"""
Buffer subsystem - pixel buffers and drawing primitives.

Modules:
    framebuffer: Core pixel buffer, coordinates, range fills, background reset
    blend: Per-channel compositing
    writer: Solid / blended span and pixel output
    ellipse: Quadrant passes for filled and outlined ellipses
    draw: Shape drawing primitives (lines, rectangles, ellipses, circles)
"""
from .framebuffer import RasterBuffer
from .draw import DrawBuffer, EPSILON
from .blend import composite, composite_color

__all__ = [
    "RasterBuffer",
    "DrawBuffer",
    "EPSILON",
    "composite",
    "composite_color",
]
