"""
Blend - Per-Channel Compositing
===============================
    result = round(old * (1 - opacity) + new * opacity)

applied to every channel independently, rounding half away from zero.
Callers bypass this entirely for opacity >= 1 (plain overwrite) and drop
whole draw calls for opacity <= 0.
"""

import math
from collections.abc import Sequence

__all__ = ["round_half_away", "composite", "composite_color", "blend_into"]


def round_half_away(value: float) -> int:
    """Round to the nearest int, ties away from zero."""
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def composite(old: int, new: int, opacity: float) -> int:
    return round_half_away(old * (1.0 - opacity) + new * opacity)


def composite_color(old: Sequence[int], new: Sequence[int], opacity: float) -> tuple:
    return tuple(composite(o, n, opacity) for o, n in zip(old, new))


def blend_into(buf: bytearray, offset: int, color: Sequence[int], weight: float) -> None:
    """Composite color into buf in place, starting at byte offset.

    No bounds checking. Channel values are non-negative, so int(v + 0.5)
    is the same rounding as round_half_away.
    """
    keep = 1.0 - weight
    for i, channel in enumerate(color):
        j = offset + i
        buf[j] = int(buf[j] * keep + channel * weight + 0.5)
