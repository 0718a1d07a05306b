"""
Colors
======
Pixel layouts and color helpers.

A color is a fixed-length sequence of unsigned 8-bit channel values whose
length matches the buffer's ColorType. Accessors always hand back tuples.
"""

from collections.abc import Sequence
from enum import Enum

from .errors import WrongColor

__all__ = [
    "ColorType",
    "Color",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    "check_color",
]

Color = tuple[int, ...]

# =============================================================================
# Named RGB8 Colors
# =============================================================================

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)

_CHANNEL_MAX = 0xFF


class ColorType(Enum):
    """Supported pixel layouts. The value is the channel count."""

    GRAY8 = 1
    GRAYA8 = 2
    RGB8 = 3
    RGBA8 = 4

    @property
    def channels(self) -> int:
        return self.value

    @property
    def bytes_per_pixel(self) -> int:
        # One byte per channel for every supported layout
        return self.value

    def __str__(self) -> str:
        return self.name


def check_color(color: Sequence[int], color_type: ColorType) -> Color:
    """Validate a color against a layout and return it as a tuple.

    Raises WrongColor if the arity differs or a channel is not an int in
    0..255.
    """
    try:
        channels = tuple(color)
    except TypeError:
        raise WrongColor(f"color must be a sequence of ints, got {color!r}") from None

    if len(channels) != color_type.channels:
        raise WrongColor(
            f"{color_type} expects {color_type.channels} channels, got {len(channels)}"
        )
    for value in channels:
        if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= _CHANNEL_MAX:
            raise WrongColor(f"channel value {value!r} is not in 0..{_CHANNEL_MAX}")
    return channels
