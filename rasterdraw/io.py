"""
Image I/O
=========
Load and save buffers through Pillow. The buffer's byte export is already
top-row-first and unpadded, which is exactly what Pillow's raw codec expects.
"""

import logging
from os import PathLike
from pathlib import Path

from PIL import Image

from .buffer import DrawBuffer, RasterBuffer
from .colors import ColorType
from .errors import FileExists, InvalidType

__all__ = ["load_image", "save_image"]

logger = logging.getLogger(__name__)

_MODES = {
    "L": ColorType.GRAY8,
    "LA": ColorType.GRAYA8,
    "RGB": ColorType.RGB8,
    "RGBA": ColorType.RGBA8,
}
_TYPE_MODES = {color_type: mode for mode, color_type in _MODES.items()}

def load_image(path: str | PathLike) -> DrawBuffer:
    """Decode an image file into a DrawBuffer.

    The decoded pixels become the buffer's background, so clear() returns
    to the loaded image. Raises InvalidType for modes other than L, LA,
    RGB and RGBA.
    """
    with Image.open(path) as img:
        color_type = _MODES.get(img.mode)
        if color_type is None:
            raise InvalidType(f"unsupported image mode {img.mode!r} in {path}")
        width, height = img.size
        data = img.tobytes()

    logger.info("loaded %s (%dx%d %s)", path, width, height, color_type)
    return DrawBuffer.from_bytes(width, height, data, color_type)

def save_image(buffer: RasterBuffer, path: str | PathLike, overwrite: bool = False) -> None:
    """Encode a buffer to a file; the format follows the file suffix."""
    path = Path(path)
    if path.exists() and not overwrite:
        raise FileExists(f"{path} already exists")

    img = Image.frombytes(
        _TYPE_MODES[buffer.color_type],
        (buffer.width, buffer.height),
        buffer.to_bytes(),
    )
    img.save(path)
    logger.info("saved %s (%dx%d %s)", path, buffer.width, buffer.height, buffer.color_type)
