"""
Errors
======
Typed conditions reported by buffer-level operations.

Drawing calls never raise these for geometry or opacity problems; those
degrade to no-ops or clamps. Only indexed access, range fills and file I/O
surface them. Each error also derives from the closest builtin so callers
can catch either.
"""

__all__ = [
    "RasterError",
    "IndexOutOfBounds",
    "WrongColor",
    "InvalidOpacity",
    "InvalidSize",
    "InvalidType",
    "FileExists",
]


class RasterError(Exception):
    """Base class for all rasterdraw errors."""


class IndexOutOfBounds(RasterError, IndexError):
    """Coordinates or ranges fall outside the buffer."""


class WrongColor(RasterError, ValueError):
    """Color arity or channel values do not match the buffer's color type."""


class InvalidOpacity(RasterError, ValueError):
    """Blend weight is NaN or outside [0, 1]."""


class InvalidSize(RasterError, ValueError):
    """Dimensions or byte length do not describe a valid buffer."""


class InvalidType(RasterError, ValueError):
    """Pixel layout is not one of the supported color types."""


class FileExists(RasterError, FileExistsError):
    """Target file already exists and overwriting was not requested."""
