"""
Error types raised by the editor core.

All of them derive from PixelEditError so the controller can report any
core failure at the UI boundary with a single except clause.
"""

from __future__ import annotations

from typing import Optional


class PixelEditError(Exception):
    """Base class for editor errors."""


class InvalidSizeError(PixelEditError, ValueError):
    """Raised for a non-positive texture size, or one larger than the editor supports."""

    def __init__(self, width: int, height: int, limit: Optional[int] = None):
        if limit is None:
            message = f"Invalid texture size: {width}x{height} (both must be > 0)"
        else:
            message = f"Texture size {width}x{height} exceeds the {limit}x{limit} limit"
        super().__init__(message)
        self.width = width
        self.height = height
        self.limit = limit


class OutOfBoundsError(PixelEditError, IndexError):
    """Raised on pixel access outside the bitmap."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"Pixel ({x}, {y}) is outside the {width}x{height} texture")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class DecodeError(PixelEditError, ValueError):
    """Raised when image bytes cannot be decoded."""


class BitmapIOError(PixelEditError, OSError):
    """Raised when a texture cannot be read from or written to disk."""
