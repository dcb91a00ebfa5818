"""
Bitmap Module
In-memory RGBA pixel buffer with PNG encoding and decoding.
"""

from __future__ import annotations

from io import BytesIO
from typing import Optional, Tuple

import numpy as np
from PIL import Image, UnidentifiedImageError

from pixeledit import config
from pixeledit.core.errors import DecodeError, InvalidSizeError, OutOfBoundsError
from pixeledit.core.models import Color


class Bitmap:
    """
    A W x H grid of RGBA pixels.

    Pixels live in a numpy uint8 array of shape (height, width, 4), row-major,
    with (0, 0) at the top-left corner. The size is fixed for the lifetime of
    the object; a new size means a new Bitmap.
    """

    def __init__(self, pixels: np.ndarray):
        """
        Wraps an existing pixel buffer.

        Args:
            pixels: uint8 array of shape (height, width, 4)
        """
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(f"Expected an (H, W, 4) buffer, got shape {pixels.shape}")
        height, width = pixels.shape[:2]
        if width <= 0 or height <= 0:
            raise InvalidSizeError(width, height)
        self._pixels = np.ascontiguousarray(pixels, dtype=np.uint8)

    @classmethod
    def create(cls, width: int, height: int, fill: Optional[Color] = None) -> Bitmap:
        """
        Creates a bitmap with every pixel set to the fill color.

        Args:
            width: Width in pixels (> 0)
            height: Height in pixels (> 0)
            fill: Initial color (default: config.DEFAULT_FILL_COLOR)

        Raises:
            InvalidSizeError: If width or height is not positive
        """
        if width <= 0 or height <= 0:
            raise InvalidSizeError(width, height)

        if fill is None:
            fill = Color.from_tuple(config.DEFAULT_FILL_COLOR)

        pixels = np.empty((height, width, 4), dtype=np.uint8)
        pixels[:, :] = fill.as_tuple()
        return cls(pixels)

    @classmethod
    def decode(cls, data: bytes) -> Bitmap:
        """
        Decodes image file bytes (PNG or anything Pillow reads) into a bitmap.

        Raises:
            DecodeError: If the bytes are not a readable image
        """
        if not data:
            raise DecodeError("No image data")

        try:
            with Image.open(BytesIO(data)) as img:
                img.load()
                rgba = img.convert("RGBA")
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError, SyntaxError) as e:
            raise DecodeError(f"Cannot decode image: {e}") from e

        return cls.from_image(rgba)

    @classmethod
    def from_image(cls, image: Image.Image) -> Bitmap:
        """Copies a PIL image into a new bitmap."""
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return cls(np.array(image, dtype=np.uint8))

    # ========================================================================
    # Properties
    # ========================================================================

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def pixels(self) -> np.ndarray:
        """The live pixel buffer (height x width x 4)."""
        return self._pixels

    # ========================================================================
    # Pixel access
    # ========================================================================

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.contains(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)

    def get_pixel(self, x: int, y: int) -> Color:
        """
        Returns the color at (x, y).

        Raises:
            OutOfBoundsError: If (x, y) is outside the bitmap
        """
        self._check_bounds(x, y)
        r, g, b, a = self._pixels[y, x]
        return Color(int(r), int(g), int(b), int(a))

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """
        Writes a color at (x, y). Changes stay in memory until exported.

        Raises:
            OutOfBoundsError: If (x, y) is outside the bitmap
        """
        self._check_bounds(x, y)
        self._pixels[y, x] = color.as_tuple()

    # ========================================================================
    # Encoding
    # ========================================================================

    def to_image(self) -> Image.Image:
        """Returns a PIL copy of the bitmap."""
        return Image.fromarray(self._pixels.copy())

    def encode_png(self) -> bytes:
        """Encodes the bitmap as PNG. Same pixels always give the same bytes."""
        buffer = BytesIO()
        self.to_image().save(buffer, format="PNG")
        return buffer.getvalue()

    def copy(self) -> Bitmap:
        return Bitmap(self._pixels.copy())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return self.size == other.size and np.array_equal(self._pixels, other._pixels)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Bitmap({self.width}x{self.height})"

