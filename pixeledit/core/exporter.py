"""
Exporter Module
Reads and writes texture files on disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from pixeledit.core.bitmap import Bitmap
from pixeledit.core.errors import BitmapIOError

PathLike = Union[str, Path]


class Exporter:
    """Filesystem side of saving and loading textures."""

    @staticmethod
    def png_path(path: PathLike) -> Path:
        """Returns path with a .png suffix."""
        path = Path(path)
        if path.suffix.lower() != ".png":
            path = path.with_suffix(".png")
        return path

    def write_bytes(self, data: bytes, path: PathLike) -> Path:
        """
        Writes encoded image bytes to disk.

        Args:
            data: PNG bytes
            path: Destination (suffix forced to .png)

        Returns:
            The path actually written

        Raises:
            BitmapIOError: If the file cannot be written
        """
        path = self.png_path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            raise BitmapIOError(f"Cannot write {path}: {e}") from e
        return path

    def save(self, bitmap: Bitmap, path: PathLike) -> Path:
        """Encodes bitmap as PNG and writes it to path."""
        return self.write_bytes(bitmap.encode_png(), path)

    def read_bytes(self, path: PathLike) -> bytes:
        """
        Raises:
            BitmapIOError: If the file is missing or unreadable
        """
        path = Path(path)
        try:
            return path.read_bytes()
        except OSError as e:
            raise BitmapIOError(f"Cannot read {path}: {e}") from e

    def load(self, path: PathLike) -> Bitmap:
        """
        Loads an image file as a bitmap.

        Raises:
            BitmapIOError: If the file cannot be read
            DecodeError: If the file is not a valid image
        """
        return Bitmap.decode(self.read_bytes(path))
