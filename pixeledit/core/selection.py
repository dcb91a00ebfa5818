"""
Selection state for the pixel being edited.

Two states: nothing selected (coordinate (-1, -1)) or a selected pixel with
a working color. The working color starts as the pixel's color and is only
written back to the bitmap by apply().
"""

from __future__ import annotations

from typing import Optional, Tuple

from pixeledit import config
from pixeledit.core.bitmap import Bitmap
from pixeledit.core.models import Color


class SelectionState:
    """Selected pixel coordinate plus its not-yet-applied working color."""

    NONE: Tuple[int, int] = (-1, -1)

    def __init__(self):
        self.x, self.y = self.NONE
        self.working_color: Color = Color.from_tuple(config.DEFAULT_FILL_COLOR)
        self._pending_edit = False

    @property
    def is_selected(self) -> bool:
        return self.x >= 0 and self.y >= 0

    @property
    def coordinate(self) -> Optional[Tuple[int, int]]:
        """(x, y) of the selected pixel, or None."""
        if not self.is_selected:
            return None
        return (self.x, self.y)

    @property
    def has_pending_edit(self) -> bool:
        """True when the working color was edited and not applied yet."""
        return self.is_selected and self._pending_edit

    def select(self, bitmap: Bitmap, x: int, y: int) -> Color:
        """
        Selects pixel (x, y) and loads its color as the working color.

        Any unapplied edit of the previous selection is discarded.

        Raises:
            OutOfBoundsError: If (x, y) is outside the bitmap (state unchanged)
        """
        color = bitmap.get_pixel(x, y)
        self.x, self.y = x, y
        self.working_color = color
        self._pending_edit = False
        return color

    def edit(self, color: Color) -> bool:
        """
        Replaces the working color. The bitmap is not touched.

        Returns:
            False if nothing is selected (edit ignored)
        """
        if not self.is_selected:
            return False
        if color != self.working_color:
            self.working_color = color
            self._pending_edit = True
        return True

    def apply(self, bitmap: Bitmap) -> bool:
        """
        Writes the working color into the bitmap at the selected pixel.

        Returns:
            False if nothing is selected (no-op)
        """
        if not self.is_selected:
            return False
        bitmap.set_pixel(self.x, self.y, self.working_color)
        self._pending_edit = False
        return True

    def clear(self) -> None:
        self.x, self.y = self.NONE
        self._pending_edit = False

    def revalidate(self, bitmap: Optional[Bitmap]) -> bool:
        """
        Keeps the selection only if it still fits in the bitmap.

        Returns:
            True if a selection survived
        """
        if self.is_selected and bitmap is not None and bitmap.contains(self.x, self.y):
            return True
        self.clear()
        return False

    def __repr__(self) -> str:
        if not self.is_selected:
            return "SelectionState(none)"
        return f"SelectionState(({self.x}, {self.y}), {self.working_color.to_hex()})"
