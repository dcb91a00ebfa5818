"""
Session state shared by every editor component.

Everything the window used to keep in loose fields (size, zoom, selection,
pointer position, active texture) lives here and is passed explicitly to
each component call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from pixeledit import config
from pixeledit.core.bitmap import Bitmap
from pixeledit.core.coords import display_rect
from pixeledit.core.models import Point, Rect
from pixeledit.core.selection import SelectionState


@dataclass
class ViewState:
    """How the texture is placed on the canvas."""

    zoom: int = config.DEFAULT_ZOOM
    origin: Point = Point(config.CANVAS_MARGIN, config.CANVAS_MARGIN)
    pointer: Optional[Point] = None


@dataclass
class SessionState:
    """Editor state for one window."""

    width: int = config.DEFAULT_TEX_SIZE
    height: int = config.DEFAULT_TEX_SIZE
    view: ViewState = field(default_factory=ViewState)
    selection: SelectionState = field(default_factory=SelectionState)
    bitmap: Optional[Bitmap] = None

    @property
    def size(self) -> Tuple[int, int]:
        """Configured size used by the next create."""
        return (self.width, self.height)

    def display_rect(self) -> Optional[Rect]:
        """Screen rectangle of the active texture, or None without one."""
        if self.bitmap is None:
            return None
        return display_rect(self.view.origin, self.bitmap.width, self.bitmap.height, self.view.zoom)

    def replace_bitmap(self, bitmap: Bitmap, reset_selection: bool = True) -> None:
        """
        Makes bitmap the active texture and syncs the configured size to it.

        Args:
            bitmap: New active texture
            reset_selection: Drop the selection; otherwise keep it if still in bounds
        """
        self.bitmap = bitmap
        self.width, self.height = bitmap.size
        if reset_selection:
            self.selection.clear()
        else:
            self.selection.revalidate(bitmap)
