"""
Picker Tool - Select a pixel and load its color for editing.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Callable, Optional
from pixeledit.tools.base_tool import BaseTool

if TYPE_CHECKING:
    from pixeledit.core.models import Color
    from pixeledit.core.session import SessionState


class PickerTool(BaseTool):
    """Selects the clicked pixel; its color becomes the working color."""
    
    def __init__(self):
        super().__init__("Picker")
        self._on_pixel_picked: Optional[Callable[[int, int, Color], None]] = None
        self._confirm_discard: Optional[Callable[[], bool]] = None
    
    def set_on_pixel_picked(self, callback) -> None:
        """
        Sets callback for when a pixel is picked.
        
        Args:
            callback: Function(x, y, color) called after the selection changed
        """
        self._on_pixel_picked = callback
    
    def set_confirm_discard(self, callback) -> None:
        """
        Sets a callback asked before an unapplied edit is discarded.
        
        Args:
            callback: Function() -> bool, False keeps the current selection
        """
        self._confirm_discard = callback
    
    def _pick_pixel(self, session: SessionState, pixel_x: int, pixel_y: int) -> bool:
        """
        Selects the pixel at the specified position.
        
        Args:
            session: Editor session
            pixel_x: Texture X coordinate
            pixel_y: Texture Y coordinate
        """
        selection = session.selection
        if selection.has_pending_edit:
            if self._confirm_discard and not self._confirm_discard():
                return False
        
        color = selection.select(session.bitmap, pixel_x, pixel_y)
        
        if self._on_pixel_picked:
            self._on_pixel_picked(pixel_x, pixel_y, color)
        return True
    
    def on_mouse_down(self, session: SessionState, pixel_x: int, pixel_y: int, button: str) -> bool:
        """Pick pixel on left mouse down."""
        if button != "left" or session.bitmap is None:
            return False
        return self._pick_pixel(session, pixel_x, pixel_y)
    
    def get_cursor(self) -> str:
        """Returns cursor type."""
        return "crosshair"
