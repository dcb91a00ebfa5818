"""
Canvas tools: pointer handlers that act on the session.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
from abc import ABC, abstractmethod

if TYPE_CHECKING:
    from pixeledit.core.session import SessionState


class BaseTool(ABC):
    """A tool receives clicks already mapped to in-bounds texture pixels."""
    
    def __init__(self, name: str):
        self.name = name
        self.is_active = False
    
    @abstractmethod
    def on_mouse_down(self, session: SessionState, pixel_x: int, pixel_y: int, button: str) -> bool:
        """
        Handles a press over texture pixel (pixel_x, pixel_y).
        
        Args:
            session: Editor session to act on
            pixel_x: Column, inside the active texture
            pixel_y: Row, inside the active texture
            button: "left", "right" or "middle"
            
        Returns:
            Whether the session changed
        """
    
    def on_mouse_up(self, session: SessionState, pixel_x: int, pixel_y: int, button: str) -> None:
        """Handles a release; tools without drag behavior ignore it."""
    
    def activate(self) -> None:
        self.is_active = True
    
    def deactivate(self) -> None:
        self.is_active = False
    
    def get_cursor(self) -> str:
        """Cursor name shown over the canvas ("default" or "crosshair")."""
        return "default"
