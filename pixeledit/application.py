"""
Main Application Module - PySide6 version
Manages the Qt application lifecycle and connects the window to the controller.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QApplication

from pixeledit.core.controller import InteractionController
from pixeledit.core.exporter import Exporter
from pixeledit.core.models import Color
from pixeledit.core.session import SessionState
from pixeledit.ui.main_window import MainWindow


class PixelEditorApp:
    """Main application class for the Pixel Texture Editor."""

    def __init__(self):
        # Core components
        self.session = SessionState()
        self.controller = InteractionController(self.session, Exporter())
        self.main_window: Optional[MainWindow] = None

    def setup(self):
        """Creates the window and wires it to the controller."""
        self.main_window = MainWindow(self.controller)
        self.controller.dialog = self.main_window

        # Connect signals
        self._connect_signals()

        # Show window
        self.main_window.show()
        self.main_window.refresh(self.session)
        self.main_window.set_status("Ready - create a texture or open an image")

    def _connect_signals(self):
        """Connects window signals and controller listeners."""
        if not self.main_window:
            return

        window = self.main_window
        window.create_requested.connect(self._on_create_requested)
        window.zoom_changed.connect(self.controller.set_zoom)
        window.select_requested.connect(self.controller.select_pixel)
        window.clear_selection_requested.connect(self.controller.clear_selection)
        window.color_edited.connect(self._on_color_edited)
        window.apply_requested.connect(self.controller.apply_color)
        window.save_requested.connect(self.controller.save)
        window.load_image_requested.connect(self.controller.load)

        self.controller.on_status = window.set_status
        self.controller.on_error = window.show_error
        self.controller.on_changed = self._on_session_changed

    def _on_create_requested(self, width: int, height: int):
        """Handles create texture request."""
        self.controller.set_size(width, height)
        if self.controller.create_bitmap() is None:
            # Rejected size: put the fields back to the active texture
            bitmap = self.session.bitmap
            if bitmap is not None:
                self.controller.set_size(*bitmap.size)
            self._on_session_changed()

    def _on_color_edited(self, color: Color):
        self.controller.edit_working_color(color)

    def _on_session_changed(self):
        if self.main_window:
            self.main_window.refresh(self.session)

    def run(self):
        """Run the application main loop."""
        if not self.main_window:
            return 1

        return QApplication.instance().exec()
