"""
Interaction Controller
Routes user events to the bitmap, selection and view components.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Protocol, Union

from pixeledit import config
from pixeledit.core.bitmap import Bitmap
from pixeledit.core.coords import clamp_zoom, screen_to_pixel
from pixeledit.core.errors import BitmapIOError, InvalidSizeError, PixelEditError
from pixeledit.core.exporter import Exporter
from pixeledit.core.models import Color, Point, Rect
from pixeledit.core.preview import should_render_preview
from pixeledit.core.session import SessionState
from pixeledit.tools.base_tool import BaseTool
from pixeledit.tools.picker_tool import PickerTool


class FileDialog(Protocol):
    """User prompts the controller needs (implemented by the main window)."""

    def ask_save_path(self, default_name: str) -> Optional[str]:
        """Returns the chosen path, or None if the user cancelled."""
        ...

    def ask_question(self, title: str, message: str) -> bool:
        ...


class InteractionController:
    """
    Dispatches pointer, field and button events over a SessionState.

    Holds no editing logic of its own. Errors from the core are caught here,
    reported through on_error and leave the session as it was.
    """

    def __init__(
        self,
        session: Optional[SessionState] = None,
        exporter: Optional[Exporter] = None,
        dialog: Optional[FileDialog] = None,
    ):
        self.session = session or SessionState()
        self.exporter = exporter or Exporter()
        self.dialog = dialog

        # Tools
        self.picker_tool = PickerTool()
        self.picker_tool.set_confirm_discard(self._confirm_discard_edit)
        self.active_tool: Optional[BaseTool] = None
        self.set_active_tool(self.picker_tool)

        # Listeners
        self.on_status: Optional[Callable[[str], None]] = None
        self.on_error: Optional[Callable[[str, str], None]] = None
        self.on_changed: Optional[Callable[[], None]] = None

        # Last exported file
        self.last_saved_path: Optional[Path] = None

    # ========================================================================
    # Reporting
    # ========================================================================

    def _status(self, message: str) -> None:
        print(f"[INFO] {message}")
        if self.on_status:
            self.on_status(message)

    def _error(self, title: str, error: Exception) -> None:
        print(f"[ERROR] {title}: {error}")
        if self.on_error:
            self.on_error(title, str(error))

    def _debug(self, message: str) -> None:
        if config.debug_enabled():
            print(f"[DEBUG] {message}")

    def _changed(self) -> None:
        if self.on_changed:
            self.on_changed()

    # ========================================================================
    # Configuration
    # ========================================================================

    def set_active_tool(self, tool: BaseTool) -> None:
        if self.active_tool:
            self.active_tool.deactivate()
        self.active_tool = tool
        if self.active_tool:
            self.active_tool.activate()

    def set_size(self, width: int, height: int) -> None:
        """Sets the size used by the next create_bitmap()."""
        self.session.width = int(width)
        self.session.height = int(height)

    def set_zoom(self, zoom: int) -> int:
        """Sets the display zoom, clamped to [MIN_ZOOM, MAX_ZOOM]."""
        zoom = clamp_zoom(zoom)
        if zoom != self.session.view.zoom:
            self.session.view.zoom = zoom
            self._debug(f"Zoom: {zoom}x")
            self._changed()
        return zoom

    def set_origin(self, origin: Point) -> None:
        """Sets where the canvas places the texture's top-left corner."""
        self.session.view.origin = origin

    def pan_by(self, dx: float, dy: float) -> None:
        """Moves the texture on the canvas by (dx, dy) screen pixels."""
        self.session.view.origin = self.session.view.origin.offset(dx, dy)
        self._changed()

    def reset_view(self) -> None:
        """Restores the default zoom and texture position."""
        self.session.view.origin = Point(config.CANVAS_MARGIN, config.CANVAS_MARGIN)
        self.session.view.zoom = config.DEFAULT_ZOOM
        self._changed()

    # ========================================================================
    # Bitmap lifecycle
    # ========================================================================

    def create_bitmap(self) -> Optional[Bitmap]:
        """
        Creates a blank texture with the configured size and makes it active.

        Returns:
            The new bitmap, or None if the size was rejected
        """
        width, height = self.session.size
        try:
            self._check_max_size(width, height)
            bitmap = Bitmap.create(width, height)
        except PixelEditError as e:
            self._error("Create Texture", e)
            return None

        self.set_active_bitmap(bitmap, reset_selection=True)
        self._status(f"Created {width}x{height} texture")
        return bitmap

    @staticmethod
    def _check_max_size(width: int, height: int) -> None:
        # The size and X / Y fields cannot show anything larger
        if width > config.MAX_TEX_SIZE or height > config.MAX_TEX_SIZE:
            raise InvalidSizeError(width, height, limit=config.MAX_TEX_SIZE)

    def set_active_bitmap(self, bitmap: Bitmap, reset_selection: bool = True) -> None:
        """
        Replaces the active texture.

        Args:
            bitmap: New texture
            reset_selection: Drop the selection; otherwise keep it if it still fits
        """
        self.session.replace_bitmap(bitmap, reset_selection=reset_selection)
        self._debug(f"Active texture: {bitmap!r}, selection: {self.session.selection!r}")
        self._changed()

    def load(self, path: Union[str, Path]) -> Optional[Bitmap]:
        """
        Loads an image file as the active texture.

        Returns:
            The loaded bitmap, or None on failure (prior texture kept)
        """
        path = Path(path)
        try:
            bitmap = self.exporter.load(path)
            self._check_max_size(bitmap.width, bitmap.height)
        except PixelEditError as e:
            self._error("Open Image", e)
            return None

        self.set_active_bitmap(bitmap, reset_selection=True)
        self._status(f"Loaded {path.name} ({bitmap.width}x{bitmap.height})")
        return bitmap

    def save(self) -> Optional[Path]:
        """
        Asks for a destination, writes the texture as PNG and reloads it.

        Returns:
            The written path, or None if cancelled or failed
        """
        bitmap = self.session.bitmap
        if bitmap is None:
            self._status("No texture to save. Create one first.")
            return None

        data = bitmap.encode_png()

        try:
            path = self.dialog.ask_save_path(config.DEFAULT_FILENAME) if self.dialog else None
        except OSError as e:
            self._error("Save Texture", BitmapIOError(f"Cannot choose a destination: {e}"))
            return None
        if not path:
            self._status("Save cancelled")
            return None

        try:
            written = self.exporter.write_bytes(data, path)
            reloaded = self.exporter.load(written)
        except PixelEditError as e:
            self._error("Save Texture", e)
            return None

        self.last_saved_path = written
        self.set_active_bitmap(reloaded, reset_selection=False)
        self._status(f"Texture saved to {written}")
        return written

    # ========================================================================
    # Pointer events
    # ========================================================================

    def display_rect(self) -> Optional[Rect]:
        return self.session.display_rect()

    def needs_preview(self) -> bool:
        """Whether this frame should draw the zoom preview."""
        return should_render_preview(self.session.view.pointer, self.display_rect())

    def pixel_at(self, point: Point) -> Optional[tuple]:
        """Texture pixel under a canvas point, or None outside the texture."""
        rect = self.display_rect()
        if rect is None or not rect.contains(point):
            return None
        x, y = screen_to_pixel(point, self.session.view.origin, self.session.view.zoom)
        if not self.session.bitmap.contains(x, y):
            return None
        return (x, y)

    def pointer_down(self, point: Point, button: str = "left") -> bool:
        """
        Forwards a click inside the texture to the active tool.

        Returns:
            True if the click changed the session
        """
        self.session.view.pointer = point
        pixel = self.pixel_at(point)
        if pixel is None or self.active_tool is None:
            return False

        x, y = pixel
        try:
            changed = self.active_tool.on_mouse_down(self.session, x, y, button)
        except PixelEditError as e:
            self._error("Select Pixel", e)
            return False

        if changed:
            self._status(f"Selected pixel ({x}, {y}): {self.session.selection.working_color.to_hex()}")
            self._changed()
        return changed

    def pointer_up(self, point: Point, button: str = "left") -> None:
        pixel = self.pixel_at(point)
        if pixel is not None and self.active_tool is not None:
            self.active_tool.on_mouse_up(self.session, pixel[0], pixel[1], button)

    def pointer_moved(self, point: Point) -> None:
        self.session.view.pointer = point

    def pointer_left(self) -> None:
        self.session.view.pointer = None

    # ========================================================================
    # Selection and color
    # ========================================================================

    def select_pixel(self, x: int, y: int) -> bool:
        """
        Selects a pixel by coordinates (the X / Y fields).

        Returns:
            True if the selection changed
        """
        if self.session.bitmap is None:
            self._status("No texture to select from. Create one first.")
            return False

        try:
            changed = self.picker_tool.on_mouse_down(self.session, x, y, "left")
        except PixelEditError as e:
            self._error("Select Pixel", e)
            return False

        if changed:
            self._status(f"Selected pixel ({x}, {y}): {self.session.selection.working_color.to_hex()}")
            self._changed()
        return changed

    def clear_selection(self) -> None:
        self.session.selection.clear()
        self._changed()

    def edit_working_color(self, color: Color) -> bool:
        """Changes the working color of the selected pixel (not applied yet)."""
        if not self.session.selection.edit(color):
            self._debug("Color edit ignored: no pixel selected")
            return False
        self._changed()
        return True

    def apply_color(self) -> bool:
        """Writes the working color into the texture at the selected pixel."""
        selection = self.session.selection
        if self.session.bitmap is None or not selection.is_selected:
            self._status("No pixel selected")
            return False

        try:
            selection.apply(self.session.bitmap)
        except PixelEditError as e:
            self._error("Apply Color", e)
            return False

        self._status(f"Applied {selection.working_color.to_hex()} at ({selection.x}, {selection.y})")
        self._changed()
        return True

    def _confirm_discard_edit(self) -> bool:
        if not config.CONFIRM_DISCARD_EDITS or self.dialog is None:
            return True
        return self.dialog.ask_question(
            "Discard Color Edit",
            "The selected pixel has an unapplied color edit.\n\n"
            "Select another pixel and discard it?",
        )
