"""
Canvas Widget - draws the texture at the current zoom and forwards mouse input.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QPointF, QRectF, Qt, QTimer, Signal
from PySide6.QtGui import QColor, QImage, QPainter, QPen
from PySide6.QtWidgets import QWidget

from pixeledit import config
from pixeledit.core.controller import InteractionController
from pixeledit.core.coords import pixel_rect
from pixeledit.core.models import Color, Point, Rect
from pixeledit.core.preview import ZoomPreviewRenderer


_BUTTON_NAMES = {
    Qt.MouseButton.LeftButton: "left",
    Qt.MouseButton.RightButton: "right",
    Qt.MouseButton.MiddleButton: "middle",
}

_CURSORS = {
    "default": Qt.CursorShape.ArrowCursor,
    "crosshair": Qt.CursorShape.CrossCursor,
}


def _qcolor(color: Color) -> QColor:
    return QColor(color.r, color.g, color.b, color.a)


def _qrect(rect: Rect) -> QRectF:
    return QRectF(rect.x, rect.y, rect.width, rect.height)


class QtPainter:
    """Adapts QPainter to the preview renderer's painter interface."""

    def __init__(self, painter: QPainter):
        self._painter = painter

    def fill_rect(self, rect: Rect, color: Color) -> None:
        self._painter.fillRect(_qrect(rect), _qcolor(color))

    def draw_frame(self, rect: Rect, color: Color) -> None:
        self._painter.save()
        self._painter.setPen(QPen(_qcolor(color), 1))
        self._painter.setBrush(Qt.BrushStyle.NoBrush)
        self._painter.drawRect(QRectF(rect.x, rect.y, rect.width - 1, rect.height - 1))
        self._painter.restore()


class CanvasWidget(QWidget):
    """
    Interactive texture view.

    Features:
    - Nearest-neighbor display at integer zoom
    - Selected pixel outline
    - Zoom preview next to the pointer, repainted every frame while hovering
    - Left click: select pixel | Middle drag: pan | Wheel: zoom

    Signals:
    - pixel_hovered: (x, y) of the texture pixel under the pointer
    - zoom_requested: zoom level asked for with the mouse wheel
    """

    pixel_hovered = Signal(int, int)
    zoom_requested = Signal(int)

    def __init__(self, controller: InteractionController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.preview_renderer = ZoomPreviewRenderer()

        # Mouse interaction
        self._is_panning = False
        self._last_pan_pos: Optional[QPointF] = None
        self._last_hover_pixel = (-1, -1)
        self._preview_visible = False

        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMinimumSize(320, 240)
        self._apply_tool_cursor()

        # Frame timer: the render-trigger predicate is checked once per frame
        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(max(1, 1000 // config.MAX_FPS))
        self._frame_timer.timeout.connect(self._on_frame)
        self._frame_timer.start()

    def _on_frame(self) -> None:
        needs_preview = self.controller.needs_preview()
        # One extra repaint after the pointer leaves erases the last preview
        if needs_preview or self._preview_visible:
            self.update()

    def _apply_tool_cursor(self) -> None:
        tool = self.controller.active_tool
        name = tool.get_cursor() if tool else "default"
        self.setCursor(_CURSORS.get(name, Qt.CursorShape.ArrowCursor))

    def refresh(self) -> None:
        """Repaints after a state change."""
        self.update()

    # ========================================================================
    # Painting
    # ========================================================================

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), QColor(*config.CANVAS_BACKGROUND_COLOR))

            session = self.controller.session
            bitmap = session.bitmap
            rect = session.display_rect()
            if bitmap is None or rect is None:
                painter.setPen(QColor(150, 150, 150))
                painter.drawText(self.rect(), Qt.AlignmentFlag.AlignCenter, "No texture. Create one or open an image.")
                self._preview_visible = False
                return

            pixels = bitmap.pixels
            image = QImage(pixels.data, bitmap.width, bitmap.height, bitmap.width * 4, QImage.Format.Format_RGBA8888)
            painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform, False)
            painter.drawImage(_qrect(rect), image)

            selection = session.selection
            if selection.is_selected:
                outline = pixel_rect(selection.x, selection.y, session.view.origin, session.view.zoom)
                QtPainter(painter).draw_frame(outline, Color.from_tuple(config.SELECTION_HIGHLIGHT_COLOR))

            frame = self.preview_renderer.render(session, QtPainter(painter))
            self._preview_visible = frame is not None
        finally:
            painter.end()

    # ========================================================================
    # Mouse Event Handlers
    # ========================================================================

    @staticmethod
    def _point(event) -> Point:
        pos = event.position()
        return Point(pos.x(), pos.y())

    def mousePressEvent(self, event) -> None:
        button = _BUTTON_NAMES.get(event.button())
        if button is None:
            return
        if button == "middle":
            self._is_panning = True
            self._last_pan_pos = event.position()
            self.setCursor(Qt.CursorShape.ClosedHandCursor)
            return

        self.controller.pointer_down(self._point(event), button)
        self.update()

    def mouseMoveEvent(self, event) -> None:
        if self._is_panning and self._last_pan_pos is not None:
            pos = event.position()
            self.controller.pan_by(pos.x() - self._last_pan_pos.x(), pos.y() - self._last_pan_pos.y())
            self._last_pan_pos = pos

        point = self._point(event)
        self.controller.pointer_moved(point)

        pixel = self.controller.pixel_at(point) or (-1, -1)
        if pixel != self._last_hover_pixel:
            self._last_hover_pixel = pixel
            self.pixel_hovered.emit(*pixel)

    def mouseReleaseEvent(self, event) -> None:
        button = _BUTTON_NAMES.get(event.button())
        if button is None:
            return
        if button == "middle":
            self._is_panning = False
            self._last_pan_pos = None
            self._apply_tool_cursor()
            return
        self.controller.pointer_up(self._point(event), button)

    def leaveEvent(self, event) -> None:
        self.controller.pointer_left()
        self._last_hover_pixel = (-1, -1)
        self.update()
        super().leaveEvent(event)

    def wheelEvent(self, event) -> None:
        delta = event.angleDelta().y()
        if delta == 0:
            return
        step = 1 if delta > 0 else -1
        self.zoom_requested.emit(self.controller.session.view.zoom + step)
