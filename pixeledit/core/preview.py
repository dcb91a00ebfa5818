"""
Zoom Preview Renderer
Draws a magnified neighborhood of texture pixels next to the pointer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple

from pixeledit import config
from pixeledit.core.coords import screen_to_pixel
from pixeledit.core.models import Color, Point, Rect
from pixeledit.core.session import SessionState


class Painter(Protocol):
    """Drawing surface used by the preview (a QPainter adapter in the UI)."""

    def fill_rect(self, rect: Rect, color: Color) -> None:
        ...

    def draw_frame(self, rect: Rect, color: Color) -> None:
        ...


@dataclass(frozen=True)
class PreviewCell:
    """One magnified texture pixel."""

    x: int
    y: int
    rect: Rect
    color: Color


@dataclass
class PreviewFrame:
    """Everything drawn for one preview: box, hovered pixel and visible cells."""

    rect: Rect
    center: Tuple[int, int]
    cells: List[PreviewCell] = field(default_factory=list)


def should_render_preview(pointer: Optional[Point], rect: Optional[Rect]) -> bool:
    """Render-trigger condition, evaluated once per frame."""
    return pointer is not None and rect is not None and rect.contains(pointer)


class ZoomPreviewRenderer:
    """
    Renders an N x N block of pixels around the hovered pixel.

    Cells whose source pixel falls outside the texture are skipped, so the
    preview shows a gap near the texture edges instead of clamped or wrapped
    pixels.
    """

    def __init__(
        self,
        cells: int = config.PREVIEW_CELLS,
        scale: int = config.PREVIEW_SCALE,
        offset: int = config.PREVIEW_OFFSET,
        frame_color: Tuple[int, int, int, int] = config.PREVIEW_FRAME_COLOR,
        background_color: Tuple[int, int, int, int] = config.PREVIEW_BACKGROUND_COLOR,
    ):
        """
        Args:
            cells: Neighborhood size per side
            scale: Screen pixels per preview cell
            offset: Distance from the pointer to the preview's corner
            frame_color: RGBA of the border
            background_color: RGBA of the box behind the cells
        """
        if cells < 1 or scale < 1:
            raise ValueError("Preview cells and scale must be >= 1")
        self.cells = cells
        self.scale = scale
        self.offset = offset
        self.frame_color = Color.from_tuple(frame_color)
        self.background_color = Color.from_tuple(background_color)

    @property
    def max_cells(self) -> int:
        return self.cells * self.cells

    def frame_rect(self, pointer: Point) -> Rect:
        side = self.cells * self.scale
        return Rect(pointer.x + self.offset, pointer.y + self.offset, side, side)

    def build(self, session: SessionState) -> Optional[PreviewFrame]:
        """
        Computes the preview for the current pointer without drawing it.

        Returns:
            PreviewFrame, or None when the pointer is not over the texture
        """
        pointer = session.view.pointer
        bitmap = session.bitmap
        if bitmap is None or not should_render_preview(pointer, session.display_rect()):
            return None

        center_x, center_y = screen_to_pixel(pointer, session.view.origin, session.view.zoom)
        rect = self.frame_rect(pointer)
        frame = PreviewFrame(rect=rect, center=(center_x, center_y))

        half = self.cells // 2
        for dy in range(-half, self.cells - half):
            for dx in range(-half, self.cells - half):
                src_x = center_x + dx
                src_y = center_y + dy
                if not bitmap.contains(src_x, src_y):
                    continue
                cell_rect = Rect(
                    rect.x + (dx + half) * self.scale,
                    rect.y + (dy + half) * self.scale,
                    self.scale,
                    self.scale,
                )
                frame.cells.append(PreviewCell(src_x, src_y, cell_rect, bitmap.get_pixel(src_x, src_y)))

        return frame

    def render(self, session: SessionState, painter: Painter) -> Optional[PreviewFrame]:
        """
        Draws the preview with painter.

        Returns:
            The drawn PreviewFrame, or None if nothing was drawn
        """
        frame = self.build(session)
        if frame is None:
            return None

        painter.fill_rect(frame.rect, self.background_color)
        for cell in frame.cells:
            painter.fill_rect(cell.rect, cell.color)
        painter.draw_frame(frame.rect, self.frame_color)
        return frame
