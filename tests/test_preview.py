"""Unit tests for the zoom preview renderer."""

from __future__ import annotations

from pixeledit.core.bitmap import Bitmap
from pixeledit.core.coords import pixel_rect
from pixeledit.core.models import Color, Point, Rect
from pixeledit.core.preview import ZoomPreviewRenderer, should_render_preview
from pixeledit.core.session import SessionState


class _FakePainter:
    def __init__(self) -> None:
        self.fills: list[tuple[Rect, Color]] = []
        self.frames: list[tuple[Rect, Color]] = []

    def fill_rect(self, rect: Rect, color: Color) -> None:
        self.fills.append((rect, color))

    def draw_frame(self, rect: Rect, color: Color) -> None:
        self.frames.append((rect, color))


def _session(width: int = 32, height: int = 32, zoom: int = 2) -> SessionState:
    session = SessionState()
    session.replace_bitmap(Bitmap.create(width, height))
    session.view.zoom = zoom
    session.view.origin = Point(0, 0)
    return session


def _hover(session: SessionState, x: int, y: int) -> Point:
    rect = pixel_rect(x, y, session.view.origin, session.view.zoom)
    point = Point(rect.x + 0.5, rect.y + 0.5)
    session.view.pointer = point
    return point


def test_render_trigger_requires_pointer_inside_rect() -> None:
    rect = Rect(0, 0, 10, 10)
    assert should_render_preview(Point(5, 5), rect)
    assert not should_render_preview(Point(10, 5), rect)
    assert not should_render_preview(None, rect)
    assert not should_render_preview(Point(5, 5), None)


def test_full_neighborhood_inside_bitmap_draws_every_cell() -> None:
    session = _session()
    _hover(session, 16, 16)
    renderer = ZoomPreviewRenderer(cells=16, scale=8)

    frame = renderer.build(session)

    assert frame is not None
    assert frame.center == (16, 16)
    assert len(frame.cells) == 16 * 16


def test_hovering_corner_omits_out_of_bounds_cells() -> None:
    session = _session()
    _hover(session, 0, 0)
    renderer = ZoomPreviewRenderer(cells=16, scale=8)

    frame = renderer.build(session)

    assert frame is not None
    assert len(frame.cells) < renderer.max_cells
    # Only the non-negative quadrant survives: 8 x 8 cells.
    assert len(frame.cells) == 8 * 8
    assert all(cell.x >= 0 and cell.y >= 0 for cell in frame.cells)


def test_skipped_cells_leave_a_gap_instead_of_shifting() -> None:
    session = _session()
    _hover(session, 0, 0)
    renderer = ZoomPreviewRenderer(cells=16, scale=8)

    frame = renderer.build(session)
    first = min(frame.cells, key=lambda c: (c.y, c.x))

    # Pixel (0, 0) sits at the center slot, not at the top-left of the box.
    assert (first.x, first.y) == (0, 0)
    assert first.rect.x == frame.rect.x + 8 * 8
    assert first.rect.y == frame.rect.y + 8 * 8


def test_preview_box_is_offset_from_pointer() -> None:
    session = _session()
    pointer = _hover(session, 5, 5)
    renderer = ZoomPreviewRenderer(cells=16, scale=8, offset=10)

    frame = renderer.build(session)

    assert frame.rect == Rect(pointer.x + 10, pointer.y + 10, 128, 128)


def test_cells_carry_source_pixel_colors() -> None:
    session = _session()
    red = Color(255, 0, 0, 255)
    session.bitmap.set_pixel(10, 11, red)
    _hover(session, 10, 10)

    frame = ZoomPreviewRenderer().build(session)
    colors = {(cell.x, cell.y): cell.color for cell in frame.cells}

    assert colors[(10, 11)] == red


def test_render_draws_background_cells_then_frame() -> None:
    session = _session()
    _hover(session, 0, 0)
    renderer = ZoomPreviewRenderer(cells=16, scale=8)
    painter = _FakePainter()

    frame = renderer.render(session, painter)

    # One fill for the background box, one per visible cell.
    assert len(painter.fills) == 1 + len(frame.cells)
    assert painter.fills[0] == (frame.rect, renderer.background_color)
    assert painter.frames == [(frame.rect, renderer.frame_color)]


def test_render_draws_nothing_when_pointer_outside() -> None:
    session = _session(width=8, height=8, zoom=2)
    session.view.pointer = Point(16, 0)
    painter = _FakePainter()

    assert ZoomPreviewRenderer().render(session, painter) is None
    assert painter.fills == []
    assert painter.frames == []


def test_render_draws_nothing_without_bitmap() -> None:
    session = SessionState()
    session.view.pointer = Point(10, 10)
    painter = _FakePainter()

    assert ZoomPreviewRenderer().render(session, painter) is None
    assert painter.fills == []
