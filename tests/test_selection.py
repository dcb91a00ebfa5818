"""Unit tests for the pixel selection state machine."""

from __future__ import annotations

import pytest

from pixeledit import config
from pixeledit.core.bitmap import Bitmap
from pixeledit.core.errors import OutOfBoundsError
from pixeledit.core.models import Color
from pixeledit.core.selection import SelectionState


RED = Color(255, 0, 0, 255)
BLUE = Color(0, 0, 255, 255)
DEFAULT_FILL = Color.from_tuple(config.DEFAULT_FILL_COLOR)


def test_starts_with_no_selection() -> None:
    selection = SelectionState()
    assert not selection.is_selected
    assert selection.coordinate is None
    assert (selection.x, selection.y) == SelectionState.NONE


def test_select_loads_pixel_color_as_working_color(bitmap_8x8: Bitmap) -> None:
    selection = SelectionState()
    selection.select(bitmap_8x8, 3, 3)

    assert selection.coordinate == (3, 3)
    assert selection.working_color == DEFAULT_FILL
    assert not selection.has_pending_edit


def test_edit_then_apply_writes_working_color(bitmap_8x8: Bitmap) -> None:
    selection = SelectionState()
    selection.select(bitmap_8x8, 3, 3)

    assert selection.edit(RED)
    # Editing alone never touches the bitmap.
    assert bitmap_8x8.get_pixel(3, 3) == DEFAULT_FILL
    assert selection.has_pending_edit

    assert selection.apply(bitmap_8x8)
    assert bitmap_8x8.get_pixel(3, 3) == RED
    assert not selection.has_pending_edit
    assert selection.coordinate == (3, 3)


def test_apply_before_any_edit_keeps_pixel_value(bitmap_8x8: Bitmap) -> None:
    bitmap_8x8.set_pixel(2, 5, BLUE)
    before = bitmap_8x8.copy()

    selection = SelectionState()
    selection.select(bitmap_8x8, 2, 5)
    selection.apply(bitmap_8x8)

    assert bitmap_8x8 == before


def test_new_click_discards_unapplied_edit(bitmap_8x8: Bitmap) -> None:
    bitmap_8x8.set_pixel(6, 1, BLUE)
    selection = SelectionState()
    selection.select(bitmap_8x8, 3, 3)
    selection.edit(RED)

    selection.select(bitmap_8x8, 6, 1)

    assert selection.coordinate == (6, 1)
    assert selection.working_color == BLUE
    assert bitmap_8x8.get_pixel(3, 3) == DEFAULT_FILL


def test_select_out_of_bounds_keeps_previous_state(bitmap_8x8: Bitmap) -> None:
    selection = SelectionState()
    selection.select(bitmap_8x8, 1, 1)
    selection.edit(RED)

    with pytest.raises(OutOfBoundsError):
        selection.select(bitmap_8x8, 8, 0)

    assert selection.coordinate == (1, 1)
    assert selection.working_color == RED


def test_edit_and_apply_without_selection_are_ignored(bitmap_8x8: Bitmap) -> None:
    before = bitmap_8x8.copy()
    selection = SelectionState()

    assert not selection.edit(RED)
    assert not selection.apply(bitmap_8x8)
    assert bitmap_8x8 == before


def test_revalidate_drops_selection_outside_new_bitmap(bitmap_8x8: Bitmap) -> None:
    selection = SelectionState()
    selection.select(bitmap_8x8, 6, 6)

    assert not selection.revalidate(Bitmap.create(4, 4))
    assert not selection.is_selected


def test_revalidate_keeps_selection_that_still_fits(bitmap_8x8: Bitmap) -> None:
    selection = SelectionState()
    selection.select(bitmap_8x8, 2, 2)
    selection.edit(RED)

    assert selection.revalidate(Bitmap.create(4, 4))
    assert selection.coordinate == (2, 2)
    assert selection.working_color == RED
