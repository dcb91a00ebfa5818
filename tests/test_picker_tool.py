"""Unit tests for the picker tool."""

from __future__ import annotations

from pixeledit.core.bitmap import Bitmap
from pixeledit.core.models import Color
from pixeledit.tools.picker_tool import PickerTool


def test_left_click_selects_and_notifies(session) -> None:
    session.replace_bitmap(Bitmap.create(4, 4))
    session.bitmap.set_pixel(1, 2, Color(1, 2, 3, 4))
    picked = []
    tool = PickerTool()
    tool.set_on_pixel_picked(lambda x, y, color: picked.append((x, y, color)))

    assert tool.on_mouse_down(session, 1, 2, "left")

    assert picked == [(1, 2, Color(1, 2, 3, 4))]
    assert session.selection.coordinate == (1, 2)


def test_other_buttons_are_ignored(session) -> None:
    session.replace_bitmap(Bitmap.create(4, 4))
    tool = PickerTool()

    assert not tool.on_mouse_down(session, 1, 1, "middle")
    assert not session.selection.is_selected


def test_no_bitmap_no_selection(session) -> None:
    assert not PickerTool().on_mouse_down(session, 0, 0, "left")


def test_declined_confirmation_keeps_pending_edit(session) -> None:
    session.replace_bitmap(Bitmap.create(4, 4))
    tool = PickerTool()
    tool.set_confirm_discard(lambda: False)
    tool.on_mouse_down(session, 0, 0, "left")
    session.selection.edit(Color(0, 0, 0, 255))

    assert not tool.on_mouse_down(session, 3, 3, "left")
    assert session.selection.coordinate == (0, 0)


def test_controller_activates_picker(controller) -> None:
    assert controller.active_tool is controller.picker_tool
    assert controller.picker_tool.is_active
    assert controller.picker_tool.get_cursor() == "crosshair"
