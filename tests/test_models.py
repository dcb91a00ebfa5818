"""Unit tests for the Color value type."""

from __future__ import annotations

import numpy as np
import pytest

from pixeledit.core.models import Color


def test_hex_round_trip_with_and_without_alpha() -> None:
    assert Color.from_hex("#ff8000") == Color(255, 128, 0, 255)
    assert Color.from_hex("ff800080") == Color(255, 128, 0, 128)
    assert Color(255, 128, 0, 128).to_hex() == "#ff800080"
    assert Color(255, 128, 0).to_hex(include_alpha=False) == "#ff8000"


@pytest.mark.parametrize("text", ["", "#fff", "#12345", "#gggggg", "#+f+f+f", "ff ff ff", "0x1234"])
def test_from_hex_rejects_bad_text(text: str) -> None:
    with pytest.raises(ValueError):
        Color.from_hex(text)


def test_channels_outside_byte_range_are_rejected() -> None:
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        Color(0, 0, 0, -1)


def test_float_conversion_clamps_and_rounds() -> None:
    assert Color.from_floats(1.0, 0.5, 0.0, 2.0) == Color(255, 128, 0, 255)
    r, g, b, a = Color(255, 0, 0, 0).to_floats()
    assert (r, g, b, a) == (1.0, 0.0, 0.0, 0.0)


def test_from_tuple_defaults_alpha_to_opaque() -> None:
    assert Color.from_tuple((1, 2, 3)) == Color(1, 2, 3, 255)


@pytest.mark.parametrize("channel", [1.5, 2.0, "7", None])
def test_non_integer_channels_are_rejected(channel) -> None:
    with pytest.raises(ValueError):
        Color(channel, 0, 0)


def test_numpy_channels_are_stored_as_int() -> None:
    color = Color(np.uint8(7), np.int64(8), 9)

    assert type(color.r) is int
    assert type(color.g) is int
    assert color == Color(7, 8, 9, 255)
