"""
Coordinate conversion between canvas (screen) space and texture pixels.
"""

from __future__ import annotations

import math
from typing import Tuple

from pixeledit import config
from pixeledit.core.models import Point, Rect


def clamp_zoom(zoom: int) -> int:
    """Clamps a display zoom to [MIN_ZOOM, MAX_ZOOM]."""
    return max(config.MIN_ZOOM, min(config.MAX_ZOOM, int(zoom)))


def _check_zoom(zoom: int) -> None:
    if zoom < 1:
        raise ValueError(f"Zoom must be >= 1, got {zoom}")


def screen_to_pixel(screen_point: Point, rect_origin: Point, zoom: int) -> Tuple[int, int]:
    """
    Converts a screen position to texture pixel coordinates.

    Args:
        screen_point: Position in canvas coordinates
        rect_origin: Top-left corner of the displayed texture
        zoom: Screen pixels per texture pixel (>= 1)

    Returns:
        Tuple (x, y), may be out of bounds
    """
    _check_zoom(zoom)
    x = math.floor((screen_point.x - rect_origin.x) / zoom)
    y = math.floor((screen_point.y - rect_origin.y) / zoom)
    return (x, y)


def pixel_rect(x: int, y: int, rect_origin: Point, zoom: int) -> Rect:
    """Screen rectangle covered by texture pixel (x, y)."""
    _check_zoom(zoom)
    return Rect(rect_origin.x + x * zoom, rect_origin.y + y * zoom, zoom, zoom)


def display_rect(rect_origin: Point, width: int, height: int, zoom: int) -> Rect:
    """Screen rectangle covered by a width x height texture."""
    _check_zoom(zoom)
    return Rect(rect_origin.x, rect_origin.y, width * zoom, height * zoom)


def in_bounds(x: int, y: int, width: int, height: int) -> bool:
    return 0 <= x < width and 0 <= y < height
