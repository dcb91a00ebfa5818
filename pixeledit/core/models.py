from __future__ import annotations

import operator
import re
from dataclasses import dataclass
from typing import Tuple

RGBA = Tuple[int, int, int, int]

_HEX_COLOR = re.compile(r"[0-9a-fA-F]{6}(?:[0-9a-fA-F]{2})?")


@dataclass(frozen=True)
class Color:
    """An RGBA color with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for name in ("r", "g", "b", "a"):
            channel = getattr(self, name)
            try:
                value = operator.index(channel)
            except TypeError:
                raise ValueError(f"Color channel must be an integer: {channel!r}") from None
            if not 0 <= value <= 255:
                raise ValueError(f"Color channel out of range 0..255: {channel}")
            # Frozen: normalize numpy and bool channels to plain int
            object.__setattr__(self, name, int(value))

    @classmethod
    def from_tuple(cls, values) -> Color:
        values = tuple(values)
        if len(values) == 3:
            values = values + (255,)
        return cls(*values)

    @classmethod
    def from_floats(cls, r: float, g: float, b: float, a: float = 1.0) -> Color:
        """Builds a color from normalized 0.0-1.0 channels."""
        return cls(*(int(round(min(1.0, max(0.0, v)) * 255)) for v in (r, g, b, a)))

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """
        Parses '#RRGGBB' or '#RRGGBBAA'.

        Raises:
            ValueError: If the text is not a valid hex color
        """
        value = text.strip().lstrip("#")
        if not _HEX_COLOR.fullmatch(value):
            raise ValueError(f"Invalid hex color: {text!r}")
        channels = [int(value[i:i + 2], 16) for i in range(0, len(value), 2)]
        return cls.from_tuple(channels)

    def to_hex(self, include_alpha: bool = True) -> str:
        text = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if include_alpha:
            text += f"{self.a:02x}"
        return text

    def to_floats(self) -> Tuple[float, float, float, float]:
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0, self.a / 255.0)

    def as_tuple(self) -> RGBA:
        return (self.r, self.g, self.b, self.a)


@dataclass(frozen=True)
class Point:
    """A position in canvas (screen) coordinates."""

    x: float
    y: float

    def offset(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned screen rectangle. Contains its left/top edge, not its right/bottom."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    def contains(self, point: Point) -> bool:
        return self.x <= point.x < self.right and self.y <= point.y < self.bottom
