"""
Geometric Primitives and Colours for the canvas.
"""
from __future__ import annotations

import colorsys
import math
from dataclasses import dataclass

from chaosgame.config import OFFSCREEN


@dataclass(frozen=True)
class Vector:
    """A 2D displacement: direction and length."""
    x: float
    y: float

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector:
        """Unit vector in the same direction; a zero vector stays zero."""
        length = self.length
        if length == 0.0:
            return Vector(0.0, 0.0)
        return Vector(self.x / length, self.y / length)


@dataclass
class Point:
    """
    A point on the canvas in normalized device coordinates ([-1, 1] on both axes).

    `bordered` points (anchors, cursor, start marker, current point) are drawn
    with an outline.
    """
    x: float
    y: float
    label: str = ""
    bordered: bool = False

    def __sub__(self, other: Point) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __add__(self, other: Vector) -> Point:
        # Translation yields a fresh, unlabelled point
        if not isinstance(other, Vector):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def copy(self, label: str | None = None, bordered: bool | None = None) -> Point:
        return Point(
            self.x,
            self.y,
            self.label if label is None else label,
            self.bordered if bordered is None else bordered,
        )

    def park_offscreen(self) -> None:
        """Move the point outside the visible view (used for the hidden cursor)."""
        self.x, self.y = OFFSCREEN


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels."""
    r: int = 0
    g: int = 0
    b: int = 0

    @classmethod
    def from_hue(cls, hue: float) -> Color:
        """
        Fully saturated, full-value colour for a hue in degrees.

        Hues outside [0, 360) wrap around.
        """
        h = (float(hue) % 360.0) / 360.0
        r, g, b = colorsys.hsv_to_rgb(h, 1.0, 1.0)
        return cls(round(r * 255), round(g * 255), round(b * 255))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)
