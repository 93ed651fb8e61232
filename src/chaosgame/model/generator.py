"""
Point Generation (the chaos game rule).

Each step picks an anchor uniformly at random and moves the current point a
fixed fraction of the way towards it.
"""
from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from chaosgame.model.geometry_primitives import Point


def contraction_factor(n: int) -> float:
    """Fraction of the remaining distance travelled per step for n anchors."""
    return n / (n + 3)


def next_point(current: Point, anchors: Sequence[Point], index: int, factor: Optional[float] = None) -> Point:
    """
    Linear interpolation from `current` towards `anchors[index]`.

    The result carries no label and no border; the caller decides which point
    is highlighted.
    """
    if factor is None:
        factor = contraction_factor(len(anchors))
    return current + (anchors[index] - current) * factor


class PointGenerator:
    """Draws anchor indices i.i.d. uniform on [0, n-1] and applies `next_point`."""

    def __init__(self, n: int, rng: Optional[np.random.Generator] = None) -> None:
        if n < 1:
            raise ValueError(f"At least one anchor is required, got n={n}.")
        self.n = n
        self.factor = contraction_factor(n)
        self.rng = rng if rng is not None else np.random.default_rng()

    def pick_index(self) -> int:
        return int(self.rng.integers(0, self.n))

    def step(self, current: Point, anchors: Sequence[Point]) -> tuple[int, Point]:
        index = self.pick_index()
        return index, next_point(current, anchors, index, self.factor)
