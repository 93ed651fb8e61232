"""
Placement History
=================
Ordered list of the points the user has placed (N anchors followed by the
start point) plus the stack of undone placements.

Invariants:
    - Placing a new point clears the undo stack.
    - Labels are positional: anchor i is the i-th capital letter, the
      (N+1)-th point is "Start". A redone point is relabelled, not restored.
    - len(points) + len(undone) <= N + 1.
"""
from __future__ import annotations

import logging

from chaosgame.model.geometry_primitives import Point

logger = logging.getLogger(__name__)

START_LABEL = "Start"


def anchor_label(index: int) -> str:
    """'A' for anchor 0, 'B' for anchor 1, ..."""
    return chr(ord("A") + index)


class HistoryManager:
    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError(f"At least one anchor is required, got n={n}.")
        self.n = n
        self._points: list[Point] = []
        self._undone: list[Point] = []

    # ------------------------------------------------------------------
    # Read views
    # ------------------------------------------------------------------

    @property
    def points(self) -> tuple[Point, ...]:
        """All placed points: anchors first, then the start point if chosen."""
        return tuple(self._points)

    @property
    def anchors(self) -> tuple[Point, ...]:
        return tuple(self._points[:self.n])

    @property
    def start(self) -> Point | None:
        if len(self._points) > self.n:
            return self._points[self.n]
        return None

    @property
    def undone(self) -> tuple[Point, ...]:
        return tuple(self._undone)

    def _label_for(self, index: int) -> str:
        return anchor_label(index) if index < self.n else START_LABEL

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def place_anchor(self, point: Point) -> bool:
        if len(self._points) >= self.n:
            logger.debug(f"Anchor rejected: all {self.n} anchors are placed.")
            return False
        self._push_new(point)
        return True

    def place_start(self, point: Point) -> bool:
        if len(self._points) != self.n:
            logger.debug(f"Start point rejected with {len(self._points)} of {self.n} anchors placed.")
            return False
        self._push_new(point)
        return True

    def _push_new(self, point: Point) -> None:
        self._undone.clear()
        index = len(self._points)
        self._points.append(point.copy(label=self._label_for(index), bordered=True))

    def undo(self) -> bool:
        if not self._points:
            return False
        self._undone.append(self._points.pop())
        return True

    def redo(self) -> bool:
        if not self._undone:
            return False
        point = self._undone.pop()
        point.label = self._label_for(len(self._points))
        self._points.append(point)
        return True

    def clear_undone(self) -> None:
        self._undone.clear()

    def clear(self) -> None:
        self._points.clear()
        self._undone.clear()
