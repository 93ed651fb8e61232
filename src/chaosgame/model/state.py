"""
Session State (Data Model)
==========================
This module defines the central data structures for a running game.

Why is this file needed?
------------------------
1. State Management: The Session owns every mutable piece of a game (placed
   points, undo stack, cursor, generated points) in one place.
2. Gating: `available_actions` is the single source of truth for which user
   actions are valid at any instant.
3. Decoupling: Views read from the Session; the controller calls its
   explicit transition methods.

Classes:
    Phase: The stages of a game.
    ActionState: Which controls are enabled.
    GameConfig: User-tunable playback settings.
    Session: The game container and its state machine.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from chaosgame import config
from chaosgame.model.generator import PointGenerator
from chaosgame.model.geometry_primitives import Point
from chaosgame.model.history import HistoryManager, anchor_label

logger = logging.getLogger(__name__)


class Phase(IntEnum):
    """The stages of a game, strictly forward apart from undo/redo."""
    COLLECTING = 0
    AWAITING_START = 1
    READY = 2
    RUNNING = 3
    FINISHED = 4


@dataclass(frozen=True)
class ActionState:
    """Enablement of every user-facing control."""
    run: bool = False
    undo: bool = False
    redo: bool = False
    play_pause: bool = False
    canvas: bool = False


def available_actions(phase: Phase, placed_count: int, undone_count: int) -> ActionState:
    """
    Which actions are valid for the given phase and history sizes.

    `placed_count` counts every placed point including the start point.
    The start point stays undoable while READY.
    """
    if phase == Phase.FINISHED:
        return ActionState()
    if phase == Phase.RUNNING:
        return ActionState(play_pause=True)
    if phase == Phase.READY:
        return ActionState(run=True, undo=True)
    if placed_count == 0:
        return ActionState(redo=undone_count > 0, canvas=True)
    return ActionState(undo=True, redo=undone_count > 0, canvas=True)


def speed_from_slider(value: int, maximum: int = config.SPEED_SLIDER_MAX) -> int:
    """The speed slider grows towards 'faster'; the stored speed is an interval."""
    return max(0, int(maximum) - int(value))


@dataclass
class GameConfig:
    """
    Playback settings shared by the controller and the control panel.
    `total_points` is read once when a Session is created.
    """
    speed_ms: int = config.DEFAULT_SPEED_MS
    hue: float = config.DEFAULT_HUE
    total_points: int = config.DEFAULT_TOTAL_POINTS
    playing: bool = True

    def reset(self) -> None:
        """Restore the defaults."""
        self.speed_ms = config.DEFAULT_SPEED_MS
        self.hue = config.DEFAULT_HUE
        self.total_points = config.DEFAULT_TOTAL_POINTS
        self.playing = True


@dataclass(frozen=True)
class GenerationStep:
    """Outcome of one generation tick."""
    index: int
    anchor: str
    point: Point


@dataclass
class Session:
    """
    One game: N anchors, a start point, and the generated fractal.

    Phase is derived from the history size until the game is started; from
    then on it is RUNNING until `total_points` points exist, then FINISHED.
    """
    n: int
    total_points: int = config.DEFAULT_TOTAL_POINTS

    history: HistoryManager = field(init=False)
    cursor: Point = field(init=False)
    current_point: Optional[Point] = field(init=False, default=None)
    generated_points: list[Point] = field(init=False, default_factory=list)
    _started: bool = field(init=False, default=False)
    _finished: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        if self.total_points < 1:
            raise ValueError(f"total_points must be positive, got {self.total_points}.")
        self.history = HistoryManager(self.n)
        self.cursor = Point(*config.OFFSCREEN, bordered=True)

    # ------------------------------------------------------------------
    # Read views
    # ------------------------------------------------------------------

    @property
    def phase(self) -> Phase:
        if self._finished:
            return Phase.FINISHED
        if self._started:
            return Phase.RUNNING
        placed = len(self.history.points)
        if placed < self.n:
            return Phase.COLLECTING
        if placed == self.n:
            return Phase.AWAITING_START
        return Phase.READY

    @property
    def anchors(self) -> tuple[Point, ...]:
        return self.history.anchors

    @property
    def actions(self) -> ActionState:
        return available_actions(self.phase, len(self.history.points), len(self.history.undone))

    def render_points(self) -> list[Point]:
        """
        Draw order: cursor, generated points, anchors, start point.
        New points are appended just before the anchor/start tail.
        """
        return [self.cursor, *self.generated_points, *self.history.points]

    # ------------------------------------------------------------------
    # Pointer input
    # ------------------------------------------------------------------

    def move_cursor(self, x: float, y: float) -> bool:
        if not self.actions.canvas:
            return False
        self.cursor.x, self.cursor.y = x, y
        return True

    def hide_cursor(self) -> bool:
        if not self.actions.canvas:
            return False
        self.cursor.park_offscreen()
        return True

    def click(self, x: float, y: float) -> bool:
        """Place the next anchor, or the start point once all anchors exist."""
        phase = self.phase
        if phase == Phase.COLLECTING:
            self.cursor.x, self.cursor.y = x, y
            return self.history.place_anchor(Point(x, y))
        if phase == Phase.AWAITING_START:
            if not self.history.place_start(Point(x, y)):
                return False
            self._enter_ready()
            return True
        logger.debug(f"Click ignored in phase {phase.name}.")
        return False

    def _enter_ready(self) -> None:
        start = self.history.start
        self.current_point = start.copy(label="", bordered=False)
        # Canvas input is off from READY onwards
        self.cursor.park_offscreen()

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def undo(self) -> bool:
        if not self.actions.undo:
            return False
        self.history.undo()
        self.cursor.park_offscreen()
        if self.history.start is None:
            self.current_point = None
        return True

    def redo(self) -> bool:
        if not self.actions.redo:
            return False
        self.history.redo()
        if self.phase == Phase.READY:
            self._enter_ready()
        return True

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def run(self) -> bool:
        if not self.actions.run:
            return False
        self._started = True
        self.history.clear_undone()
        self.cursor.bordered = False
        self.cursor.park_offscreen()
        self.history.start.bordered = False
        logger.info(f"Session started with {self.n} anchors, {self.total_points} points to generate.")
        return True

    def advance(self, generator: PointGenerator) -> Optional[GenerationStep]:
        """Generate one point; finishes the session on the last one."""
        if self.phase != Phase.RUNNING:
            return None

        self.current_point.bordered = False
        index, point = generator.step(self.current_point, self.anchors)
        point.bordered = True
        self.generated_points.append(point)
        self.current_point = point
        step = GenerationStep(index=index, anchor=anchor_label(index), point=point)

        if len(self.generated_points) >= self.total_points:
            self._finish()
        return step

    def _finish(self) -> None:
        self.generated_points[-1].bordered = False
        self.history.clear()
        self._finished = True
        logger.info(f"Session finished after {len(self.generated_points)} points.")
