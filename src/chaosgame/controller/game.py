"""
Game Controller
===============
The configuration surface and input router for one game window.

Why is this file needed?
------------------------
1. Routing: Pointer events and button presses arrive here, are validated
   against the current phase and forwarded to the Session. Invalid requests
   are dropped silently.
2. Refresh: After every event it rebuilds labels, control enablement, the
   status line and the rendered point buffer.
3. Lifecycle: It owns the Session, the PointGenerator and the
   PlaybackController, and recreates them on reset / new game.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from chaosgame.controller.interfaces import LabelSink, RenderSink, StatusSink, TickScheduler
from chaosgame.controller.playback import PlaybackController
from chaosgame.model.generator import PointGenerator
from chaosgame.model.geometry_primitives import Color
from chaosgame.model.normalizer import anchor_label_positions, marker_label_position
from chaosgame.model.state import GameConfig, GenerationStep, Phase, Session

logger = logging.getLogger(__name__)

MESSAGES = {
    Phase.COLLECTING: "Click on the board to select points!",
    Phase.AWAITING_START: "Select a starting position!",
    Phase.READY: "Press the 'Run' button to start the game!",
    Phase.RUNNING: "Generating points...",
    Phase.FINISHED: "Look at your fascinating fractal pattern! Press restart to play again!",
}


class GameController:
    def __init__(
        self,
        n: int,
        config: GameConfig,
        renderer: RenderSink,
        labels: LabelSink,
        status: StatusSink,
        scheduler: TickScheduler,
        rng: Optional[np.random.Generator] = None,
        canvas_size: tuple[float, float] = (800.0, 800.0),
    ) -> None:
        self.config = config
        self.renderer = renderer
        self.labels = labels
        self.status = status
        self.scheduler = scheduler
        self.rng = rng
        self.canvas_size = canvas_size
        self._last_step: Optional[GenerationStep] = None

        self._new_session(n)
        self.refresh()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _new_session(self, n: int) -> None:
        self.session = Session(n=n, total_points=self.config.total_points)
        self.generator = PointGenerator(n, rng=self.rng)
        self.playback = PlaybackController(
            session=self.session,
            config=self.config,
            scheduler=self.scheduler,
            generator=self.generator,
            on_frame=self._on_frame,
        )
        self._last_step = None
        logger.info(f"New game with {n} anchors.")

    def request_reset(self) -> None:
        self.request_new_game(self.session.n)

    def request_new_game(self, n: int) -> None:
        """Throw the current session away and start from scratch."""
        self.playback.stop()
        self.labels.clear_labels()
        self.config.reset()
        self._new_session(n)
        self.refresh()

    # ------------------------------------------------------------------
    # Pointer input
    # ------------------------------------------------------------------

    def on_pointer_move(self, x: float, y: float) -> None:
        if self.session.move_cursor(x, y):
            self.refresh()

    def on_pointer_leave(self) -> None:
        if self.session.hide_cursor():
            self.refresh()

    def on_pointer_click(self, x: float, y: float) -> None:
        if not self.session.actions.canvas:
            logger.debug("Click ignored: canvas input is disabled.")
            return
        if self.session.click(x, y):
            self.refresh()

    def on_resize(self, width: float, height: float) -> None:
        self.canvas_size = (float(width), float(height))
        self.refresh()

    # ------------------------------------------------------------------
    # Configuration surface
    # ------------------------------------------------------------------

    def set_speed(self, speed_ms: int) -> None:
        self.config.speed_ms = max(0, int(speed_ms))
        self.playback.reschedule()

    def set_hue(self, hue: float) -> None:
        self.config.hue = float(hue) % 360.0
        self._render()

    def toggle_play(self) -> None:
        if not self.session.actions.play_pause:
            logger.debug(f"Play/pause ignored in phase {self.session.phase.name}.")
            return
        self.config.playing = not self.config.playing
        logger.info("Playback resumed." if self.config.playing else "Playback paused.")
        self.status.show_playing(self.config.playing)

    def request_undo(self) -> None:
        if not self.session.undo():
            logger.debug("Undo ignored.")
            return
        self.labels.remove_last_label()
        self.refresh()

    def request_redo(self) -> None:
        if not self.session.redo():
            logger.debug("Redo ignored.")
            return
        self.refresh()

    def request_run(self) -> None:
        if not self.session.run():
            logger.debug(f"Run ignored in phase {self.session.phase.name}.")
            return
        self.playback.start()
        self.refresh()

    # ------------------------------------------------------------------
    # Refresh
    # ------------------------------------------------------------------

    def _on_frame(self, step: Optional[GenerationStep]) -> None:
        if step is not None:
            self._last_step = step
        if step is not None or self.session.phase == Phase.FINISHED:
            self.refresh()
        else:
            self._render()

    def refresh(self) -> None:
        phase = self.session.phase
        self._update_labels(phase)
        self.status.update_actions(self.session.actions)
        self.status.show_message(self._message(phase))
        self.status.show_playing(self.config.playing)
        self._render()

    def _message(self, phase: Phase) -> str:
        if phase == Phase.RUNNING and self._last_step is not None:
            step = self._last_step
            return f"Random number chosen: {step.index} Point Associated: {step.anchor}"
        return MESSAGES[phase]

    def _update_labels(self, phase: Phase) -> None:
        if phase == Phase.FINISHED:
            self.labels.clear_labels()
            return

        width, height = self.canvas_size
        session = self.session
        for placement in anchor_label_positions(session.anchors, session.n, width, height):
            self.labels.place_label(placement.id, placement.text, placement.x, placement.y)

        marker = None
        if phase == Phase.READY:
            marker = marker_label_position(session.history.start, "Start", width, height)
        elif phase == Phase.RUNNING:
            text = "Current" if session.generated_points else "Start"
            marker = marker_label_position(session.current_point, text, width, height)
        if marker is not None:
            self.labels.place_label(marker.id, marker.text, marker.x, marker.y)

    def _render(self) -> None:
        points = self.session.render_points()
        self.renderer.render(points, Color.from_hue(self.config.hue))
        # Everything except the cursor
        self.status.show_point_count(len(points) - 1)
