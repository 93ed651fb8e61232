"""
Playback Controller
===================
Drives point generation from a self-rescheduling tick.

Every tick: generate one point if the session is RUNNING and playback is not
paused, hand the outcome to `on_frame`, then schedule the next tick unless
the session has FINISHED. Paused ticks keep the loop alive but generate
nothing.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from chaosgame.controller.interfaces import TickScheduler
from chaosgame.model.generator import PointGenerator
from chaosgame.model.state import GameConfig, GenerationStep, Phase, Session

logger = logging.getLogger(__name__)

FrameCallback = Callable[[Optional[GenerationStep]], None]


class PlaybackController:
    def __init__(
        self,
        session: Session,
        config: GameConfig,
        scheduler: TickScheduler,
        generator: PointGenerator,
        on_frame: FrameCallback,
    ) -> None:
        self.session = session
        self.config = config
        self.scheduler = scheduler
        self.generator = generator
        self.on_frame = on_frame
        self._active = False

    @property
    def is_active(self) -> bool:
        return self._active

    def start(self) -> None:
        if self.session.phase != Phase.RUNNING:
            logger.debug(f"Playback not started in phase {self.session.phase.name}.")
            return
        self._active = True
        self._schedule()

    def stop(self) -> None:
        self._active = False
        self.scheduler.cancel_tick()

    def reschedule(self) -> None:
        """
        Apply a changed speed. A pending tick is only ever brought forward;
        otherwise the new interval takes effect from the next tick on, so a
        stream of speed changes cannot keep postponing generation.
        """
        if not self._active:
            return
        remaining = self.scheduler.remaining_ms()
        if remaining < 0 or self.config.speed_ms < remaining:
            self._schedule()

    def _schedule(self) -> None:
        # schedule_tick replaces any pending tick
        self.scheduler.schedule_tick(self.tick, self.config.speed_ms)

    def tick(self) -> Optional[GenerationStep]:
        step = None
        if self.session.phase == Phase.RUNNING and self.config.playing:
            step = self.session.advance(self.generator)
            logger.debug(f"Generated point {len(self.session.generated_points)}/{self.session.total_points}")

        self.on_frame(step)

        if self.session.phase == Phase.FINISHED:
            self.stop()
        elif self._active:
            self._schedule()
        return step
