"""
Qt Tick Scheduler
=================
Implements the TickScheduler protocol with a single-shot QTimer.

Why is this file needed?
------------------------
1. Single timer: One QTimer instance is reused for every tick, so restarting
   it implicitly cancels the previous tick. Duplicate timers cannot pile up.
2. Event loop: The callback runs on the GUI thread between user events, so
   game state never needs locking.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer

logger = logging.getLogger(__name__)


class QtTickScheduler(QObject):
    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._callback: Optional[Callable[[], None]] = None

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._fire)

    def schedule_tick(self, callback: Callable[[], None], interval_ms: int) -> None:
        self.cancel_tick()
        self._callback = callback
        self._timer.start(max(0, int(interval_ms)))

    def cancel_tick(self) -> None:
        self._timer.stop()
        self._callback = None

    def has_pending_tick(self) -> bool:
        return self._timer.isActive()

    def remaining_ms(self) -> int:
        return self._timer.remainingTime()

    def _fire(self) -> None:
        callback, self._callback = self._callback, None
        if callback is not None:
            callback()
