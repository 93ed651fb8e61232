"""
Collaborator interfaces consumed by the controllers.

The controllers only talk to these protocols, so the Qt views (and the test
doubles) can be swapped without touching game logic.
"""
from __future__ import annotations

from typing import Callable, Protocol, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from chaosgame.model.geometry_primitives import Color, Point
    from chaosgame.model.state import ActionState


class RenderSink(Protocol):
    def render(self, points: Sequence[Point], color: Color) -> None: ...


class LabelSink(Protocol):
    def place_label(self, label_id: str, text: str, x: float, y: float) -> None: ...
    def remove_last_label(self) -> None: ...
    def clear_labels(self) -> None: ...


class StatusSink(Protocol):
    def update_actions(self, actions: ActionState) -> None: ...
    def show_message(self, message: str) -> None: ...
    def show_point_count(self, count: int) -> None: ...
    def show_playing(self, playing: bool) -> None: ...


class TickScheduler(Protocol):
    """
    Periodic tick source. Scheduling a tick replaces any pending one, so at
    most one tick is ever outstanding.
    """
    def schedule_tick(self, callback: Callable[[], None], interval_ms: int) -> None: ...
    def cancel_tick(self) -> None: ...
    def has_pending_tick(self) -> bool: ...
    def remaining_ms(self) -> int:
        """Milliseconds until the pending tick fires, or -1 when none is pending."""
        ...
