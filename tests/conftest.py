"""Shared test fixtures."""

from __future__ import annotations

import os
from typing import Callable, Optional

import pytest

# Qt widgets are never shown in tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from chaosgame.model.generator import PointGenerator
from chaosgame.model.state import GameConfig, Session


TRIANGLE = [(-1.0, -1.0), (1.0, -1.0), (0.0, 1.0)]


class ScriptedRng:
    """Stands in for numpy's Generator; returns a fixed sequence of indices."""

    def __init__(self, indices: list[int]) -> None:
        self.indices = list(indices)
        self.calls: list[tuple[int, int]] = []

    def integers(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        value = self.indices.pop(0) if self.indices else low
        assert low <= value < high
        return value


class ManualScheduler:
    """TickScheduler that only fires when the test says so."""

    def __init__(self) -> None:
        self.callback: Optional[Callable[[], None]] = None
        self.interval_ms: Optional[int] = None
        self.elapsed_ms = 0
        self.scheduled = 0
        self.cancelled = 0

    def schedule_tick(self, callback: Callable[[], None], interval_ms: int) -> None:
        self.cancel_tick()
        self.callback = callback
        self.interval_ms = interval_ms
        self.elapsed_ms = 0
        self.scheduled += 1

    def cancel_tick(self) -> None:
        if self.callback is not None:
            self.cancelled += 1
        self.callback = None

    def has_pending_tick(self) -> bool:
        return self.callback is not None

    def remaining_ms(self) -> int:
        if self.callback is None:
            return -1
        return max(0, self.interval_ms - self.elapsed_ms)

    def elapse(self, ms: int) -> None:
        """Let time pass without reaching the tick."""
        self.elapsed_ms += ms

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            callback, self.callback = self.callback, None
            assert callback is not None, "no tick pending"
            callback()


class RecordingRenderer:
    def __init__(self) -> None:
        self.frames: list[tuple[list, tuple[int, int, int]]] = []

    def render(self, points, color) -> None:
        self.frames.append(([p.copy() for p in points], color.as_tuple()))

    @property
    def last_points(self):
        return self.frames[-1][0]


class RecordingLabels:
    """Label sink keeping creation order like the Qt label layer."""

    def __init__(self) -> None:
        self.labels: dict[str, tuple[str, float, float]] = {}

    def place_label(self, label_id: str, text: str, x: float, y: float) -> None:
        self.labels[label_id] = (text, x, y)

    def remove_last_label(self) -> None:
        if self.labels:
            self.labels.pop(next(reversed(self.labels)))

    def clear_labels(self) -> None:
        self.labels.clear()

    def texts(self) -> list[str]:
        return [text for text, _, _ in self.labels.values()]


class RecordingStatus:
    def __init__(self) -> None:
        self.actions = None
        self.message = ""
        self.count = 0
        self.playing = None

    def update_actions(self, actions) -> None:
        self.actions = actions

    def show_message(self, message: str) -> None:
        self.message = message

    def show_point_count(self, count: int) -> None:
        self.count = count

    def show_playing(self, playing: bool) -> None:
        self.playing = playing


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def labels() -> RecordingLabels:
    return RecordingLabels()


@pytest.fixture
def status() -> RecordingStatus:
    return RecordingStatus()


@pytest.fixture
def game_config() -> GameConfig:
    return GameConfig(speed_ms=10, total_points=5)


def place_all(session: Session, coords=TRIANGLE, start=(0.0, 0.0)) -> None:
    for x, y in coords:
        assert session.click(x, y)
    if start is not None:
        assert session.click(*start)


@pytest.fixture
def ready_session() -> Session:
    session = Session(n=3, total_points=5)
    place_all(session)
    return session


@pytest.fixture
def scripted_generator() -> Callable[[list[int]], PointGenerator]:
    def factory(indices: list[int], n: int = 3) -> PointGenerator:
        return PointGenerator(n, rng=ScriptedRng(indices))
    return factory
