# tests/conftest.py
from __future__ import annotations

from typing import Any, Callable, List, Tuple

import pytest
from loguru import logger

from phisched.clock.virtual import VirtualClock


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture(autouse=True)
def _clean_phisched_env(monkeypatch):
    for name in (
        "PHISCHED_LOG_LEVEL",
        "PHISCHED_POLICY",
        "PHISCHED_BASE",
        "PHISCHED_GRID_UNIT",
    ):
        monkeypatch.delenv(name, raising=False)


class RecordingClock:
    """
    最小 Clock 实现：只记录注册，不触发。
    """

    def __init__(self, position: float = 0.0):
        self.position = position
        self.registrations: List[Tuple[float, Callable[[], None]]] = []

    def now(self) -> float:
        return self.position

    def schedule_at(self, time: float, callback: Callable[[], None]) -> Any:
        self.registrations.append((time, callback))
        return len(self.registrations) - 1


class NotReadyClock(RecordingClock):
    def is_ready(self) -> bool:
        return False


@pytest.fixture
def recording_clock() -> RecordingClock:
    return RecordingClock()


@pytest.fixture
def make_recording_clock():
    def _make(position: float = 0.0, ready: bool = True) -> RecordingClock:
        cls = RecordingClock if ready else NotReadyClock
        return cls(position)

    return _make


@pytest.fixture
def virtual_clock() -> VirtualClock:
    return VirtualClock()


@pytest.fixture
def sink():
    """
    on_fire 替身：记录 (clock 位置, identifier)。
    用法：fire = sink(clock)
    """
    events: List[Tuple[float, Any]] = []

    def _bind(clock):
        def _on_fire(identifier):
            events.append((clock.now(), identifier))

        return _on_fire

    _bind.events = events
    return _bind
