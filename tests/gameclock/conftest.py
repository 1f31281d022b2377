from __future__ import annotations

import pytest


class FakeWallClock:
    def __init__(self, start_ms: float = 1_000.0) -> None:
        self.value = start_ms

    def __call__(self) -> float:
        return self.value

    def advance(self, delta_ms: float) -> None:
        self.value += delta_ms


class RecordingTimer:
    """Timer double recording every pool call into a shared journal."""

    def __init__(self, name: str, journal: list[str], *, stop_after: int | None = None) -> None:
        self.name = name
        self.journal = journal
        self.stop_after = stop_after
        self.advance_calls: list[float] = []
        self.destroyed = False

    def advance(self, wall_time: float) -> bool:
        self.advance_calls.append(wall_time)
        self.journal.append(f"advance:{self.name}")
        if self.stop_after is not None and len(self.advance_calls) >= self.stop_after:
            return False
        return True

    def pause(self) -> None:
        self.journal.append(f"pause:{self.name}")

    def resume(self) -> None:
        self.journal.append(f"resume:{self.name}")

    def destroy(self) -> None:
        self.destroyed = True
        self.journal.append(f"destroy:{self.name}")


class RecordingMasterTimer(RecordingTimer):
    def __init__(self, journal: list[str]) -> None:
        super().__init__("master", journal)
        self.started = False
        self.cleared = 0

    def start(self, delay_ms: float = 0.0) -> None:
        _ = delay_ms
        self.started = True
        self.journal.append("start:master")

    def remove_all(self) -> None:
        self.cleared += 1
        self.journal.append("remove_all:master")


class HostState:
    def __init__(self) -> None:
        self.paused = False
        self.fixed_delay = False

    def is_paused(self) -> bool:
        return self.paused

    def uses_fixed_delay(self) -> bool:
        return self.fixed_delay


@pytest.fixture
def wall_clock() -> FakeWallClock:
    return FakeWallClock()


@pytest.fixture
def host() -> HostState:
    return HostState()


@pytest.fixture
def journal() -> list[str]:
    return []


@pytest.fixture
def master(journal: list[str]) -> RecordingMasterTimer:
    return RecordingMasterTimer(journal)


@pytest.fixture
def restore_logging():
    import logging

    root = logging.getLogger()
    package_logger = logging.getLogger("gameclock")
    handlers = list(root.handlers)
    root_level = root.level
    package_level = package_logger.level
    yield
    root.handlers.clear()
    root.handlers.extend(handlers)
    root.setLevel(root_level)
    package_logger.setLevel(package_level)
