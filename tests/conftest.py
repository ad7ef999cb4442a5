# tests/conftest.py

import pytest

from droll.config import load_settings
from droll.logging import setup_logging
from droll.metrics import reset_counters


class ScriptedRNG:
    """Deterministic random source that replays fixed values in order."""

    def __init__(self, values):
        self._values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return self._values.pop(0)


class RecordingSink:
    def __init__(self):
        self.writes: list[str] = []

    def write(self, s: str) -> int:
        self.writes.append(s)
        return len(s)

    @property
    def text(self) -> str:
        return "".join(self.writes)


class FailingSink(RecordingSink):
    """Accepts ``ok_writes`` writes, then raises ``exc`` on every later write."""

    def __init__(self, ok_writes: int, exc: OSError | None = None):
        super().__init__()
        self.ok_writes = ok_writes
        self.exc = exc if exc is not None else BrokenPipeError(32, "Broken pipe")

    def write(self, s: str) -> int:
        if len(self.writes) >= self.ok_writes:
            raise self.exc
        return super().write(s)


@pytest.fixture(autouse=True)
def _structlog_to_stdlib():
    # DEBUG on the root logger with no console handler so caplog sees every event
    setup_logging(load_settings(logging_level="DEBUG", logging_console="NONE"))
    yield


@pytest.fixture(autouse=True)
def _reset_metrics():
    reset_counters()
    yield
    reset_counters()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
