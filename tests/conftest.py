from datetime import datetime, timedelta

import pytest


class FixedClock:
    """Returns a fixed start time, advancing by *step* on every call."""

    def __init__(self, start: datetime, step: timedelta = timedelta(0)):
        self.current = start
        self.step = step
        self.calls = 0

    def now(self) -> datetime:
        value = self.current
        self.current += self.step
        self.calls += 1
        return value


class ScriptedRandom:
    """Cycles through a fixed list of draws, recording the requested bounds."""

    def __init__(self, values):
        self.values = list(values)
        self.bounds = []
        self._i = 0

    def randint(self, a: int, b: int) -> int:
        self.bounds.append((a, b))
        value = self.values[self._i % len(self.values)]
        self._i += 1
        return value


class RecordingSleeper:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


class RecordingReporter:
    def __init__(self):
        self.updates = []
        self.completed = []

    def update(self, progress) -> None:
        self.updates.append(progress)

    def complete(self, progress) -> None:
        self.completed.append(progress)


@pytest.fixture
def clock():
    return FixedClock(datetime(2021, 1, 11, 18, 9, 45))


@pytest.fixture
def rng():
    return ScriptedRandom([1, 2, 3, 4])


@pytest.fixture
def sleeper():
    return RecordingSleeper()


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "FINLOG_COUNT", "FINLOG_TIME_RANGE", "FINLOG_DIRECTORY", "FINLOG_TYPE",
        "FINLOG_FORCE", "FINLOG_SHOW_PROGRESS", "FINLOG_SEED", "FINLOG_CONFIG",
    ):
        monkeypatch.delenv(name, raising=False)
