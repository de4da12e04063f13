"""Lazy generation of catalog-backed log entries."""

from typing import Iterator

from finlog.models import (
    MAX_EVENT_ID,
    MIN_EVENT_ID,
    Clock,
    LogEntry,
    RandomSource,
    SystemClock,
    make_random_source,
)


def make_entry(clock: Clock, rng: RandomSource) -> LogEntry:
    # randint is inclusive on both ends, so MAX_EVENT_ID can be drawn
    event_id = rng.randint(MIN_EVENT_ID, MAX_EVENT_ID)
    return LogEntry.for_event(clock.now(), event_id)


def generate_entries(
    count: int,
    clock: Clock | None = None,
    rng: RandomSource | None = None,
) -> Iterator[LogEntry]:
    """Yield exactly *count* entries, sampling the clock and rng per entry."""
    clock = clock or SystemClock()
    rng = rng or make_random_source()
    for _ in range(count):
        yield make_entry(clock, rng)
