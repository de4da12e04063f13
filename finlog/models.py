"""Event catalog, log entry model and the clock/random capabilities."""

import random
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Protocol


class EventCatalog(Enum):
    """Fixed event codes and the message each one carries."""

    RESOURCE_REQUIRED = (1, "More resource required")
    TRANSACTION_PROCESSED = (2, "Transaction processed successfully")
    TRANSACTION_FAILED = (3, "Transaction failed")
    BALANCE_LOW = (4, "Account balance low")

    def __init__(self, event_id: int, message: str):
        self.event_id = event_id
        self.message = message

    @classmethod
    def from_id(cls, event_id: int) -> "EventCatalog":
        for event in cls:
            if event.event_id == event_id:
                return event
        raise KeyError(f"Unknown event id: {event_id}")

    @classmethod
    def ids(cls) -> tuple[int, ...]:
        return tuple(event.event_id for event in cls)


MIN_EVENT_ID = min(EventCatalog.ids())
MAX_EVENT_ID = max(EventCatalog.ids())


class LogFormat(Enum):
    SPACE_DELIMITED = "SpaceDelimeter"
    COMMA_DELIMITED = "CommaDelimeter"
    NAMED_FIELDS = "NamedFields"

    @classmethod
    def parse(cls, value: "str | LogFormat") -> "LogFormat":
        """Accept an enum member or its CLI name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        wanted = str(value).strip().lower()
        for fmt in cls:
            if fmt.value.lower() == wanted:
                return fmt
        raise ValueError(f"Unknown log type '{value}'")

    @classmethod
    def choices(cls) -> list[str]:
        return [fmt.value for fmt in cls]


@dataclass(frozen=True)
class LogEntry:
    timestamp: datetime
    event_id: int
    message: str

    @classmethod
    def for_event(cls, timestamp: datetime, event_id: int) -> "LogEntry":
        """Build an entry whose message comes from the catalog."""
        event = EventCatalog.from_id(event_id)
        return cls(
            timestamp=timestamp.replace(microsecond=0),
            event_id=event.event_id,
            message=event.message,
        )


class Clock(Protocol):
    def now(self) -> datetime: ...


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class SystemClock:
    """Local wall clock."""

    def now(self) -> datetime:
        return datetime.now()


def make_random_source(seed: int | None = None) -> RandomSource:
    """Return a private Random instance, seeded when *seed* is given."""
    return random.Random(seed)
