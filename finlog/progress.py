"""Console progress reporting for paced runs."""

import sys
from dataclasses import dataclass
from typing import Protocol, TextIO


@dataclass(frozen=True)
class Progress:
    entries_written: int
    total_entries: int
    seconds_elapsed: int
    time_range: int

    @property
    def seconds_remaining(self) -> int:
        return max(self.time_range - self.seconds_elapsed, 0)

    @property
    def percent_complete(self) -> int:
        """Time-based percentage: elapsed seconds against the configured window."""
        if self.time_range <= 0:
            return 100
        return min(int(self.seconds_elapsed * 100 / self.time_range), 100)


class ProgressReporter(Protocol):
    def update(self, progress: Progress) -> None: ...

    def complete(self, progress: Progress) -> None: ...


class ConsoleProgress:
    """Writes one status line per update to a text stream (stderr by default)."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream or sys.stderr

    def update(self, progress: Progress) -> None:
        self._stream.write(
            f"Writing entries: {progress.entries_written}/{progress.total_entries} written, "
            f"{progress.seconds_remaining}s remaining, "
            f"{progress.percent_complete}% complete\n"
        )
        self._stream.flush()

    def complete(self, progress: Progress) -> None:
        self._stream.write(
            f"Writing entries: completed ({progress.entries_written} entries)\n"
        )
        self._stream.flush()
