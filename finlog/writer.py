"""Paced writer: spreads generation over a time window, then appends in one write."""

import logging
import os
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from finlog.config import GenerationConfig
from finlog.errors import FileProvisionError, FlushError
from finlog.formatters import get_formatter
from finlog.generator import generate_entries
from finlog.models import Clock, RandomSource, SystemClock, make_random_source
from finlog.progress import Progress, ProgressReporter
from finlog.provision import provision

logger = logging.getLogger(__name__)


class WriterState(Enum):
    IDLE = "idle"
    PROVISIONING = "provisioning"
    GENERATING = "generating"
    FLUSHING = "flushing"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class RunResult:
    entries_added: int
    entries_generated: int
    pauses: int
    output_path: str


def count_lines(path: str) -> int:
    """Number of lines in *path*; a trailing partial line counts as one."""
    if not os.path.isfile(path):
        return 0
    with open(path, "rb") as f:
        return sum(1 for _ in f)


def entries_per_second(count: int, time_range: int) -> int:
    """Nominal generation rate; 0 means pacing is off."""
    if time_range <= 0:
        return 0
    return max(count // time_range, 1)


class PacedWriter:
    def __init__(
        self,
        config: GenerationConfig,
        clock: Clock | None = None,
        rng: RandomSource | None = None,
        sleep: Callable[[float], None] = time.sleep,
        reporter: ProgressReporter | None = None,
    ):
        self._config = config
        self._clock = clock or SystemClock()
        self._rng = rng or make_random_source(config.seed)
        self._sleep = sleep
        self._reporter = reporter if config.show_progress else None
        self._formatter = get_formatter(config.log_type)
        self.state = WriterState.IDLE
        self.pauses = 0

    @property
    def output_path(self) -> str:
        return self._config.output_path

    def run(self) -> RunResult:
        path = self.output_path

        self.state = WriterState.PROVISIONING
        try:
            provision(path, self._config.force)
        except FileProvisionError:
            self.state = WriterState.FAILED
            raise

        self.state = WriterState.GENERATING
        lines = self._generate()

        self.state = WriterState.FLUSHING
        try:
            before = self._count(path)
            self._flush(path, lines)
            after = self._count(path)
        except FlushError:
            self.state = WriterState.FAILED
            raise

        self.state = WriterState.DONE
        result = RunResult(
            entries_added=after - before,
            entries_generated=len(lines),
            pauses=self.pauses,
            output_path=path,
        )
        logger.info(
            "Appended %d entries to %s (%d pauses)",
            result.entries_added, path, result.pauses,
        )
        return result

    def _generate(self) -> list[str]:
        count = self._config.count
        time_range = self._config.time_range
        per_second = entries_per_second(count, time_range)
        logger.debug(
            "Generating %d entries over %ds (%d per second)",
            count, time_range, per_second,
        )

        lines: list[str] = []
        for entry in generate_entries(count, self._clock, self._rng):
            lines.append(self._formatter(entry))
            # seconds of the window that should have passed after this entry
            due = len(lines) * time_range // count
            while self.pauses < due:
                self._sleep(1)
                self.pauses += 1
                if self._reporter:
                    self._reporter.update(self._progress(len(lines)))

        if self._reporter:
            self._reporter.complete(self._progress(len(lines)))
        return lines

    def _progress(self, written: int) -> Progress:
        return Progress(
            entries_written=written,
            total_entries=self._config.count,
            seconds_elapsed=self.pauses,
            time_range=self._config.time_range,
        )

    @staticmethod
    def _count(path: str) -> int:
        try:
            return count_lines(path)
        except OSError as e:
            raise FlushError(path, e.strerror or str(e)) from e

    @staticmethod
    def _flush(path: str, lines: list[str]) -> None:
        payload = "\n".join(lines) + "\n"
        try:
            with open(path, "a", encoding="utf-8") as f:
                f.write(payload)
        except OSError as e:
            raise FlushError(path, e.strerror or str(e)) from e
