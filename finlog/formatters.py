"""Entry formatters: space-delimited, comma-delimited, named fields."""

from typing import Callable

from finlog.models import LogEntry, LogFormat

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(entry: LogEntry) -> str:
    return entry.timestamp.strftime(TIMESTAMP_FORMAT)


def format_space(entry: LogEntry) -> str:
    return f"{format_timestamp(entry)} {entry.event_id} {entry.message}"


def format_comma(entry: LogEntry) -> str:
    return f"{format_timestamp(entry)},{entry.event_id},{entry.message}"


def format_named(entry: LogEntry) -> str:
    return (
        f"TimeDate={format_timestamp(entry)} "
        f"EventId={entry.event_id} "
        f"Message={entry.message}"
    )


_FORMATTERS = {
    LogFormat.SPACE_DELIMITED: format_space,
    LogFormat.COMMA_DELIMITED: format_comma,
    LogFormat.NAMED_FIELDS: format_named,
}


def get_formatter(log_format: LogFormat | str) -> Callable[[LogEntry], str]:
    """Return the formatter function for the given log type."""
    return _FORMATTERS[LogFormat.parse(log_format)]


def format_entry(entry: LogEntry, log_format: LogFormat | str) -> str:
    return get_formatter(log_format)(entry)
