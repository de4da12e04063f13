"""Configuration: defaults, YAML file, environment variables, CLI overrides."""

import logging
import os
import tempfile
from dataclasses import dataclass, fields

import yaml

from finlog.errors import ConfigError
from finlog.models import LogFormat

logger = logging.getLogger(__name__)

LOG_FILENAME = "FinancialApplication.txt"

MIN_COUNT, MAX_COUNT = 1, 10000
MIN_TIME_RANGE, MAX_TIME_RANGE = 0, 300

DEFAULT_DIRECTORY = "C:\\Temp" if os.name == "nt" else tempfile.gettempdir()

ENV_PREFIX = "FINLOG_"


def _parse_bool(val: str | None, default: bool) -> bool:
    if val is None:
        return default
    return val.strip().lower() in ("true", "1", "yes")


def _parse_int(name: str, val) -> int:
    if isinstance(val, bool):
        raise ConfigError(f"{name} must be an integer, got {val!r}")
    try:
        return int(val)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer, got {val!r}") from None


def _coerce_bool(name: str, val) -> bool:
    if isinstance(val, bool):
        return val
    if isinstance(val, str):
        return _parse_bool(val, False)
    if isinstance(val, int) and val in (0, 1):
        return bool(val)
    raise ConfigError(f"{name} must be a boolean, got {val!r}")


def _strip_separator(directory: str) -> str:
    stripped = directory.rstrip("/\\")
    # "/" or "C:\" would collapse to nothing useful
    if not stripped or stripped.endswith(":"):
        return directory
    return stripped


@dataclass(frozen=True)
class GenerationConfig:
    count: int = 10000
    time_range: int = 30
    directory: str = DEFAULT_DIRECTORY
    log_type: LogFormat = LogFormat.SPACE_DELIMITED
    force: bool = False
    show_progress: bool = False
    seed: int | None = None

    def __post_init__(self):
        count = _parse_int("count", self.count)
        if not MIN_COUNT <= count <= MAX_COUNT:
            raise ConfigError(
                f"count must be between {MIN_COUNT} and {MAX_COUNT}, got {count}"
            )
        time_range = _parse_int("time_range", self.time_range)
        if not MIN_TIME_RANGE <= time_range <= MAX_TIME_RANGE:
            raise ConfigError(
                f"time_range must be between {MIN_TIME_RANGE} and "
                f"{MAX_TIME_RANGE}, got {time_range}"
            )
        try:
            log_type = LogFormat.parse(self.log_type)
        except ValueError as e:
            raise ConfigError(
                f"{e}; expected one of {', '.join(LogFormat.choices())}"
            ) from None
        if not self.directory:
            raise ConfigError("directory must not be empty")
        seed = None if self.seed is None else _parse_int("seed", self.seed)
        force = _coerce_bool("force", self.force)
        show_progress = _coerce_bool("show_progress", self.show_progress)

        # frozen dataclass: normalise in place once, never again
        object.__setattr__(self, "count", count)
        object.__setattr__(self, "force", force)
        object.__setattr__(self, "show_progress", show_progress)
        object.__setattr__(self, "time_range", time_range)
        object.__setattr__(self, "log_type", log_type)
        object.__setattr__(self, "directory", _strip_separator(str(self.directory)))
        object.__setattr__(self, "seed", seed)

    @property
    def output_path(self) -> str:
        return os.path.join(self.directory, LOG_FILENAME)


_FIELD_NAMES = tuple(f.name for f in fields(GenerationConfig))


def load_yaml(path: str) -> dict:
    """Load a YAML config file, accepting an optional ``generator:`` section."""
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    if isinstance(data.get("generator"), dict):
        data = data["generator"]

    unknown = sorted(set(data) - set(_FIELD_NAMES))
    if unknown:
        logger.warning("Ignoring unknown config keys in %s: %s", path, ", ".join(unknown))
    return {k: v for k, v in data.items() if k in _FIELD_NAMES}


def _from_env(environ) -> dict:
    values = {}
    for name in ("count", "time_range", "seed"):
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw is not None and raw.strip():
            values[name] = _parse_int(ENV_PREFIX + name.upper(), raw.strip())
    directory = environ.get(ENV_PREFIX + "DIRECTORY")
    if directory:
        values["directory"] = directory
    log_type = environ.get(ENV_PREFIX + "TYPE")
    if log_type:
        values["log_type"] = log_type
    for name in ("force", "show_progress"):
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw is not None:
            values[name] = _parse_bool(raw, False)
    return values


def load_config(
    overrides: dict | None = None,
    config_path: str | None = None,
    environ=None,
) -> GenerationConfig:
    """Merge defaults < YAML file < environment < *overrides* and validate.

    ``None`` values in *overrides* mean "not given" and are skipped.
    """
    environ = os.environ if environ is None else environ
    config_path = config_path or environ.get(ENV_PREFIX + "CONFIG")

    values: dict = {}
    if config_path:
        values.update(load_yaml(config_path))
        logger.debug("Loaded config file %s", config_path)
    values.update(_from_env(environ))
    if overrides:
        values.update({k: v for k, v in overrides.items() if v is not None})

    return GenerationConfig(**values)
