"""Make sure the target log file exists before anything is written."""

import logging
import os
from enum import Enum

from finlog.errors import FileProvisionError

logger = logging.getLogger(__name__)


class ProvisionOutcome(Enum):
    EXISTS = "exists"
    CREATED = "created"


def _missing_dirs(dir_path: str) -> list[str]:
    """Directories makedirs would create for *dir_path*, deepest first."""
    missing = []
    current = os.path.abspath(dir_path) if dir_path else ""
    while current and not os.path.exists(current):
        missing.append(current)
        parent = os.path.dirname(current)
        if parent == current:
            break
        current = parent
    return missing


def _remove_dirs(dirs: list[str]) -> None:
    for d in dirs:
        if not os.path.isdir(d):
            continue
        try:
            os.rmdir(d)
        except OSError:
            logger.warning("Could not remove directory %s", d)
            return


def provision(path: str, force: bool = False) -> ProvisionOutcome:
    """Create *path* (and missing parent directories) unless it already exists.

    With *force* an existing file is announced as overwritten, but its
    contents are left in place; the writer always appends.
    Raises FileProvisionError if the file cannot be created.
    """
    if os.path.isfile(path):
        logger.info("Log file %s already exists", path)
        if force:
            logger.warning("Force set: %s will be overwritten", path)
        return ProvisionOutcome.EXISTS

    if os.path.exists(path):
        raise FileProvisionError(path, "path exists and is not a regular file")

    dir_path = os.path.dirname(path)
    created = _missing_dirs(dir_path)
    try:
        if dir_path:
            os.makedirs(dir_path, exist_ok=True)
        with open(path, "a", encoding="utf-8"):
            pass
    except OSError as e:
        _remove_dirs(created)
        raise FileProvisionError(path, e.strerror or str(e)) from e

    if not os.path.isfile(path):
        raise FileProvisionError(path, "file missing after creation")

    logger.info("Created log file %s", path)
    return ProvisionOutcome.CREATED
