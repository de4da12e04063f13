"""Exception taxonomy for the generator."""


class GeneratorError(Exception):
    """Base class for all generator failures."""


class ConfigError(GeneratorError, ValueError):
    """Raised when a configuration value is missing, malformed or out of range."""


class FileProvisionError(GeneratorError):
    """The target log file could not be created."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"Unable to create log file {path}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class FlushError(GeneratorError):
    """The final bulk append to the log file failed."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"Failed to append entries to {path}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
