"""Configuration and precondition exceptions: paths, settings, output location."""

from pathlib import Path
from typing import Any

from .base import CohesionPeekError


class ConfigurationError(CohesionPeekError):
    """Base class for configuration-related errors."""

    pass


class InvalidPathError(ConfigurationError):
    """Raised when a provided path is invalid."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid path: {path}", details={"path": path, "reason": reason})
        self.path = path
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": value, "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class PreconditionError(ConfigurationError):
    """Raised when the output location already exists before a run."""

    def __init__(self, path: Path):
        super().__init__(
            f"Directory/file already exists: {path}",
            details={"path": path},
        )
        self.path = path
