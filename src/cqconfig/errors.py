"""Exception types raised while bootstrapping the configuration."""

from __future__ import annotations

from pathlib import Path


class ConfigError(RuntimeError):
    """Base class for configuration bootstrap failures."""


class MalformedConfigError(ConfigError):
    """Raised when a configuration file exists but cannot be decoded."""

    def __init__(self, path: Path | str | None, reason: str) -> None:
        self.path = Path(path) if path is not None else None
        self.reason = reason
        where = f" {self.path}" if self.path is not None else ""
        super().__init__(f"Invalid configuration file{where}: {reason}")


class LaunchError(ConfigError):
    """Raised when the companion executable cannot be handed control."""


class CompanionNotFoundError(LaunchError):
    """Raised when the companion executable is missing on a platform that checks for it."""

    def __init__(self, executable: Path | str) -> None:
        self.executable = str(executable)
        super().__init__(f"Companion executable does not exist: {self.executable}")


__all__ = [
    "CompanionNotFoundError",
    "ConfigError",
    "LaunchError",
    "MalformedConfigError",
]
