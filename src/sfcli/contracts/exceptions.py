"""Exception hierarchy for sf-cli."""

from __future__ import annotations


class SfCliError(Exception):
    """Base exception for all sf-cli errors."""


class InvalidPathError(SfCliError):
    """Target path does not yield a usable root directory name."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


class ConfigError(SfCliError):
    """Configuration document loading or validation failure."""
