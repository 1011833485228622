"""Errors raised by environment workflows."""

from __future__ import annotations


class EnvironmentCommandError(Exception):
    """Raised when an environment command cannot be carried out."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(message)


class RestoreBlockedError(EnvironmentCommandError):
    """Raised when a restore into production was requested without --force."""


class RemoteResolutionError(EnvironmentCommandError):
    """Raised when the platform app behind a remote cannot be determined."""


class CommandNotFoundError(EnvironmentCommandError):
    """Raised when an external executable is not installed."""

    def __init__(self, executable: str):
        super().__init__(
            f"Command not found: {executable}",
            details=f"Make sure `{executable}` is installed and on your PATH.",
        )
        self.executable = executable
