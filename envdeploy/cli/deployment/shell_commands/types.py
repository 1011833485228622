"""Data types for shell command results.

This module contains the dataclasses shared by the runner and the
tool-specific command modules.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "CommandResult",
    "RedisConnection",
]


@dataclass
class CommandResult:
    """Result of a captured command execution."""

    success: bool
    stdout: str = ""
    stderr: str = ""
    returncode: int = 0


@dataclass(frozen=True)
class RedisConnection:
    """Connection details parsed from a cache connection URL.

    Attributes:
        host: Cache server hostname
        port: Cache server port, kept as text since it is only passed on
        password: Password from the URL userinfo, if any
    """

    host: str
    port: str
    password: str | None
