"""Local PostgreSQL restore commands.

Used when a remote backup is loaded into the development database.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .runner import CommandRunner


class PostgresCommands:
    """Backup download and pg_restore commands."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def download(self, url: str, destination: Path) -> bool:
        """Download a backup file with curl."""
        return self._runner.spawn(["curl", "-o", str(destination), url])

    def restore(self, backup_file: Path, database: str, jobs: int | None = None) -> bool:
        """Restore a custom-format dump into a local database.

        Args:
            backup_file: Path to the downloaded dump
            database: Local database name
            jobs: Number of parallel restore jobs, if any

        Returns:
            True if pg_restore succeeded
        """
        cmd = [
            "pg_restore",
            str(backup_file),
            "--verbose",
            "--clean",
            "--no-acl",
            "--no-owner",
            "-d",
            database,
        ]
        if jobs:
            cmd.extend(["-j", str(jobs)])
        return self._runner.spawn(cmd)
