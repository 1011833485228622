"""Command runner for executing external processes.

This module provides the three execution modes every workflow builds on:

- replace: hand the terminal over to another program (``os.execvp``)
- spawn: run a program attached to our terminal and report success
- capture: run a program with its output collected for parsing
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from envdeploy.cli.deployment.errors import CommandNotFoundError

from .types import CommandResult


class CommandRunner:
    """Low-level command executor with consistent result handling.

    All tool-specific command modules (git, heroku, redis) use this runner
    for actual process execution. Tests substitute a recording fake with
    the same three methods.
    """

    def __init__(self, project_root: Path) -> None:
        """Initialize the command runner.

        Args:
            project_root: Path to the application checkout.
                         Commands will be executed from this directory.
        """
        self.project_root = project_root

    def replace(self, cmd: Sequence[str]) -> bool:
        """Replace the current process image with ``cmd``.

        Control only comes back if the executable could not be started,
        in which case CommandNotFoundError is raised.

        Args:
            cmd: Command and arguments as a sequence
        """
        argv = list(cmd)
        logger.debug(f"exec: {argv}")
        try:
            os.execvp(argv[0], argv)
        except FileNotFoundError as e:
            raise CommandNotFoundError(argv[0]) from e
        return False  # pragma: no cover

    def spawn(self, cmd: Sequence[str]) -> bool:
        """Run ``cmd`` with inherited stdio and return whether it succeeded.

        Args:
            cmd: Command and arguments as a sequence

        Returns:
            True if the process exited with status 0
        """
        argv = list(cmd)
        logger.debug(f"spawn: {argv}")
        try:
            result = subprocess.run(argv, cwd=self.project_root, check=False)
        except FileNotFoundError as e:
            raise CommandNotFoundError(argv[0]) from e
        logger.debug(f"spawn exited with {result.returncode}: {argv[0]}")
        return result.returncode == 0

    def capture(self, cmd: Sequence[str]) -> CommandResult:
        """Run ``cmd`` with stdout/stderr captured.

        The caller's own streams are left untouched.

        Args:
            cmd: Command and arguments as a sequence

        Returns:
            CommandResult with success status, output, and return code
        """
        argv = list(cmd)
        logger.debug(f"capture: {argv}")
        try:
            result = subprocess.run(
                argv,
                cwd=self.project_root,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise CommandNotFoundError(argv[0]) from e
        return CommandResult(
            success=result.returncode == 0,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
            returncode=result.returncode,
        )
