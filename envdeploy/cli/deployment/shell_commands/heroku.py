"""Platform CLI command abstractions.

Every command targets one environment by appending the remote flag,
so the platform CLI resolves the app from the git remote of that name.
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from typing import TYPE_CHECKING

from .types import CommandResult

if TYPE_CHECKING:
    from envdeploy.runtime.config.config_data import ConfigData

    from .runner import CommandRunner


class HerokuCommands:
    """Platform CLI shell commands.

    Provides operations for:
    - Passing arbitrary commands through to the CLI
    - Database backup capture, backup URLs and restores
    - One-off dynos (console, migrations), restarts and log tailing
    - Reading app info and config vars
    """

    def __init__(self, runner: CommandRunner, config: ConfigData) -> None:
        """Initialize platform commands.

        Args:
            runner: Command runner for executing shell commands
            config: Configuration naming the CLI and app conventions
        """
        self._runner = runner
        self._cli = config.platform.cli
        self._remote_flag = config.platform.remote_flag
        self._console_command = shlex.split(config.app.console_command)
        self._migrate_task = shlex.split(config.app.migrate_task)

    def command(self, args: Sequence[str], environment: str) -> list[str]:
        """Build a CLI invocation targeting ``environment``.

        Example:
            >>> heroku.command(["logs"], "staging")
            ['heroku', 'logs', '--remote', 'staging']
        """
        return [self._cli, *args, self._remote_flag, environment]

    def passthrough(self, args: Sequence[str], environment: str) -> bool:
        """Hand the terminal over to the CLI running ``args``."""
        return self._runner.replace(self.command(args, environment))

    def capture_backup(self, environment: str) -> bool:
        return self._runner.spawn(
            self.command(["pg:backups", "capture"], environment)
        )

    def console(self, environment: str) -> bool:
        return self._runner.spawn(
            self.command(["run", *self._console_command], environment)
        )

    def tail(self, environment: str, args: Sequence[str] = ()) -> bool:
        return self._runner.spawn(
            self.command(["logs", "--tail", *args], environment)
        )

    def migrate(self, environment: str) -> bool:
        """Run the migrate task on a one-off dyno."""
        return self._runner.spawn(
            self.command(["run", *self._migrate_task], environment)
        )

    def restart(self, environment: str) -> bool:
        return self._runner.spawn(self.command(["restart"], environment))

    def info(self, environment: str) -> CommandResult:
        """Capture `info` output describing the app behind ``environment``."""
        return self._runner.capture(self.command(["info"], environment))

    def config_get(self, variable: str, environment: str) -> str:
        """Read a config var, returning an empty string when unset."""
        result = self._runner.capture(
            self.command(["config:get", variable], environment)
        )
        return result.stdout.strip() if result.success else ""

    def backup_url(self, environment: str) -> str:
        """Get a download URL for the latest backup of ``environment``."""
        result = self._runner.capture(self.command(["pg:backups:url"], environment))
        return result.stdout.strip() if result.success else ""

    def restore_backup(
        self,
        backup_url: str,
        database: str,
        environment: str,
        additional_args: Sequence[str] = (),
    ) -> bool:
        """Restore a backup URL into ``environment``'s database."""
        return self._runner.spawn(
            [
                *self.command(["pg:backups:restore", backup_url, database], environment),
                *additional_args,
            ]
        )
