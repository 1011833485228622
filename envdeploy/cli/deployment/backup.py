"""Restoring platform database backups into other environments.

The data transfer itself is performed by the platform (remote targets) or
by curl and pg_restore (the development database); this module only
issues those commands.
"""

from __future__ import annotations

import os
import shlex

import yaml
from loguru import logger

from envdeploy.cli.shared.console import CLIConsole
from envdeploy.infra.constants import DEFAULT_CONSTANTS, EnvironmentPaths

from .errors import EnvironmentCommandError
from .shell_commands import ShellCommands


class Backup:
    """Restore the latest backup of one environment into another.

    Attributes:
        from_: Environment the backup is taken from
        to: Environment the backup is restored into
        additional_args: Extra restore arguments ("--confirm app", "--force" or "")
        parallelize: Restore into development with one job per CPU
    """

    def __init__(
        self,
        from_: str,
        to: str,
        additional_args: str = "",
        parallelize: bool = False,
        *,
        commands: ShellCommands,
        paths: EnvironmentPaths,
        console: CLIConsole,
    ) -> None:
        self.from_ = from_
        self.to = to
        self.additional_args = additional_args
        self.parallelize = parallelize
        self._commands = commands
        self._paths = paths
        self._console = console

    def restore(self) -> bool:
        """Restore the backup, returning whether every step succeeded."""
        backup_url = self._commands.heroku.backup_url(self.from_)
        if not backup_url:
            self._console.error(f"No backup available for {self.from_}")
            return False

        if self.to == DEFAULT_CONSTANTS.DEVELOPMENT:
            return self._restore_to_development(backup_url)
        return self._restore_to_remote(backup_url)

    def _restore_to_remote(self, backup_url: str) -> bool:
        logger.debug(f"Restoring {self.from_} backup into {self.to}")
        return self._commands.heroku.restore_backup(
            backup_url,
            DEFAULT_CONSTANTS.PLATFORM_DATABASE,
            self.to,
            shlex.split(self.additional_args),
        )

    def _restore_to_development(self, backup_url: str) -> bool:
        download = self._paths.backup_download
        download.parent.mkdir(parents=True, exist_ok=True)

        self._console.info(f"Downloading {self.from_} backup to {download}")
        if not self._commands.postgres.download(backup_url, download):
            return False

        database = self.development_database()
        jobs = os.cpu_count() if self.parallelize else None
        self._console.info(f"Restoring into local database {database}")
        return self._commands.postgres.restore(download, database, jobs=jobs)

    def development_database(self) -> str:
        """Read the development database name from the database config.

        Raises:
            EnvironmentCommandError: If the file or the name is missing
        """
        config_file = self._paths.database_config
        try:
            with open(config_file) as f:
                loaded = yaml.safe_load(f) or {}
        except FileNotFoundError as e:
            raise EnvironmentCommandError(
                f"Database configuration not found: {config_file}"
            ) from e
        except yaml.YAMLError as e:
            raise EnvironmentCommandError(
                f"Could not parse {config_file}", details=str(e)
            ) from e

        database = (loaded.get(DEFAULT_CONSTANTS.DEVELOPMENT) or {}).get("database")
        if not database:
            raise EnvironmentCommandError(
                f"No development database configured in {config_file}"
            )
        return str(database)
