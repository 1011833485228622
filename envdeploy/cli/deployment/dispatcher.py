"""Routing of environment subcommands to their workflows.

A fixed set of subcommands gets dedicated handling; any other argument
list is handed to the platform CLI for the environment.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from functools import partial

from loguru import logger

from envdeploy.cli.shared.console import CLIConsole
from envdeploy.infra.constants import DEFAULT_CONSTANTS, EnvironmentPaths
from envdeploy.runtime.config.config_data import ConfigData

from .backup import Backup
from .deploy import DeployWorkflow
from .errors import RestoreBlockedError
from .migrations import FilesystemProjectShape, MigrationChecker, ProjectShape
from .remote import RemoteResolver
from .restore import RestoreGuard
from .shell_commands import ShellCommands, parse_redis_url


class Subcommand(str, Enum):
    """Subcommands with dedicated handling."""

    BACKUP = "backup"
    RESTORE = "restore"
    RESTORE_FROM = "restore-from"
    CONSOLE = "console"
    TAIL = "tail"
    REDIS_CLI = "redis_cli"
    DEPLOY = "deploy"
    MIGRATE = "migrate"


@dataclass(frozen=True)
class Passthrough:
    """Arguments forwarded verbatim to the platform CLI."""

    tokens: tuple[str, ...]


def parse_subcommand(args: Sequence[str]) -> Subcommand | Passthrough:
    """Classify an argument list by its first token."""
    if args:
        try:
            return Subcommand(args[0])
        except ValueError:
            pass
    return Passthrough(tuple(args))


BackupFactory = Callable[..., Backup]


class CommandDispatcher:
    """Entry point translating (environment, args) into external commands.

    Example:
        >>> dispatcher = CommandDispatcher(commands, config, console, paths)
        >>> dispatcher.run("staging", ["restore", "production"])
        True
    """

    def __init__(
        self,
        commands: ShellCommands,
        config: ConfigData,
        console: CLIConsole,
        paths: EnvironmentPaths,
        *,
        shape: ProjectShape | None = None,
        backup_factory: BackupFactory | None = None,
    ) -> None:
        self._commands = commands
        self._config = config
        self._console = console

        self._resolver = RemoteResolver(commands.heroku)
        self._guard = RestoreGuard(self._resolver, console)
        checker = MigrationChecker(
            shape or FilesystemProjectShape(paths),
            commands.git,
            config.app.migrations_path,
        )
        self._deploy = DeployWorkflow(
            commands.git, commands.heroku, checker, config.app.deploy_branch
        )
        self._backup_factory = backup_factory or partial(
            Backup, commands=commands, paths=paths, console=console
        )

        self._handlers: dict[Subcommand, Callable[[str, list[str]], bool]] = {
            Subcommand.BACKUP: self._backup,
            Subcommand.RESTORE: self._restore,
            Subcommand.RESTORE_FROM: self._restore,
            Subcommand.CONSOLE: self._console_session,
            Subcommand.TAIL: self._tail,
            Subcommand.REDIS_CLI: self._redis_cli,
            Subcommand.DEPLOY: self._deploy_environment,
            Subcommand.MIGRATE: self._migrate,
        }

    def run(self, environment: str, args: Sequence[str]) -> bool:
        """Run ``args`` against ``environment`` and report success.

        Raises:
            RemoteResolutionError: If a restore target's app cannot be found
        """
        command = parse_subcommand(args)
        if isinstance(command, Passthrough):
            logger.debug(f"Passing {list(command.tokens)} through for {environment}")
            return self._commands.heroku.passthrough(command.tokens, environment)

        logger.debug(f"Running {command.value} on {environment}")
        return self._handlers[command](environment, list(args[1:]))

    def _backup(self, environment: str, rest: list[str]) -> bool:
        return self._commands.heroku.capture_backup(environment)

    def _console_session(self, environment: str, rest: list[str]) -> bool:
        return self._commands.heroku.console(environment)

    def _tail(self, environment: str, rest: list[str]) -> bool:
        return self._commands.heroku.tail(environment, rest)

    def _deploy_environment(self, environment: str, rest: list[str]) -> bool:
        return self._deploy.deploy(environment)

    def _migrate(self, environment: str, rest: list[str]) -> bool:
        return self._deploy.migrate(environment)

    def _redis_cli(self, environment: str, rest: list[str]) -> bool:
        url = self._commands.heroku.config_get(
            self._config.cache.url_variable, environment
        )
        if not url:
            self._console.error(
                f"{self._config.cache.url_variable} is not set on {environment}"
            )
            return False

        try:
            connection = parse_redis_url(url)
        except ValueError as e:
            self._console.error(str(e))
            return False

        return self._commands.redis.open_shell(connection)

    def _restore(self, environment: str, rest: list[str]) -> bool:
        constants = DEFAULT_CONSTANTS
        sources = [token for token in rest if not token.startswith("--")]
        options = [token for token in rest if token.startswith("--")]
        if not sources:
            self._console.error(
                f"Usage: {environment} restore <source-environment> [--force]"
            )
            return False

        from_ = sources[0]
        try:
            request = self._guard.authorize(
                from_, environment, force=constants.FORCE_FLAG in options
            )
        except RestoreBlockedError:
            return False

        backup = self._backup_factory(
            from_=request.from_,
            to=request.to,
            additional_args=request.additional_args,
            parallelize=constants.PARALLELIZE_FLAG in options,
        )
        backup.restore()
        return True
