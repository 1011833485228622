"""Shell command abstractions for environment operations.

This package provides a clean interface for the external commands issued
by the environment workflows. It is organized into modules per tool:

- git: pushes, fetches and diffs against environment remotes
- heroku: the remote-application platform CLI
- redis: the interactive cache client
- postgres: local backup download and pg_restore

Design Principles:
- Commands are token lists end to end; nothing is re-quoted
- Every module executes through one CommandRunner, so tests swap one object
- Separation of Concerns: commands are decoupled from workflow logic

Usage:
    from envdeploy.cli.deployment.shell_commands import ShellCommands

    commands = ShellCommands(project_root=Path("."), config=ConfigData())
    commands.heroku.capture_backup("staging")
"""

from pathlib import Path

from envdeploy.runtime.config.config_data import ConfigData

from .git import GitCommands
from .heroku import HerokuCommands
from .postgres import PostgresCommands
from .redis import RedisCommands, parse_redis_url
from .runner import CommandRunner
from .types import CommandResult, RedisConnection


class ShellCommands:
    """Unified interface for all shell command operations.

    Attributes:
        runner: The process runner every module executes through
        git: Git commands
        heroku: Platform CLI commands
        redis: Cache client commands
        postgres: Local PostgreSQL restore commands

    Example:
        >>> commands = ShellCommands(Path("."), ConfigData())
        >>> if commands.git.push_branch("production"):
        ...     commands.heroku.restart("production")
    """

    def __init__(
        self,
        project_root: Path,
        config: ConfigData,
        runner: CommandRunner | None = None,
    ) -> None:
        """Initialize the shell commands executor.

        Args:
            project_root: Path to the application checkout.
                         Commands will be executed from this directory.
            config: Loaded configuration
            runner: Runner to execute through (a fake in tests)
        """
        self._project_root = Path(project_root)
        self.runner = runner or CommandRunner(self._project_root)

        self.git = GitCommands(self.runner, config)
        self.heroku = HerokuCommands(self.runner, config)
        self.redis = RedisCommands(self.runner, config)
        self.postgres = PostgresCommands(self.runner)

    @property
    def project_root(self) -> Path:
        """Get the project root path."""
        return self._project_root


__all__ = [
    "ShellCommands",
    "CommandResult",
    "RedisConnection",
    "parse_redis_url",
    # Specialized command classes for direct usage
    "GitCommands",
    "HerokuCommands",
    "RedisCommands",
    "PostgresCommands",
    "CommandRunner",
]
