"""Environment workflows for a git-push deployment platform.

This package turns environment subcommands into external commands:
- CommandDispatcher: routes a subcommand to its workflow or passes it through
- DeployWorkflow: push, then migrate when migrations are pending
- RestoreGuard: refuses unforced restores into production
- RemoteResolver: finds the app behind an environment's git remote
- MigrationChecker: detects migratable apps and pending migrations
- Backup: restores the latest backup of one environment into another

The package is organized into subpackages for modularity:
- shell_commands: Abstractions for external command execution
"""

from .backup import Backup
from .deploy import DeployWorkflow
from .dispatcher import CommandDispatcher, Passthrough, Subcommand, parse_subcommand
from .errors import (
    CommandNotFoundError,
    EnvironmentCommandError,
    RemoteResolutionError,
    RestoreBlockedError,
)
from .migrations import FilesystemProjectShape, MigrationChecker, ProjectShape
from .remote import RemoteResolver
from .restore import RestoreGuard, TransferRequest

__all__ = [
    "Backup",
    "CommandDispatcher",
    "CommandNotFoundError",
    "DeployWorkflow",
    "EnvironmentCommandError",
    "FilesystemProjectShape",
    "MigrationChecker",
    "Passthrough",
    "ProjectShape",
    "RemoteResolutionError",
    "RemoteResolver",
    "RestoreBlockedError",
    "RestoreGuard",
    "Subcommand",
    "TransferRequest",
    "parse_subcommand",
]
