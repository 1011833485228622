"""CLI context and dependency container."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import click
import typer

from envdeploy.cli.deployment import CommandDispatcher, EnvironmentCommandError
from envdeploy.cli.deployment.shell_commands import ShellCommands
from envdeploy.cli.shared.console import CLIConsole, console
from envdeploy.infra.constants import EnvironmentPaths
from envdeploy.runtime.config.config_data import ConfigData
from envdeploy.runtime.config.config_loader import load_config
from envdeploy.utils.paths import get_project_root


@dataclass(frozen=True)
class CLIContext:
    """Runtime dependencies for CLI commands."""

    console: CLIConsole
    project_root: Path
    config: ConfigData
    commands: ShellCommands
    paths: EnvironmentPaths

    def dispatcher(self) -> CommandDispatcher:
        """Build a dispatcher wired to this context."""
        return CommandDispatcher(self.commands, self.config, self.console, self.paths)


def build_cli_context() -> CLIContext:
    """Build a fresh CLIContext.

    Raises:
        EnvironmentCommandError: If envdeploy.yaml is invalid
    """
    project_root = get_project_root()
    try:
        config = load_config(project_root / "envdeploy.yaml")
    except ValueError as e:
        raise EnvironmentCommandError("Invalid configuration", details=str(e)) from e

    return CLIContext(
        console=console,
        project_root=project_root,
        config=config,
        commands=ShellCommands(project_root, config),
        paths=EnvironmentPaths(project_root, config),
    )


def get_cli_context(ctx: typer.Context | None = None) -> CLIContext:
    """Return the CLIContext from Typer, falling back to a new instance."""
    context = ctx or click.get_current_context(silent=True)
    if context and isinstance(context.obj, CLIContext):
        return context.obj
    return build_cli_context()
