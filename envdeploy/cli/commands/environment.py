"""Environment commands.

Each environment gets a command taking the subcommand and its arguments
verbatim, e.g. ``production deploy`` or ``staging restore production``.
Options the dispatcher understands (``--force``, ``--parallelize``) and
options meant for the platform CLI are passed through untouched.
"""

from typing import Annotated

import typer

from envdeploy.cli.context import get_cli_context
from envdeploy.cli.shared.console import with_error_handling
from envdeploy.infra.constants import DEFAULT_CONSTANTS
from envdeploy.runtime.config.config_loader import configure_logging

# ---------------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------------

# Help is only recognised as the first token; later `--help` flags belong
# to the subcommand and reach the platform CLI.
PASSTHROUGH_CONTEXT = {
    "allow_extra_args": True,
    "ignore_unknown_options": True,
    "help_option_names": [],
}
HELP_FLAG = "--help"

SUBCOMMANDS_HELP = """
Subcommands:

- deploy: push, then run migrations when there are pending ones
- backup: capture a database backup
- restore SOURCE [--force] [--parallelize]: restore SOURCE's latest backup
- console: open a remote application console
- tail [ARGS]: stream logs
- redis_cli: open a cache shell
- migrate: run migrations and restart

Anything else is passed to the platform CLI for this environment.
"""


def show_help_if_requested(ctx: typer.Context, first_token: str | None) -> None:
    """Print the command help and exit when the first token is --help."""
    if first_token == HELP_FLAG:
        typer.echo(ctx.get_help(), color=ctx.color)
        raise typer.Exit()


def run_environment(ctx: typer.Context | None, environment: str, args: list[str]) -> None:
    """Dispatch ``args`` for ``environment`` and exit non-zero on failure."""
    configure_logging()
    cli_ctx = get_cli_context(ctx)

    if not cli_ctx.dispatcher().run(environment, args):
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Typer Apps
# ---------------------------------------------------------------------------


def environment_app(environment: str) -> typer.Typer:
    """Create the standalone app behind one environment's executable."""
    app = typer.Typer(
        name=environment,
        help=f"Run commands against the {environment} environment.",
        add_completion=False,
    )

    @app.command(
        context_settings=PASSTHROUGH_CONTEXT,
        help=f"Run commands against the {environment} environment.\n"
        + SUBCOMMANDS_HELP,
    )
    @with_error_handling
    def main(
        ctx: typer.Context,
        args: Annotated[
            list[str] | None,
            typer.Argument(help="Subcommand and its arguments"),
        ] = None,
    ) -> None:
        args = args or []
        show_help_if_requested(ctx, args[0] if args else None)
        run_environment(ctx, environment, args)

    return app


app = typer.Typer(
    name="envdeploy",
    help="Run commands against a deployment environment.",
    add_completion=False,
    no_args_is_help=True,
)


@app.command(context_settings=PASSTHROUGH_CONTEXT, help=SUBCOMMANDS_HELP)
@with_error_handling
def run(
    ctx: typer.Context,
    environment: Annotated[
        str, typer.Argument(help="Environment (git remote) to target")
    ],
    args: Annotated[
        list[str] | None,
        typer.Argument(help="Subcommand and its arguments"),
    ] = None,
) -> None:
    args = args or []
    show_help_if_requested(ctx, environment)
    show_help_if_requested(ctx, args[0] if args else None)
    run_environment(ctx, environment, args)


production_app = environment_app(DEFAULT_CONSTANTS.PRODUCTION)
staging_app = environment_app(DEFAULT_CONSTANTS.STAGING)
development_app = environment_app(DEFAULT_CONSTANTS.DEVELOPMENT)
