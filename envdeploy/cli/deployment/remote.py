"""Resolution of environment names to platform app names."""

from __future__ import annotations

from loguru import logger

from envdeploy.infra.constants import DEFAULT_CONSTANTS

from .errors import RemoteResolutionError
from .shell_commands import HerokuCommands


class RemoteResolver:
    """Find the app a git remote points at.

    The platform CLI reports the app behind a remote in its `info` output,
    whose first marker line reads ``=== {base}-{environment}`` (or
    ``=== {base}`` for apps declared without a suffix). The resolved name
    feeds the ``--confirm`` token of destructive operations, so an
    unreadable response is an error, never a guess.
    """

    def __init__(self, heroku: HerokuCommands) -> None:
        self._heroku = heroku

    def resolve(self, environment: str) -> str:
        """Return the app name behind the ``environment`` remote.

        Raises:
            RemoteResolutionError: If the app info could not be read or parsed
        """
        result = self._heroku.info(environment)
        if not result.success:
            raise RemoteResolutionError(
                f"Could not read app info for remote '{environment}'",
                details=result.stderr.strip() or None,
            )

        app_name = parse_app_name(result.stdout)
        if not app_name:
            raise RemoteResolutionError(
                f"Could not determine the app name for remote '{environment}'",
                details=result.stdout.strip() or None,
            )

        logger.debug(f"Remote {environment} resolves to app {app_name}")
        return app_name


def parse_app_name(info_output: str) -> str | None:
    """Extract the app name from the first marker line of `info` output."""
    marker = DEFAULT_CONSTANTS.APP_INFO_MARKER
    for line in info_output.splitlines():
        if line.startswith(marker):
            name = line[len(marker) :].strip()
            return name or None
    return None
