"""Safety checks for restoring backups between environments."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from envdeploy.cli.shared.console import CLIConsole
from envdeploy.infra.constants import DEFAULT_CONSTANTS

from .errors import RestoreBlockedError
from .remote import RemoteResolver

PRODUCTION_RESTORE_BLOCKED = (
    "envdeploy does not support restoring backups into your production "
    "environment. Use `--force` to override."
)


@dataclass(frozen=True)
class TransferRequest:
    """A backup transfer approved by RestoreGuard.

    Attributes:
        from_: Environment the backup is taken from
        to: Environment the backup is restored into
        additional_args: "", a "--confirm {app}" token, or "--force"
    """

    from_: str
    to: str
    additional_args: str


class RestoreGuard:
    """Enforce that production is never restored into without --force."""

    def __init__(self, resolver: RemoteResolver, console: CLIConsole) -> None:
        self._resolver = resolver
        self._console = console

    def authorize(self, from_: str, to: str, *, force: bool = False) -> TransferRequest:
        """Approve a transfer and compute the arguments it needs.

        Args:
            from_: Source environment
            to: Target environment
            force: Whether the caller explicitly passed --force

        Returns:
            TransferRequest for the backup collaborator

        Raises:
            RestoreBlockedError: If ``to`` is production and ``force`` is False
            RemoteResolutionError: If the confirmation token cannot be built
        """
        constants = DEFAULT_CONSTANTS

        if to == constants.PRODUCTION and not force:
            logger.debug(f"Refusing to restore {from_} into production")
            self._console.print(PRODUCTION_RESTORE_BLOCKED, soft_wrap=True)
            raise RestoreBlockedError(PRODUCTION_RESTORE_BLOCKED)

        if to == constants.DEVELOPMENT:
            additional_args = ""
        elif to == constants.PRODUCTION:
            additional_args = constants.FORCE_FLAG
        else:
            app_name = self._resolver.resolve(to)
            additional_args = f"{constants.CONFIRM_FLAG} {app_name}"

        return TransferRequest(from_=from_, to=to, additional_args=additional_args)
