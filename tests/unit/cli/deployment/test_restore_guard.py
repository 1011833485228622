"""Tests for the production restore guard and remote resolution."""

from unittest.mock import Mock

import pytest
from loguru import logger

from envdeploy.cli.deployment.errors import RemoteResolutionError, RestoreBlockedError
from envdeploy.cli.deployment.remote import RemoteResolver, parse_app_name
from envdeploy.cli.deployment.restore import (
    PRODUCTION_RESTORE_BLOCKED,
    RestoreGuard,
    TransferRequest,
)
from envdeploy.cli.shared.console import CLIConsole
from envdeploy.runtime.config.config_loader import (
    LOG_LEVEL_VARIABLE,
    configure_logging,
)


@pytest.fixture
def resolver() -> Mock:
    resolver = Mock(spec=RemoteResolver)
    resolver.resolve.side_effect = lambda environment: f"myapp-{environment}"
    return resolver


@pytest.fixture
def guard(resolver: Mock, console: Mock) -> RestoreGuard:
    return RestoreGuard(resolver, console)


class TestRestoreGuard:
    @pytest.mark.parametrize("source", ["staging", "development", "qa"])
    def test_blocks_unforced_restore_into_production(
        self, guard: RestoreGuard, console: Mock, resolver: Mock, source: str
    ) -> None:
        with pytest.raises(RestoreBlockedError):
            guard.authorize(source, "production")

        console.print.assert_called_once_with(
            PRODUCTION_RESTORE_BLOCKED, soft_wrap=True
        )
        resolver.resolve.assert_not_called()

    def test_blocked_message_is_the_only_output(
        self,
        resolver: Mock,
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """The refusal is one unwrapped stdout line with nothing on stderr."""
        monkeypatch.delenv(LOG_LEVEL_VARIABLE, raising=False)
        guard = RestoreGuard(resolver, CLIConsole())
        configure_logging()
        try:
            with pytest.raises(RestoreBlockedError):
                guard.authorize("staging", "production")
        finally:
            logger.remove()

        captured = capsys.readouterr()
        assert captured.out == PRODUCTION_RESTORE_BLOCKED + "\n"
        assert captured.err == ""

    def test_forced_restore_into_production_uses_force_flag(
        self, guard: RestoreGuard, resolver: Mock
    ) -> None:
        request = guard.authorize("staging", "production", force=True)

        assert request == TransferRequest("staging", "production", "--force")
        resolver.resolve.assert_not_called()

    @pytest.mark.parametrize("force", [False, True])
    @pytest.mark.parametrize("source", ["production", "staging"])
    def test_development_target_needs_no_arguments(
        self, guard: RestoreGuard, source: str, force: bool
    ) -> None:
        request = guard.authorize(source, "development", force=force)

        assert request.additional_args == ""

    @pytest.mark.parametrize("target", ["staging", "qa", "demo"])
    def test_other_targets_get_confirmation_token(
        self, guard: RestoreGuard, resolver: Mock, target: str
    ) -> None:
        request = guard.authorize("production", target)

        assert request.additional_args == f"--confirm myapp-{target}"
        resolver.resolve.assert_called_once_with(target)


class TestRemoteResolver:
    def test_reads_app_name_from_info_marker(self) -> None:
        heroku = Mock()
        heroku.info.return_value = Mock(
            success=True, stdout="=== myapp-staging\nAddOns: none\n", stderr=""
        )

        assert RemoteResolver(heroku).resolve("staging") == "myapp-staging"
        heroku.info.assert_called_once_with("staging")

    def test_failed_info_raises(self) -> None:
        heroku = Mock()
        heroku.info.return_value = Mock(
            success=False, stdout="", stderr="Couldn't find that app."
        )

        with pytest.raises(RemoteResolutionError) as excinfo:
            RemoteResolver(heroku).resolve("staging")

        assert excinfo.value.details == "Couldn't find that app."

    def test_missing_marker_raises(self) -> None:
        heroku = Mock()
        heroku.info.return_value = Mock(success=True, stdout="AddOns: none", stderr="")

        with pytest.raises(RemoteResolutionError):
            RemoteResolver(heroku).resolve("staging")


@pytest.mark.parametrize(
    ("output", "expected"),
    [
        ("=== myapp-staging\nAddOns: none", "myapp-staging"),
        ("=== myapp\n", "myapp"),
        ("warning: update available\n=== myapp-qa  \n", "myapp-qa"),
        ("===\n", None),
        ("", None),
    ],
)
def test_parse_app_name(output: str, expected: str | None) -> None:
    assert parse_app_name(output) == expected
