"""Tests for the deploy workflow."""

import pytest

from envdeploy.cli.deployment.deploy import DeployWorkflow
from envdeploy.cli.deployment.migrations import MigrationChecker
from envdeploy.cli.deployment.shell_commands import ShellCommands
from tests.fakes import FakeProjectShape, RecordingRunner

FETCH_PRODUCTION = ["git", "fetch", "production"]
DIFF_PRODUCTION = [
    "git",
    "diff",
    "--quiet",
    "production/master..master",
    "--",
    "db/migrate",
]
PUSH_PRODUCTION = ["git", "push", "production", "master"]
MIGRATE_PRODUCTION = [
    "heroku",
    "run",
    "rake",
    "db:migrate",
    "--remote",
    "production",
]
RESTART_PRODUCTION = ["heroku", "restart", "--remote", "production"]


def build_workflow(
    commands: ShellCommands, shape: FakeProjectShape | None = None
) -> DeployWorkflow:
    checker = MigrationChecker(shape or FakeProjectShape(), commands.git, "db/migrate")
    return DeployWorkflow(commands.git, commands.heroku, checker, "master")


class TestDeployToProduction:
    """Deploys to production push master and migrate when needed."""

    def test_checks_pushes_then_migrates(
        self, commands: ShellCommands, runner: RecordingRunner
    ) -> None:
        """Pending migrations are detected before the push and run after it."""
        runner.fail(*DIFF_PRODUCTION)

        result = build_workflow(commands).deploy("production")

        assert result is True
        assert runner.commands == [
            FETCH_PRODUCTION,
            DIFF_PRODUCTION,
            PUSH_PRODUCTION,
            MIGRATE_PRODUCTION,
            RESTART_PRODUCTION,
        ]

    def test_skips_migrations_when_none_pending(
        self, commands: ShellCommands, runner: RecordingRunner
    ) -> None:
        result = build_workflow(commands).deploy("production")

        assert result is True
        assert MIGRATE_PRODUCTION not in runner.commands
        assert runner.commands[-1] == PUSH_PRODUCTION

    def test_failed_push_returns_false_and_skips_migrations(
        self, commands: ShellCommands, runner: RecordingRunner
    ) -> None:
        runner.fail(*DIFF_PRODUCTION)
        runner.fail(*PUSH_PRODUCTION)

        result = build_workflow(commands).deploy("production")

        assert result is False
        assert MIGRATE_PRODUCTION not in runner.commands
        assert RESTART_PRODUCTION not in runner.commands

    def test_failed_migration_returns_false_without_restart(
        self, commands: ShellCommands, runner: RecordingRunner
    ) -> None:
        runner.fail(*DIFF_PRODUCTION)
        runner.fail(*MIGRATE_PRODUCTION)

        result = build_workflow(commands).deploy("production")

        assert result is False
        assert RESTART_PRODUCTION not in runner.commands

    def test_failed_restart_returns_false(
        self, commands: ShellCommands, runner: RecordingRunner
    ) -> None:
        runner.fail(*DIFF_PRODUCTION)
        runner.fail(*RESTART_PRODUCTION)

        assert build_workflow(commands).deploy("production") is False

    def test_failed_fetch_counts_as_pending(
        self, commands: ShellCommands, runner: RecordingRunner
    ) -> None:
        runner.fail(*FETCH_PRODUCTION)

        result = build_workflow(commands).deploy("production")

        assert result is True
        assert DIFF_PRODUCTION not in runner.commands
        assert MIGRATE_PRODUCTION in runner.commands


class TestDeployToOtherEnvironments:
    """Non-production deploys force-push HEAD and compare against HEAD."""

    def test_force_pushes_head_to_master(
        self, commands: ShellCommands, runner: RecordingRunner
    ) -> None:
        build_workflow(commands).deploy("staging")

        assert ["git", "push", "staging", "HEAD:master", "--force"] in runner.commands

    def test_compares_migrations_against_head(
        self, commands: ShellCommands, runner: RecordingRunner
    ) -> None:
        build_workflow(commands).deploy("staging")

        assert runner.commands[:2] == [
            ["git", "fetch", "staging"],
            ["git", "diff", "--quiet", "staging/master..HEAD", "--", "db/migrate"],
        ]

    @pytest.mark.parametrize(
        ("manifest", "migrations"),
        [(False, False), (True, False), (False, True)],
    )
    def test_non_migratable_app_only_pushes(
        self,
        commands: ShellCommands,
        runner: RecordingRunner,
        manifest: bool,
        migrations: bool,
    ) -> None:
        """Without a manifest and migrations directory only the push runs."""
        shape = FakeProjectShape(manifest=manifest, migrations=migrations)

        result = build_workflow(commands, shape).deploy("staging")

        assert result is True
        assert runner.commands == [
            ["git", "push", "staging", "HEAD:master", "--force"]
        ]


def test_migrate_runs_task_then_restart(
    commands: ShellCommands, runner: RecordingRunner
) -> None:
    result = build_workflow(commands).migrate("production")

    assert result is True
    assert runner.commands == [MIGRATE_PRODUCTION, RESTART_PRODUCTION]
