"""Git-push deploys with automatic database migrations."""

from __future__ import annotations

from loguru import logger

from envdeploy.infra.constants import DEFAULT_CONSTANTS

from .migrations import MigrationChecker, compare_ref_for
from .shell_commands import GitCommands, HerokuCommands


class DeployWorkflow:
    """Push an environment and migrate it when needed.

    Steps, each gated on the previous one:

    1. Check: does the app have migrations the remote has not seen yet?
       This runs before the push, while the remote branch still points at
       the previously deployed commit.
    2. Push: production pushes the deploy branch; other environments
       force-push the current commit onto their deploy branch.
    3. Migrate: run the migrate task, then restart the app.
    """

    def __init__(
        self,
        git: GitCommands,
        heroku: HerokuCommands,
        checker: MigrationChecker,
        deploy_branch: str,
    ) -> None:
        self._git = git
        self._heroku = heroku
        self._checker = checker
        self._deploy_branch = deploy_branch

    def deploy(self, environment: str) -> bool:
        """Deploy ``environment`` and report overall success."""
        needs_migration = self._needs_migration(environment)

        if not self._push(environment):
            logger.debug(f"Push to {environment} failed; skipping migrations")
            return False

        if not needs_migration:
            logger.debug(f"No migrations to run on {environment}")
            return True

        return self.migrate(environment)

    def migrate(self, environment: str) -> bool:
        """Run migrations on ``environment`` and restart it."""
        logger.debug(f"Running migrations on {environment}")
        return self._heroku.migrate(environment) and self._heroku.restart(
            environment
        )

    def _needs_migration(self, environment: str) -> bool:
        if not self._checker.looks_like_migratable_app():
            return False
        compare_ref = compare_ref_for(environment, self._deploy_branch)
        return self._checker.has_pending_migrations(environment, compare_ref)

    def _push(self, environment: str) -> bool:
        if environment == DEFAULT_CONSTANTS.PRODUCTION:
            return self._git.push_branch(environment)
        return self._git.force_push_head(environment)
