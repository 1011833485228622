"""Pending database migration detection."""

from __future__ import annotations

from typing import Protocol

from loguru import logger

from envdeploy.infra.constants import DEFAULT_CONSTANTS, EnvironmentPaths

from .shell_commands import GitCommands


class ProjectShape(Protocol):
    """Filesystem facts about the application checkout."""

    def has_manifest(self) -> bool: ...

    def has_migrations_dir(self) -> bool: ...


class FilesystemProjectShape:
    """ProjectShape backed by existence checks in the checkout."""

    def __init__(self, paths: EnvironmentPaths) -> None:
        self._paths = paths

    def has_manifest(self) -> bool:
        return self._paths.manifest_file.is_file()

    def has_migrations_dir(self) -> bool:
        return self._paths.migrations_root.is_dir()


def compare_ref_for(environment: str, deploy_branch: str) -> str:
    """Pick the local ref whose migrations are compared with the remote.

    Production deploys push the deploy branch, so that branch is compared.
    Other environments receive the current commit, so HEAD is compared.
    """
    if environment == DEFAULT_CONSTANTS.PRODUCTION:
        return deploy_branch
    return DEFAULT_CONSTANTS.HEAD_REF


class MigrationChecker:
    """Decide whether a deploy needs to run database migrations."""

    def __init__(
        self, shape: ProjectShape, git: GitCommands, migrations_path: str
    ) -> None:
        self._shape = shape
        self._git = git
        self._migrations_path = migrations_path

    def looks_like_migratable_app(self) -> bool:
        """True when both the task manifest and migrations directory exist."""
        return self._shape.has_manifest() and self._shape.has_migrations_dir()

    def has_pending_migrations(self, environment: str, compare_ref: str) -> bool:
        """Check for migrations not yet on ``environment``'s deploy branch.

        Runs `git fetch` followed by a quiet diff of the migrations path.
        Any failure of the pair counts as pending, including a failed fetch.
        """
        fetched = self._git.fetch(environment)
        if not fetched:
            logger.warning(
                f"Fetching {environment} failed; treating migrations as pending"
            )
            return True

        unchanged = self._git.diff_is_empty(
            environment, compare_ref, self._migrations_path
        )
        logger.debug(
            f"Migrations on {environment} vs {compare_ref}: "
            f"{'up to date' if unchanged else 'pending'}"
        )
        return not unchanged
