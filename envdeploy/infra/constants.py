"""Environment constants and path resolution.

This module centralizes the magic strings shared by the environment
workflows and resolves application-relative paths from configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from envdeploy.runtime.config.config_data import ConfigData


@dataclass(frozen=True)
class EnvironmentConstants:
    """Names and flags with special meaning to the workflows.

    Any environment name is accepted; these three receive special treatment
    in the restore safety checks and the deploy branch comparison.
    """

    PRODUCTION: str = "production"
    STAGING: str = "staging"
    DEVELOPMENT: str = "development"

    FORCE_FLAG: str = "--force"
    CONFIRM_FLAG: str = "--confirm"
    PARALLELIZE_FLAG: str = "--parallelize"

    # Git ref compared against the remote branch when checking migrations
    HEAD_REF: str = "HEAD"

    # Marker line printed by `heroku info` ahead of the app name
    APP_INFO_MARKER: str = "=== "

    # Database name the platform restores a backup into
    PLATFORM_DATABASE: str = "DATABASE"


class EnvironmentPaths:
    """Path resolver for files inspected inside the application checkout."""

    def __init__(self, project_root: Path, config: ConfigData) -> None:
        """Initialize application paths.

        Args:
            project_root: Path to the application checkout
            config: Loaded configuration naming the conventional paths
        """
        self._project_root = project_root
        self.manifest_file = project_root / config.app.manifest_file
        self.migrations_root = project_root / config.app.migrations_root
        self.database_config = project_root / config.restore.database_config
        self.backup_download = project_root / config.restore.download_path

    @property
    def project_root(self) -> Path:
        """Get path to project root."""
        return self._project_root


DEFAULT_CONSTANTS = EnvironmentConstants()
