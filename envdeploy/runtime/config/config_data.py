"""Configuration models for envdeploy.

Every field has a default matching a conventional Rails app on Heroku, so
an application without an ``envdeploy.yaml`` works out of the box.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PlatformConfig(BaseModel):
    """Remote-application platform CLI settings."""

    cli: str = Field(default="heroku", description="Platform CLI executable")
    remote_flag: str = Field(
        default="--remote",
        description="Flag that selects the git remote naming the target app",
    )


class AppConfig(BaseModel):
    """Conventions of the application being deployed."""

    console_command: str = Field(
        default="rails console",
        description="Command run on a one-off dyno for `console`",
    )
    migrate_task: str = Field(
        default="rake db:migrate",
        description="Command run on a one-off dyno to apply migrations",
    )
    manifest_file: str = Field(
        default="Rakefile",
        description="Task manifest whose presence marks a migratable app",
    )
    migrations_root: str = Field(
        default="db",
        description="Directory whose presence marks a migratable app",
    )
    migrations_path: str = Field(
        default="db/migrate",
        description="Path compared between local and remote to find pending migrations",
    )
    deploy_branch: str = Field(
        default="master", description="Branch the platform builds from"
    )


class CacheConfig(BaseModel):
    """Cache shell settings."""

    url_variable: str = Field(
        default="REDIS_URL", description="Config var holding the cache URL"
    )
    client: str = Field(default="redis-cli", description="Cache client executable")


class RestoreConfig(BaseModel):
    """Settings for restoring backups into the local development database."""

    database_config: str = Field(
        default="config/database.yml",
        description="YAML file with the development database name",
    )
    download_path: str = Field(
        default="tmp/latest.backup",
        description="Where the downloaded backup is stored before pg_restore",
    )


class ConfigData(BaseModel):
    """Root configuration model."""

    platform: PlatformConfig = Field(default_factory=PlatformConfig)
    app: AppConfig = Field(default_factory=AppConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    restore: RestoreConfig = Field(default_factory=RestoreConfig)
