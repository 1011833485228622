"""Shared fixtures for envdeploy tests."""

from unittest.mock import Mock

import pytest

from envdeploy.cli.deployment.shell_commands import ShellCommands
from envdeploy.infra.constants import EnvironmentPaths
from envdeploy.runtime.config.config_data import ConfigData
from tests.fakes import APP_ROOT, RecordingRunner


@pytest.fixture
def config() -> ConfigData:
    """Default configuration."""
    return ConfigData()


@pytest.fixture
def runner() -> RecordingRunner:
    """Recording fake runner."""
    return RecordingRunner()


@pytest.fixture
def commands(runner: RecordingRunner, config: ConfigData) -> ShellCommands:
    """ShellCommands executing through the recording runner."""
    return ShellCommands(APP_ROOT, config, runner=runner)


@pytest.fixture
def paths(config: ConfigData) -> EnvironmentPaths:
    return EnvironmentPaths(APP_ROOT, config)


@pytest.fixture
def console() -> Mock:
    """Mock CLIConsole."""
    return Mock()
