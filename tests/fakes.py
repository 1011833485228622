"""Test doubles for the process runner and the project filesystem."""

from collections.abc import Sequence
from pathlib import Path

from envdeploy.cli.deployment.shell_commands.types import CommandResult

APP_ROOT = Path("/test/app")


class RecordingRunner:
    """Fake CommandRunner recording every command in call order.

    Spawned commands succeed and captured commands return empty output
    unless a result is registered for the exact token list.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, list[str]]] = []
        self.spawn_results: dict[tuple[str, ...], bool] = {}
        self.capture_results: dict[tuple[str, ...], CommandResult] = {}
        self.replace_result = True

    def replace(self, cmd: Sequence[str]) -> bool:
        self.calls.append(("replace", list(cmd)))
        return self.replace_result

    def spawn(self, cmd: Sequence[str]) -> bool:
        self.calls.append(("spawn", list(cmd)))
        return self.spawn_results.get(tuple(cmd), True)

    def capture(self, cmd: Sequence[str]) -> CommandResult:
        self.calls.append(("capture", list(cmd)))
        return self.capture_results.get(tuple(cmd), CommandResult(success=True))

    def fail(self, *cmd: str) -> None:
        self.spawn_results[cmd] = False

    def returns(self, *cmd: str, stdout: str = "", success: bool = True) -> None:
        self.capture_results[cmd] = CommandResult(
            success=success, stdout=stdout, returncode=0 if success else 1
        )

    @property
    def commands(self) -> list[list[str]]:
        return [cmd for _, cmd in self.calls]

    def commands_for(self, mode: str) -> list[list[str]]:
        return [cmd for call_mode, cmd in self.calls if call_mode == mode]


class FakeProjectShape:
    def __init__(self, manifest: bool = True, migrations: bool = True) -> None:
        self.manifest = manifest
        self.migrations = migrations

    def has_manifest(self) -> bool:
        return self.manifest

    def has_migrations_dir(self) -> bool:
        return self.migrations
