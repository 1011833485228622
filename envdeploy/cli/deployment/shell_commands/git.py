"""Git command abstractions.

This module provides the git operations of a git-based deploy:
pushing to an environment's remote and comparing against it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from envdeploy.runtime.config.config_data import ConfigData

    from .runner import CommandRunner


class GitCommands:
    """Git-related shell commands.

    Provides operations for:
    - Pushing a branch or the current commit to an environment remote
    - Fetching an environment remote
    - Quietly diffing a path against the remote deploy branch
    """

    def __init__(self, runner: CommandRunner, config: ConfigData) -> None:
        """Initialize Git commands.

        Args:
            runner: Command runner for executing shell commands
            config: Configuration naming the deploy branch
        """
        self._runner = runner
        self._branch = config.app.deploy_branch

    def push_branch(self, remote: str) -> bool:
        """Push the local deploy branch to ``remote``."""
        return self._runner.spawn(["git", "push", remote, self._branch])

    def force_push_head(self, remote: str) -> bool:
        """Force-push the current commit onto ``remote``'s deploy branch.

        Used for evaluating feature branches on non-production environments.
        """
        return self._runner.spawn(
            ["git", "push", remote, f"HEAD:{self._branch}", "--force"]
        )

    def fetch(self, remote: str) -> bool:
        """Fetch ``remote`` so its deploy branch tip is current."""
        return self._runner.spawn(["git", "fetch", remote])

    def diff_is_empty(self, remote: str, compare_ref: str, path: str) -> bool:
        """Check that ``path`` is unchanged between the remote branch and a ref.

        Args:
            remote: Remote whose deploy branch is the base of the comparison
            compare_ref: Local ref to compare with (e.g. "HEAD" or "master")
            path: Path limiting the diff

        Returns:
            True if `git diff --quiet` reported no differences
        """
        return self._runner.spawn(
            [
                "git",
                "diff",
                "--quiet",
                f"{remote}/{self._branch}..{compare_ref}",
                "--",
                path,
            ]
        )
