"""No-op Git wrapper for dry-run mode.

This module provides a Git wrapper that prevents execution of mutating
operations while delegating read-only operations to the wrapped implementation.
"""

from pathlib import Path

from flowtrack.gateway.git.abc import Git
from flowtrack.gateway.git.branch_ops.abc import GitBranchOps
from flowtrack.gateway.git.branch_ops.dry_run import DryRunGitBranchOps
from flowtrack.gateway.git.config_ops.abc import GitConfigOps
from flowtrack.gateway.git.config_ops.dry_run import DryRunGitConfigOps
from flowtrack.gateway.git.remote_ops.abc import GitRemoteOps
from flowtrack.gateway.git.remote_ops.dry_run import DryRunGitRemoteOps


class DryRunGit(Git):
    """No-op wrapper that prevents execution of mutating operations.

    Usage:
        real_ops = RealGit()
        noop_ops = DryRunGit(real_ops)

        # Mutations go through no-op subgateways
        noop_ops.branch.checkout(repo_root, "feature/login")
    """

    def __init__(self, wrapped: Git) -> None:
        """Create a dry-run wrapper around a Git implementation.

        Args:
            wrapped: The Git implementation to wrap (usually RealGit or FakeGit)
        """
        self._wrapped = wrapped

    @property
    def remote(self) -> GitRemoteOps:
        """Access remote operations subgateway (wrapped with DryRunGitRemoteOps)."""
        return DryRunGitRemoteOps(self._wrapped.remote)

    @property
    def branch(self) -> GitBranchOps:
        """Access branch operations subgateway (wrapped with DryRunGitBranchOps)."""
        return DryRunGitBranchOps(self._wrapped.branch)

    @property
    def config(self) -> GitConfigOps:
        """Access config operations subgateway (wrapped with DryRunGitConfigOps)."""
        return DryRunGitConfigOps(self._wrapped.config)

    def get_repository_root(self, cwd: Path) -> Path:
        """Get repository root (read-only, delegates to wrapped)."""
        return self._wrapped.get_repository_root(cwd)
