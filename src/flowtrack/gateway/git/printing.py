"""Printing Git wrapper for verbose output."""

from pathlib import Path

from flowtrack.gateway.git.abc import Git
from flowtrack.gateway.git.branch_ops.abc import GitBranchOps
from flowtrack.gateway.git.branch_ops.printing import PrintingGitBranchOps
from flowtrack.gateway.git.config_ops.abc import GitConfigOps
from flowtrack.gateway.git.config_ops.printing import PrintingGitConfigOps
from flowtrack.gateway.git.remote_ops.abc import GitRemoteOps
from flowtrack.gateway.git.remote_ops.printing import PrintingGitRemoteOps
from flowtrack.printing.base import PrintingBase


class PrintingGit(PrintingBase, Git):
    """Wrapper that prints git commands before delegating to inner implementation.

    Usage:
        # For production
        printing_git = PrintingGit(RealGit(), script_mode=False, dry_run=False)

        # For dry-run
        printing_git = PrintingGit(DryRunGit(RealGit()), script_mode=False, dry_run=True)
    """

    # Inherits __init__, _emit, and _format_command from PrintingBase

    @property
    def remote(self) -> GitRemoteOps:
        return PrintingGitRemoteOps(
            self._wrapped.remote, script_mode=self._script_mode, dry_run=self._dry_run
        )

    @property
    def branch(self) -> GitBranchOps:
        return PrintingGitBranchOps(
            self._wrapped.branch, script_mode=self._script_mode, dry_run=self._dry_run
        )

    @property
    def config(self) -> GitConfigOps:
        return PrintingGitConfigOps(
            self._wrapped.config, script_mode=self._script_mode, dry_run=self._dry_run
        )

    def get_repository_root(self, cwd: Path) -> Path:
        return self._wrapped.get_repository_root(cwd)
