"""Printing Git branch operations wrapper for verbose output."""

from pathlib import Path

from flowtrack.gateway.git.branch_ops.abc import GitBranchOps
from flowtrack.gateway.git.branch_ops.types import (
    BranchCreated,
    BranchCreateError,
    CheckoutResult,
    RebaseMode,
)
from flowtrack.printing.base import PrintingBase


class PrintingGitBranchOps(PrintingBase, GitBranchOps):
    """Wrapper that prints branch operations before delegating to inner implementation."""

    # Inherits __init__, _emit, and _format_command from PrintingBase

    def create_local_branch(
        self, repo_root: Path, branch_name: str, start_point: str, *, rebase_mode: RebaseMode
    ) -> BranchCreated | BranchCreateError:
        """Create branch with printed output."""
        self._emit(self._format_command(f"git branch --no-track {branch_name} {start_point}"))
        rebase_key = f"branch.{branch_name}.rebase"
        self._emit(self._format_command(f"git config --local {rebase_key} {rebase_mode.value}"))
        return self._wrapped.create_local_branch(
            repo_root, branch_name, start_point, rebase_mode=rebase_mode
        )

    def checkout(self, repo_root: Path, branch: str) -> CheckoutResult:
        """Checkout with printed output."""
        self._emit(self._format_command(f"git checkout {branch}"))
        return self._wrapped.checkout(repo_root, branch)

    def has_local_branch(self, repo_root: Path, branch_name: str) -> bool:
        return self._wrapped.has_local_branch(repo_root, branch_name)

    def list_local_branches(self, repo_root: Path) -> list[str]:
        return self._wrapped.list_local_branches(repo_root)

    def get_current_branch(self, cwd: Path) -> str | None:
        return self._wrapped.get_current_branch(cwd)
