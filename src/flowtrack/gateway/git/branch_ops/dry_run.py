"""No-op Git branch operations wrapper for dry-run mode."""

from pathlib import Path

from flowtrack.gateway.git.branch_ops.abc import GitBranchOps
from flowtrack.gateway.git.branch_ops.types import (
    BranchCreated,
    BranchCreateError,
    CheckoutResult,
    CheckoutStatus,
    RebaseMode,
)


class DryRunGitBranchOps(GitBranchOps):
    """No-op wrapper that prevents execution of branch mutations.

    Mutations report success without touching the repository. Query operations
    are delegated to the wrapped implementation.
    """

    def __init__(self, wrapped: GitBranchOps) -> None:
        """Create a dry-run wrapper around a GitBranchOps implementation.

        Args:
            wrapped: The GitBranchOps implementation to wrap (usually RealGitBranchOps)
        """
        self._wrapped = wrapped

    # ============================================================================
    # Mutation Operations (no-ops in dry-run mode)
    # ============================================================================

    def create_local_branch(
        self, repo_root: Path, branch_name: str, start_point: str, *, rebase_mode: RebaseMode
    ) -> BranchCreated | BranchCreateError:
        """No-op for creating a branch in dry-run mode."""
        return BranchCreated(branch_name=branch_name, start_point=start_point)

    def checkout(self, repo_root: Path, branch: str) -> CheckoutResult:
        """No-op for checkout in dry-run mode."""
        return CheckoutResult(status=CheckoutStatus.OK)

    # ============================================================================
    # Query Operations (delegate to wrapped implementation)
    # ============================================================================

    def has_local_branch(self, repo_root: Path, branch_name: str) -> bool:
        return self._wrapped.has_local_branch(repo_root, branch_name)

    def list_local_branches(self, repo_root: Path) -> list[str]:
        return self._wrapped.list_local_branches(repo_root)

    def get_current_branch(self, cwd: Path) -> str | None:
        return self._wrapped.get_current_branch(cwd)
