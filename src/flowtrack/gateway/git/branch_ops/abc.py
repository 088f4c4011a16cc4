"""Abstract base class for Git branch operations.

This sub-gateway holds local branch creation, checkout, and the queries the
tracking operation needs before mutating anything.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from flowtrack.gateway.git.branch_ops.types import (
    BranchCreated,
    BranchCreateError,
    CheckoutResult,
    RebaseMode,
)


class GitBranchOps(ABC):
    """Abstract interface for Git branch operations.

    This interface contains both mutation and query operations for branches.
    All implementations (real, fake, dry-run, printing) must implement this interface.
    """

    @abstractmethod
    def create_local_branch(
        self, repo_root: Path, branch_name: str, start_point: str, *, rebase_mode: RebaseMode
    ) -> BranchCreated | BranchCreateError:
        """Create a new local branch without checking it out.

        Args:
            repo_root: Path to the repository root
            branch_name: Name of the branch to create
            start_point: Ref to base the new branch on (e.g. a remote-tracking ref)
            rebase_mode: Value recorded under branch.<name>.rebase

        Returns:
            BranchCreated, or BranchCreateError if the ref update failed
        """
        ...

    @abstractmethod
    def checkout(self, repo_root: Path, branch: str) -> CheckoutResult:
        """Switch the working tree to a branch.

        Expected git refusals (local changes in the way, unknown branch) are
        reported through the status rather than raised.

        Args:
            repo_root: Path to the repository root
            branch: Branch name to checkout

        Returns:
            CheckoutResult with status OK on success
        """
        ...

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def has_local_branch(self, repo_root: Path, branch_name: str) -> bool:
        """Check whether refs/heads/<branch_name> exists."""
        ...

    @abstractmethod
    def list_local_branches(self, repo_root: Path) -> list[str]:
        """List all local branch names in the repository."""
        ...

    @abstractmethod
    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch.

        Returns:
            Branch name, or None if in detached HEAD state
        """
        ...
