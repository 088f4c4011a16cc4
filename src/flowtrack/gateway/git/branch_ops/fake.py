"""Fake Git branch operations for testing."""

from pathlib import Path

from flowtrack.gateway.git.branch_ops.abc import GitBranchOps
from flowtrack.gateway.git.branch_ops.types import (
    BranchCreated,
    BranchCreateError,
    CheckoutResult,
    CheckoutStatus,
    RebaseMode,
)


class FakeGitBranchOps(GitBranchOps):
    """In-memory fake implementation of Git branch operations.

    State Management:
    -----------------
    This fake maintains mutable state to simulate git's stateful behavior.
    create_local_branch adds to the local branch list and a successful
    checkout moves the current branch. State changes are visible to
    subsequent method calls within the same test.

    Failure Injection:
    -----------------
    - create_failures: branch name -> message; create_local_branch returns
      BranchCreateError without creating the branch
    - checkout_results: branch name -> CheckoutResult returned by checkout();
      a non-OK result leaves the current branch untouched
    - checkout_raises: branch name -> exception raised by checkout()

    Mutation Tracking:
    -----------------
    - created_branches: (repo_root, branch_name, start_point, rebase_mode) tuples
    - checked_out_branches: (repo_root, branch) tuples, recorded for every attempt
    """

    def __init__(
        self,
        *,
        local_branches: dict[Path, list[str]] | None = None,
        current_branches: dict[Path, str | None] | None = None,
        create_failures: dict[str, str] | None = None,
        checkout_results: dict[str, CheckoutResult] | None = None,
        checkout_raises: dict[str, Exception] | None = None,
    ) -> None:
        self._local_branches = local_branches if local_branches is not None else {}
        self._current_branches = current_branches if current_branches is not None else {}
        self._create_failures = create_failures if create_failures is not None else {}
        self._checkout_results = checkout_results if checkout_results is not None else {}
        self._checkout_raises = checkout_raises if checkout_raises is not None else {}

        # Mutation tracking
        self._created_branches: list[tuple[Path, str, str, RebaseMode]] = []
        self._checked_out_branches: list[tuple[Path, str]] = []

    def create_local_branch(
        self, repo_root: Path, branch_name: str, start_point: str, *, rebase_mode: RebaseMode
    ) -> BranchCreated | BranchCreateError:
        if branch_name in self._create_failures:
            return BranchCreateError(
                branch_name=branch_name, message=self._create_failures[branch_name]
            )
        if branch_name in self._local_branches.get(repo_root, []):
            return BranchCreateError(
                branch_name=branch_name,
                message=f"fatal: a branch named '{branch_name}' already exists",
            )

        self._created_branches.append((repo_root, branch_name, start_point, rebase_mode))
        self._local_branches.setdefault(repo_root, []).append(branch_name)
        return BranchCreated(branch_name=branch_name, start_point=start_point)

    def checkout(self, repo_root: Path, branch: str) -> CheckoutResult:
        self._checked_out_branches.append((repo_root, branch))
        if branch in self._checkout_raises:
            raise self._checkout_raises[branch]

        result = self._checkout_results.get(branch)
        if result is None:
            if branch not in self._local_branches.get(repo_root, []):
                return CheckoutResult(
                    status=CheckoutStatus.NOT_TRIED,
                    message=f"error: pathspec '{branch}' did not match any file(s) known to git",
                )
            result = CheckoutResult(status=CheckoutStatus.OK)

        if result.is_ok:
            self._current_branches[repo_root] = branch
        return result

    def has_local_branch(self, repo_root: Path, branch_name: str) -> bool:
        return branch_name in self._local_branches.get(repo_root, [])

    def list_local_branches(self, repo_root: Path) -> list[str]:
        return list(self._local_branches.get(repo_root, []))

    def get_current_branch(self, cwd: Path) -> str | None:
        return self._current_branches.get(cwd)

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def created_branches(self) -> list[tuple[Path, str, str, RebaseMode]]:
        """Get list of branches created during test.

        Returns list of (repo_root, branch_name, start_point, rebase_mode) tuples.
        This property is for test assertions only.
        """
        return self._created_branches.copy()

    @property
    def checked_out_branches(self) -> list[tuple[Path, str]]:
        """Get list of checkout attempts during test.

        Returns list of (repo_root, branch) tuples.
        This property is for test assertions only.
        """
        return self._checked_out_branches.copy()
