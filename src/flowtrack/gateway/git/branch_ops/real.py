"""Production implementation of Git branch operations using subprocess."""

import logging
import subprocess
from pathlib import Path

from flowtrack.gateway.git.branch_ops.abc import GitBranchOps
from flowtrack.gateway.git.branch_ops.types import (
    R_HEADS,
    BranchCreated,
    BranchCreateError,
    CheckoutResult,
    CheckoutStatus,
    RebaseMode,
    classify_checkout_failure,
)
from flowtrack.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)


class RealGitBranchOps(GitBranchOps):
    """Production implementation of branch operations using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def create_local_branch(
        self, repo_root: Path, branch_name: str, start_point: str, *, rebase_mode: RebaseMode
    ) -> BranchCreated | BranchCreateError:
        """Create the branch, then record its rebase mode.

        If recording the rebase mode fails the branch ref already exists; the
        error is still reported as a failed creation.
        """
        try:
            run_subprocess_with_context(
                cmd=["git", "branch", "--no-track", branch_name, start_point],
                operation_context=f"create branch '{branch_name}' from '{start_point}'",
                cwd=repo_root,
            )
            run_subprocess_with_context(
                cmd=[
                    "git",
                    "config",
                    "--local",
                    f"branch.{branch_name}.rebase",
                    rebase_mode.value,
                ],
                operation_context=f"set rebase mode of branch '{branch_name}'",
                cwd=repo_root,
            )
        except RuntimeError as e:
            return BranchCreateError(branch_name=branch_name, message=str(e))
        return BranchCreated(branch_name=branch_name, start_point=start_point)

    def checkout(self, repo_root: Path, branch: str) -> CheckoutResult:
        """Checkout a branch, classifying git's refusal when it fails."""
        result = run_subprocess_with_context(
            cmd=["git", "checkout", branch],
            operation_context=f"checkout branch '{branch}'",
            cwd=repo_root,
            check=False,
        )
        if result.returncode == 0:
            return CheckoutResult(status=CheckoutStatus.OK)

        checkout_result = classify_checkout_failure(result.stderr)
        logger.debug("Checkout of %s returned %s", branch, checkout_result.status.name)
        return checkout_result

    # ============================================================================
    # Query Operations
    # ============================================================================

    def has_local_branch(self, repo_root: Path, branch_name: str) -> bool:
        """Check whether refs/heads/<branch_name> exists."""
        result = run_subprocess_with_context(
            cmd=["git", "show-ref", "--verify", "--quiet", f"{R_HEADS}{branch_name}"],
            operation_context=f"check if branch '{branch_name}' exists",
            cwd=repo_root,
            check=False,
        )
        return result.returncode == 0

    def list_local_branches(self, repo_root: Path) -> list[str]:
        """List all local branch names in the repository."""
        result = run_subprocess_with_context(
            cmd=["git", "branch", "--format=%(refname:short)"],
            operation_context="list local branches",
            cwd=repo_root,
        )
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch."""
        result = subprocess.run(
            ["git", "rev-parse", "--abbrev-ref", "HEAD"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None

        branch = result.stdout.strip()
        if branch == "HEAD":
            return None

        return branch
