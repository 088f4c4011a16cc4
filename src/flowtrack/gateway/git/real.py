"""Production Git implementation using subprocess."""

from pathlib import Path

from flowtrack.gateway.git.abc import Git
from flowtrack.gateway.git.branch_ops.abc import GitBranchOps
from flowtrack.gateway.git.branch_ops.real import RealGitBranchOps
from flowtrack.gateway.git.config_ops.abc import GitConfigOps
from flowtrack.gateway.git.config_ops.real import RealGitConfigOps
from flowtrack.gateway.git.remote_ops.abc import GitRemoteOps
from flowtrack.gateway.git.remote_ops.real import RealGitRemoteOps
from flowtrack.subprocess_utils import run_subprocess_with_context


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    `porcelain_fetch` is passed to RealGitRemoteOps; None detects it.
    """

    def __init__(self, *, porcelain_fetch: bool | None = None) -> None:
        self._remote = RealGitRemoteOps(porcelain_fetch=porcelain_fetch)
        self._branch = RealGitBranchOps()
        self._config = RealGitConfigOps()

    @property
    def remote(self) -> GitRemoteOps:
        """Access remote operations subgateway."""
        return self._remote

    @property
    def branch(self) -> GitBranchOps:
        """Access branch operations subgateway."""
        return self._branch

    @property
    def config(self) -> GitConfigOps:
        """Access config operations subgateway."""
        return self._config

    def get_repository_root(self, cwd: Path) -> Path:
        """Get the repository root directory."""
        result = run_subprocess_with_context(
            cmd=["git", "rev-parse", "--show-toplevel"],
            operation_context="get repository root",
            cwd=cwd,
        )
        return Path(result.stdout.strip())
