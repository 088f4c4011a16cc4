"""Fake Git implementation composed of the in-memory sub-gateway fakes."""

from pathlib import Path

from flowtrack.gateway.git.abc import Git
from flowtrack.gateway.git.branch_ops.fake import FakeGitBranchOps
from flowtrack.gateway.git.config_ops.fake import FakeGitConfigOps
from flowtrack.gateway.git.remote_ops.fake import FakeGitRemoteOps


class FakeGit(Git):
    """In-memory Git for tests.

    Sub-gateway fakes are passed in pre-configured (or default to empty ones)
    and exposed with their concrete types so tests can read mutation tracking
    without casts.

    Example:
        >>> branch = FakeGitBranchOps(local_branches={Path("/repo"): ["develop"]})
        >>> git = FakeGit(branch=branch, repository_roots={Path("/repo"): Path("/repo")})
    """

    def __init__(
        self,
        *,
        remote: FakeGitRemoteOps | None = None,
        branch: FakeGitBranchOps | None = None,
        config: FakeGitConfigOps | None = None,
        repository_roots: dict[Path, Path] | None = None,
    ) -> None:
        """Create FakeGit with pre-configured sub-gateways.

        Args:
            remote: Remote operations fake (empty FakeGitRemoteOps if None)
            branch: Branch operations fake (empty FakeGitBranchOps if None)
            config: Config operations fake (empty FakeGitConfigOps if None)
            repository_roots: Mapping of cwd -> repository root
        """
        self._remote = remote if remote is not None else FakeGitRemoteOps()
        self._branch = branch if branch is not None else FakeGitBranchOps()
        self._config = config if config is not None else FakeGitConfigOps()
        self._repository_roots = repository_roots if repository_roots is not None else {}

    @property
    def remote(self) -> FakeGitRemoteOps:
        return self._remote

    @property
    def branch(self) -> FakeGitBranchOps:
        return self._branch

    @property
    def config(self) -> FakeGitConfigOps:
        return self._config

    def get_repository_root(self, cwd: Path) -> Path:
        if cwd in self._repository_roots:
            return self._repository_roots[cwd]
        for path in cwd.parents:
            if path in self._repository_roots:
                return self._repository_roots[path]
        raise RuntimeError(f"fatal: not a git repository: {cwd}")
