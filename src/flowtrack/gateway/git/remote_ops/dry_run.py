"""No-op Git remote operations wrapper for dry-run mode."""

from pathlib import Path

from flowtrack.gateway.git.remote_ops.abc import GitRemoteOps
from flowtrack.gateway.git.remote_ops.types import FetchError, FetchResult, RemoteRef


class DryRunGitRemoteOps(GitRemoteOps):
    """No-op wrapper that prevents execution of network operations.

    fetch() reports an empty FetchResult without contacting the remote.
    Read-only operations (list_remote_refs) are delegated to the wrapped
    implementation, so dry runs still see refs from the last real fetch.

    Usage:
        real_ops = RealGitRemoteOps()
        noop_ops = DryRunGitRemoteOps(real_ops)
    """

    def __init__(self, wrapped: GitRemoteOps) -> None:
        """Create a dry-run wrapper around a GitRemoteOps implementation.

        Args:
            wrapped: The GitRemoteOps implementation to wrap (usually RealGitRemoteOps)
        """
        self._wrapped = wrapped

    def fetch(self, repo_root: Path, remote: str, *, timeout: int) -> FetchResult | FetchError:
        """No-op for fetching in dry-run mode."""
        return FetchResult(remote=remote, updates=())

    def list_remote_refs(self, repo_root: Path, remote: str) -> list[RemoteRef]:
        """List remote refs (read-only, delegates to wrapped)."""
        return self._wrapped.list_remote_refs(repo_root, remote)
