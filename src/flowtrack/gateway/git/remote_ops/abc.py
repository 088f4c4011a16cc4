"""Abstract base class for Git remote operations.

This sub-gateway holds the network-touching fetch and the queries over the
remote-tracking refs it produces.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from flowtrack.gateway.git.remote_ops.types import FetchError, FetchResult, RemoteRef


class GitRemoteOps(ABC):
    """Abstract interface for Git remote operations.

    All implementations (real, fake, dry-run, printing) must implement this interface.
    """

    @abstractmethod
    def fetch(self, repo_root: Path, remote: str, *, timeout: int) -> FetchResult | FetchError:
        """Fetch all configured refspecs from a remote.

        Args:
            repo_root: Path to the git repository root
            remote: Remote name (e.g., "origin")
            timeout: Seconds before the fetch is abandoned

        Returns:
            FetchResult describing the ref updates, or FetchError on network,
            authentication, protocol or timeout failure
        """
        ...

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def list_remote_refs(self, repo_root: Path, remote: str) -> list[RemoteRef]:
        """List remote-tracking refs for a remote, as last fetched.

        The symbolic refs/remotes/<remote>/HEAD is excluded.

        Args:
            repo_root: Path to the git repository root
            remote: Remote name (e.g., "origin")

        Returns:
            RemoteRef entries with full ref names and object ids
        """
        ...
