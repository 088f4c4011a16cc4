"""Fake implementation of Git remote operations for testing."""

from pathlib import Path

from flowtrack.gateway.git.remote_ops.abc import GitRemoteOps
from flowtrack.gateway.git.remote_ops.types import FetchError, FetchResult, RemoteRef


class FakeGitRemoteOps(GitRemoteOps):
    """In-memory fake implementation of Git remote operations.

    This fake accepts pre-configured state in its constructor and tracks
    mutations for test assertions.

    Constructor Injection:
    ---------------------
    - remote_refs: Mapping of (repo_root, remote) -> remote-tracking refs
    - fetch_results: Mapping of (repo_root, remote) -> FetchResult to return
    - fetch_failures: Mapping of (repo_root, remote) -> error message; fetch()
      returns FetchError with that message

    Mutation Tracking:
    -----------------
    - fetch_calls: List of (repo_root, remote, timeout) tuples from fetch()
    """

    def __init__(
        self,
        *,
        remote_refs: dict[tuple[Path, str], list[RemoteRef]] | None = None,
        fetch_results: dict[tuple[Path, str], FetchResult] | None = None,
        fetch_failures: dict[tuple[Path, str], str] | None = None,
    ) -> None:
        self._remote_refs = remote_refs if remote_refs is not None else {}
        self._fetch_results = fetch_results if fetch_results is not None else {}
        self._fetch_failures = fetch_failures if fetch_failures is not None else {}

        # Mutation tracking
        self._fetch_calls: list[tuple[Path, str, int]] = []

    def fetch(self, repo_root: Path, remote: str, *, timeout: int) -> FetchResult | FetchError:
        """Record the fetch and return the configured outcome.

        Unconfigured fetches succeed with no ref updates.
        """
        self._fetch_calls.append((repo_root, remote, timeout))
        key = (repo_root, remote)
        if key in self._fetch_failures:
            return FetchError(remote=remote, message=self._fetch_failures[key])
        return self._fetch_results.get(key, FetchResult(remote=remote, updates=()))

    def list_remote_refs(self, repo_root: Path, remote: str) -> list[RemoteRef]:
        return list(self._remote_refs.get((repo_root, remote), []))

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def fetch_calls(self) -> list[tuple[Path, str, int]]:
        """Read-only access to fetch calls for test assertions.

        Returns list of (repo_root, remote, timeout) tuples.
        """
        return list(self._fetch_calls)
