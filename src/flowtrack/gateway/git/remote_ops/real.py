"""Production implementation of Git remote operations using subprocess."""

import logging
from pathlib import Path

from flowtrack.gateway.git.remote_ops.abc import GitRemoteOps
from flowtrack.gateway.git.remote_ops.types import (
    PORCELAIN_FETCH_MIN_VERSION,
    R_REMOTES,
    FetchError,
    FetchResult,
    RemoteRef,
    fetch_result_from_ref_snapshots,
    parse_fetch_porcelain,
    parse_git_version,
)
from flowtrack.subprocess_utils import copied_env_for_git_subprocess, run_subprocess_with_context

logger = logging.getLogger(__name__)


class RealGitRemoteOps(GitRemoteOps):
    """Real implementation of Git remote operations using subprocess.

    Fetches with `git fetch --porcelain` where the installed git supports it
    (2.41 and later). Older git gets a plain fetch whose ref updates are
    recovered by comparing remote-tracking refs before and after.
    """

    def __init__(self, *, porcelain_fetch: bool | None = None) -> None:
        """Create remote operations.

        Args:
            porcelain_fetch: Force (True) or avoid (False) `--porcelain`.
                None detects support from `git --version` on first fetch.
        """
        self._porcelain_fetch = porcelain_fetch

    def fetch(self, repo_root: Path, remote: str, *, timeout: int) -> FetchResult | FetchError:
        """Fetch from a remote, converting any failure into FetchError."""
        try:
            if self._supports_porcelain_fetch():
                fetch_result = self._fetch_porcelain(repo_root, remote, timeout=timeout)
            else:
                fetch_result = self._fetch_by_ref_snapshots(repo_root, remote, timeout=timeout)
        except RuntimeError as e:
            logger.debug("Fetch from %s failed: %s", remote, e)
            return FetchError(remote=remote, message=str(e))

        logger.debug("Fetch from %s reported %d update(s)", remote, len(fetch_result.updates))
        return fetch_result

    def list_remote_refs(self, repo_root: Path, remote: str) -> list[RemoteRef]:
        """List remote-tracking refs for a remote."""
        namespace = f"{R_REMOTES}{remote}/"
        result = run_subprocess_with_context(
            cmd=["git", "for-each-ref", "--format=%(refname) %(objectname)", namespace],
            operation_context=f"list remote-tracking refs for '{remote}'",
            cwd=repo_root,
        )

        refs: list[RemoteRef] = []
        for line in result.stdout.splitlines():
            line = line.strip()
            if not line:
                continue
            name, _, object_id = line.partition(" ")
            if name == f"{namespace}HEAD":
                continue
            refs.append(RemoteRef(name=name, object_id=object_id or None))
        return refs

    def _supports_porcelain_fetch(self) -> bool:
        if self._porcelain_fetch is None:
            result = run_subprocess_with_context(
                cmd=["git", "--version"],
                operation_context="read git version",
            )
            version = parse_git_version(result.stdout)
            self._porcelain_fetch = version is not None and version >= PORCELAIN_FETCH_MIN_VERSION
            logger.debug("git %s, porcelain fetch: %s", version, self._porcelain_fetch)
        return self._porcelain_fetch

    def _fetch_porcelain(self, repo_root: Path, remote: str, *, timeout: int) -> FetchResult:
        result = run_subprocess_with_context(
            cmd=["git", "fetch", "--porcelain", remote],
            operation_context=f"fetch from remote '{remote}'",
            cwd=repo_root,
            timeout=timeout,
            env=copied_env_for_git_subprocess(),
        )
        return parse_fetch_porcelain(remote, result.stdout)

    def _fetch_by_ref_snapshots(self, repo_root: Path, remote: str, *, timeout: int) -> FetchResult:
        before = self._ref_snapshot(repo_root, remote)
        run_subprocess_with_context(
            cmd=["git", "fetch", "--quiet", remote],
            operation_context=f"fetch from remote '{remote}'",
            cwd=repo_root,
            timeout=timeout,
            env=copied_env_for_git_subprocess(),
        )
        after = self._ref_snapshot(repo_root, remote)

        forced = frozenset(
            ref
            for ref in before.keys() & after.keys()
            if before[ref] != after[ref]
            and not self._is_ancestor(repo_root, before[ref], after[ref])
        )
        return fetch_result_from_ref_snapshots(remote, before, after, forced_refs=forced)

    def _ref_snapshot(self, repo_root: Path, remote: str) -> dict[str, str]:
        return {
            ref.name: ref.object_id
            for ref in self.list_remote_refs(repo_root, remote)
            if ref.object_id is not None
        }

    def _is_ancestor(self, repo_root: Path, old_oid: str, new_oid: str) -> bool:
        result = run_subprocess_with_context(
            cmd=["git", "merge-base", "--is-ancestor", old_oid, new_oid],
            operation_context=f"check whether {old_oid} is an ancestor of {new_oid}",
            cwd=repo_root,
            check=False,
        )
        return result.returncode == 0
