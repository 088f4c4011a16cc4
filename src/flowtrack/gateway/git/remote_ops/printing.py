"""Printing Git remote operations wrapper for verbose output."""

from pathlib import Path

from flowtrack.gateway.git.remote_ops.abc import GitRemoteOps
from flowtrack.gateway.git.remote_ops.types import FetchError, FetchResult, RemoteRef
from flowtrack.printing.base import PrintingBase


class PrintingGitRemoteOps(PrintingBase, GitRemoteOps):
    """Wrapper that prints remote operations before delegating to inner implementation.

    Usage:
        # For production
        printing_ops = PrintingGitRemoteOps(real_ops, script_mode=False, dry_run=False)

        # For dry-run
        noop_inner = DryRunGitRemoteOps(real_ops)
        printing_ops = PrintingGitRemoteOps(noop_inner, script_mode=False, dry_run=True)
    """

    # Inherits __init__, _emit, and _format_command from PrintingBase

    def fetch(self, repo_root: Path, remote: str, *, timeout: int) -> FetchResult | FetchError:
        """Fetch with printed output."""
        self._emit(self._format_command(f"git fetch --porcelain {remote}"))
        return self._wrapped.fetch(repo_root, remote, timeout=timeout)

    def list_remote_refs(self, repo_root: Path, remote: str) -> list[RemoteRef]:
        """Query operation, no output."""
        return self._wrapped.list_remote_refs(repo_root, remote)
