"""Git remote operations sub-gateway.

This module provides a separate gateway for remote operations: fetching from a
remote and enumerating its remote-tracking refs.

Import from submodules:
- abc: GitRemoteOps
- real: RealGitRemoteOps
- fake: FakeGitRemoteOps
- dry_run: DryRunGitRemoteOps
- printing: PrintingGitRemoteOps
- types: RemoteRef, FetchResult, FetchError, TrackingRefUpdate
"""
