"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
codebase more testable and maintainable.

Architecture:
- Git: Abstract base class composing the remote, branch and config sub-gateways
- RealGit: Production implementation using subprocess
- FakeGit: In-memory implementation for tests
- DryRunGit / PrintingGit: Wrappers for --dry-run and verbose output
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flowtrack.gateway.git.branch_ops.abc import GitBranchOps
    from flowtrack.gateway.git.config_ops.abc import GitConfigOps
    from flowtrack.gateway.git.remote_ops.abc import GitRemoteOps


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @property
    @abstractmethod
    def remote(self) -> GitRemoteOps:
        """Access remote operations subgateway."""
        ...

    @property
    @abstractmethod
    def branch(self) -> GitBranchOps:
        """Access branch operations subgateway."""
        ...

    @property
    @abstractmethod
    def config(self) -> GitConfigOps:
        """Access config operations subgateway."""
        ...

    @abstractmethod
    def get_repository_root(self, cwd: Path) -> Path:
        """Get the repository root directory.

        Raises:
            RuntimeError: If cwd is not inside a git repository
        """
        ...
