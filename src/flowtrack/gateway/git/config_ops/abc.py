"""Abstract interface for git configuration operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from flowtrack.gateway.git.config_ops.types import ConfigWriteError, ConfigWritten


class GitConfigOps(ABC):
    """Abstract interface for Git configuration operations.

    All values are read from and written to the repository-local config.
    All implementations (real, fake, dry-run, printing) must implement this interface.
    """

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def set_config_value(
        self, repo_root: Path, key: str, value: str
    ) -> ConfigWritten | ConfigWriteError:
        """Set a repository-local git configuration value.

        Args:
            repo_root: Path to the repository root
            key: Configuration key (e.g., "branch.feature/login.remote")
            value: Configuration value

        Returns:
            ConfigWritten, or ConfigWriteError if the config file could not be written
        """
        ...

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def get_config_value(self, repo_root: Path, key: str) -> str | None:
        """Get a git configuration value.

        Returns:
            The configured value, or None if the key is not set
        """
        ...
