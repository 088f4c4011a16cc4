"""No-op git configuration wrapper for dry-run mode."""

from pathlib import Path

from flowtrack.gateway.git.config_ops.abc import GitConfigOps
from flowtrack.gateway.git.config_ops.types import ConfigWriteError, ConfigWritten


class DryRunGitConfigOps(GitConfigOps):
    """No-op wrapper: writes are skipped, reads delegate to the wrapped implementation."""

    def __init__(self, wrapped: GitConfigOps) -> None:
        self._wrapped = wrapped

    def set_config_value(
        self, repo_root: Path, key: str, value: str
    ) -> ConfigWritten | ConfigWriteError:
        """No-op for setting git config in dry-run mode."""
        return ConfigWritten(key=key, value=value)

    def get_config_value(self, repo_root: Path, key: str) -> str | None:
        """Get config value (read-only, delegates to wrapped)."""
        return self._wrapped.get_config_value(repo_root, key)
