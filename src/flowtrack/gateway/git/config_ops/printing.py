"""Printing git configuration wrapper for verbose output."""

from pathlib import Path

from flowtrack.gateway.git.config_ops.abc import GitConfigOps
from flowtrack.gateway.git.config_ops.types import ConfigWriteError, ConfigWritten
from flowtrack.printing.base import PrintingBase


class PrintingGitConfigOps(PrintingBase, GitConfigOps):
    """Wrapper that prints config writes before delegating to inner implementation."""

    def set_config_value(
        self, repo_root: Path, key: str, value: str
    ) -> ConfigWritten | ConfigWriteError:
        """Set config with printed output."""
        self._emit(self._format_command(f"git config --local {key} {value}"))
        return self._wrapped.set_config_value(repo_root, key, value)

    def get_config_value(self, repo_root: Path, key: str) -> str | None:
        return self._wrapped.get_config_value(repo_root, key)
