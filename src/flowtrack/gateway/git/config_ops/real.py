"""Real implementation of git configuration operations."""

from pathlib import Path

from flowtrack.gateway.git.config_ops.abc import GitConfigOps
from flowtrack.gateway.git.config_ops.types import ConfigWriteError, ConfigWritten
from flowtrack.subprocess_utils import run_subprocess_with_context


class RealGitConfigOps(GitConfigOps):
    """Real implementation of Git configuration operations using subprocess."""

    def set_config_value(
        self, repo_root: Path, key: str, value: str
    ) -> ConfigWritten | ConfigWriteError:
        """Set a repository-local git configuration value."""
        try:
            run_subprocess_with_context(
                cmd=["git", "config", "--local", key, value],
                operation_context=f"set git config {key}",
                cwd=repo_root,
            )
        except RuntimeError as e:
            return ConfigWriteError(key=key, message=str(e))
        return ConfigWritten(key=key, value=value)

    def get_config_value(self, repo_root: Path, key: str) -> str | None:
        """Get a git configuration value (exit code 1 means unset)."""
        result = run_subprocess_with_context(
            cmd=["git", "config", "--get", key],
            operation_context=f"read git config {key}",
            cwd=repo_root,
            check=False,
        )
        if result.returncode != 0:
            return None
        return result.stdout.strip()
