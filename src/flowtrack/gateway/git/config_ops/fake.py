"""Fake implementation of git configuration operations for testing."""

from dataclasses import dataclass
from pathlib import Path

from flowtrack.gateway.git.config_ops.abc import GitConfigOps
from flowtrack.gateway.git.config_ops.types import ConfigWriteError, ConfigWritten


@dataclass(frozen=True)
class ConfigSetRecord:
    """Record of a set_config_value operation."""

    repo_root: Path
    key: str
    value: str


class FakeGitConfigOps(GitConfigOps):
    """In-memory fake implementation for testing.

    Constructor Injection: pre-configured values and per-key write failures.
    Mutation Tracking: tracks successful set_config_value calls for test assertions.
    """

    def __init__(
        self,
        *,
        config_values: dict[tuple[Path, str], str] | None = None,
        set_failures: dict[str, str] | None = None,
    ) -> None:
        """Create FakeGitConfigOps with pre-configured state.

        Args:
            config_values: Mapping of (repo_root, key) -> config value
            set_failures: Mapping of key -> error message returned when that key is written
        """
        self._config_values = config_values if config_values is not None else {}
        self._set_failures = set_failures if set_failures is not None else {}

        # Mutation tracking
        self._config_sets: list[ConfigSetRecord] = []

    def set_config_value(
        self, repo_root: Path, key: str, value: str
    ) -> ConfigWritten | ConfigWriteError:
        if key in self._set_failures:
            return ConfigWriteError(key=key, message=self._set_failures[key])
        self._config_sets.append(ConfigSetRecord(repo_root=repo_root, key=key, value=value))
        self._config_values[(repo_root, key)] = value
        return ConfigWritten(key=key, value=value)

    def get_config_value(self, repo_root: Path, key: str) -> str | None:
        return self._config_values.get((repo_root, key))

    @property
    def config_sets(self) -> list[ConfigSetRecord]:
        """Read-only access to config writes for test assertions."""
        return list(self._config_sets)
