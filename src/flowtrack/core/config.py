import tomllib
from dataclasses import dataclass
from pathlib import Path

from flowtrack.gitflow.feature_track import DEFAULT_FETCH_TIMEOUT


@dataclass(frozen=True)
class LoadedConfig:
    """In-memory representation of `.flowtrack/config.toml`."""

    fetch_timeout: int


def load_config(repo_root: Path) -> LoadedConfig:
    """Load .flowtrack/config.toml from the repository root if present; otherwise defaults.

    Example config:
      [fetch]
      # seconds before a fetch from origin is abandoned
      timeout = 120

    Raises:
        ValueError: If the timeout is not a positive integer
    """
    cfg_path = repo_root / ".flowtrack" / "config.toml"
    if not cfg_path.exists():
        return LoadedConfig(fetch_timeout=DEFAULT_FETCH_TIMEOUT)

    data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    fetch = data.get("fetch", {})
    if not isinstance(fetch, dict):
        raise ValueError(f"{cfg_path}: [fetch] must be a table, got {fetch!r}")
    timeout = fetch.get("timeout", DEFAULT_FETCH_TIMEOUT)
    if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
        raise ValueError(f"{cfg_path}: [fetch] timeout must be a positive integer, got {timeout!r}")
    return LoadedConfig(fetch_timeout=timeout)
