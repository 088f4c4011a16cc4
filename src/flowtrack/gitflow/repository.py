"""Git-flow repository facade over the git gateway."""

from dataclasses import dataclass
from pathlib import Path

from flowtrack.gateway.git.abc import Git
from flowtrack.gateway.git.branch_ops.types import (
    BranchCreated,
    BranchCreateError,
    CheckoutResult,
    RebaseMode,
)
from flowtrack.gateway.git.config_ops.types import ConfigWriteError, ConfigWritten
from flowtrack.gateway.git.remote_ops.types import (
    DEFAULT_REMOTE_NAME,
    FetchError,
    FetchResult,
    RemoteRef,
)
from flowtrack.gitflow.config import GitFlowConfig, load_gitflow_config
from flowtrack.gitflow.naming import remote_feature_prefix


@dataclass(frozen=True)
class GitFlowRepository:
    """A repository together with its git-flow naming conventions.

    The handle is shared: operations borrow it and assume exclusive access to
    the repository for as long as they run. Nothing here locks.
    """

    root: Path
    git: Git
    config: GitFlowConfig

    @staticmethod
    def load(git: Git, root: Path) -> "GitFlowRepository":
        """Create a handle, reading the gitflow.* config from the repository."""
        return GitFlowRepository(root=root, git=git, config=load_gitflow_config(git, root))

    def has_branch(self, branch_name: str) -> bool:
        return self.git.branch.has_local_branch(self.root, branch_name)

    def get_current_branch(self) -> str | None:
        return self.git.branch.get_current_branch(self.root)

    def fetch(self, *, timeout: int, remote: str = DEFAULT_REMOTE_NAME) -> FetchResult | FetchError:
        return self.git.remote.fetch(self.root, remote, timeout=timeout)

    def create_local_branch(
        self, branch_name: str, start_point: str, *, rebase_mode: RebaseMode
    ) -> BranchCreated | BranchCreateError:
        return self.git.branch.create_local_branch(
            self.root, branch_name, start_point, rebase_mode=rebase_mode
        )

    def checkout(self, branch_name: str) -> CheckoutResult:
        return self.git.branch.checkout(self.root, branch_name)

    def set_remote(self, branch_name: str, remote: str) -> ConfigWritten | ConfigWriteError:
        """Write branch.<branch_name>.remote."""
        return self.git.config.set_config_value(self.root, f"branch.{branch_name}.remote", remote)

    def set_upstream_branch_name(
        self, branch_name: str, upstream: str
    ) -> ConfigWritten | ConfigWriteError:
        """Write branch.<branch_name>.merge (a full refs/heads/... name on the remote)."""
        return self.git.config.set_config_value(self.root, f"branch.{branch_name}.merge", upstream)

    def get_remote_feature_refs(self) -> list[RemoteRef]:
        """Remote-tracking refs of origin that follow the feature naming convention."""
        prefix = remote_feature_prefix(self.config)
        return [
            ref
            for ref in self.git.remote.list_remote_refs(self.root, DEFAULT_REMOTE_NAME)
            if ref.name.startswith(prefix) and len(ref.name) > len(prefix)
        ]
