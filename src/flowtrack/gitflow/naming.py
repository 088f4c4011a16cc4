"""Name resolution for feature branches.

Pure string composition over GitFlowConfig; nothing here touches git.
"""

from dataclasses import dataclass

from flowtrack.gateway.git.remote_ops.types import DEFAULT_REMOTE_NAME, R_REMOTES
from flowtrack.gitflow.config import GitFlowConfig

SEP = "/"
REMOTE_ORIGIN_PREFIX = R_REMOTES + DEFAULT_REMOTE_NAME + SEP


@dataclass(frozen=True)
class FeatureBranchNames:
    """Every name derived from one feature identifier.

    Attributes:
        feature_name: The identifier without any prefix (e.g. 'login')
        local_branch: Local branch to create (e.g. 'feature/login')
        remote_ref: Remote-tracking ref to start from
            (e.g. 'refs/remotes/origin/feature/login')
        upstream_branch: Value for branch.<local>.merge (e.g. 'refs/heads/feature/login')
    """

    feature_name: str
    local_branch: str
    remote_ref: str
    upstream_branch: str


def remote_feature_prefix(config: GitFlowConfig) -> str:
    """Namespace every remote feature ref lives under, e.g. 'refs/remotes/origin/feature/'."""
    return REMOTE_ORIGIN_PREFIX + config.feature_prefix


def resolve_feature_names(feature_name: str, config: GitFlowConfig) -> FeatureBranchNames:
    """Derive local, remote and upstream names for a feature.

    The identifier is used verbatim: no normalization or case-folding.

    Raises:
        ValueError: If feature_name is empty
    """
    if not feature_name:
        raise ValueError("Feature name must not be empty")
    return FeatureBranchNames(
        feature_name=feature_name,
        local_branch=config.get_feature_branch_name(feature_name),
        remote_ref=remote_feature_prefix(config) + feature_name,
        upstream_branch=config.get_full_feature_branch_name(feature_name),
    )


def feature_name_from_remote_ref(ref_name: str, config: GitFlowConfig) -> str:
    """Recover the feature identifier from a remote feature ref name.

    Callers pass refs enumerated under remote_feature_prefix(config); anything
    else is a programming error.

    Raises:
        ValueError: If ref_name is not a ref under the remote feature namespace
    """
    prefix = remote_feature_prefix(config)
    if not ref_name.startswith(prefix) or len(ref_name) == len(prefix):
        raise ValueError(f"'{ref_name}' is not a remote feature branch under '{prefix}'")
    return ref_name[len(prefix) :]
