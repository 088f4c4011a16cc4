"""Git-flow naming conventions, read from git config the way git-flow stores them."""

import logging
from dataclasses import dataclass
from pathlib import Path

from flowtrack.gateway.git.abc import Git
from flowtrack.gateway.git.branch_ops.types import R_HEADS

logger = logging.getLogger(__name__)

DEFAULT_FEATURE_PREFIX = "feature/"
DEFAULT_RELEASE_PREFIX = "release/"
DEFAULT_HOTFIX_PREFIX = "hotfix/"
DEFAULT_VERSION_TAG_PREFIX = ""
DEFAULT_DEVELOP_BRANCH = "develop"
DEFAULT_MASTER_BRANCH = "master"

FEATURE_PREFIX_KEY = "gitflow.prefix.feature"
RELEASE_PREFIX_KEY = "gitflow.prefix.release"
HOTFIX_PREFIX_KEY = "gitflow.prefix.hotfix"
VERSION_TAG_PREFIX_KEY = "gitflow.prefix.versiontag"
DEVELOP_BRANCH_KEY = "gitflow.branch.develop"
MASTER_BRANCH_KEY = "gitflow.branch.master"


@dataclass(frozen=True)
class GitFlowConfig:
    """In-memory representation of the gitflow.* section of a repository config.

    Example .git/config:
      [gitflow "branch"]
          master = main
          develop = develop
      [gitflow "prefix"]
          feature = feature/
          release = release/
          hotfix = hotfix/
          versiontag = v
    """

    feature_prefix: str = DEFAULT_FEATURE_PREFIX
    release_prefix: str = DEFAULT_RELEASE_PREFIX
    hotfix_prefix: str = DEFAULT_HOTFIX_PREFIX
    version_tag_prefix: str = DEFAULT_VERSION_TAG_PREFIX
    develop: str = DEFAULT_DEVELOP_BRANCH
    master: str = DEFAULT_MASTER_BRANCH

    def get_feature_branch_name(self, feature_name: str) -> str:
        """Local branch name of a feature, e.g. 'feature/login'."""
        return self.feature_prefix + feature_name

    def get_full_feature_branch_name(self, feature_name: str) -> str:
        """Fully qualified branch name of a feature, e.g. 'refs/heads/feature/login'."""
        return R_HEADS + self.get_feature_branch_name(feature_name)


def load_gitflow_config(git: Git, repo_root: Path) -> GitFlowConfig:
    """Read gitflow.* keys from git config, falling back to git-flow defaults.

    A key set to the empty string is honored as an empty prefix.
    """

    def _get(key: str, default: str) -> str:
        value = git.config.get_config_value(repo_root, key)
        if value is None:
            return default
        return value

    config = GitFlowConfig(
        feature_prefix=_get(FEATURE_PREFIX_KEY, DEFAULT_FEATURE_PREFIX),
        release_prefix=_get(RELEASE_PREFIX_KEY, DEFAULT_RELEASE_PREFIX),
        hotfix_prefix=_get(HOTFIX_PREFIX_KEY, DEFAULT_HOTFIX_PREFIX),
        version_tag_prefix=_get(VERSION_TAG_PREFIX_KEY, DEFAULT_VERSION_TAG_PREFIX),
        develop=_get(DEVELOP_BRANCH_KEY, DEFAULT_DEVELOP_BRANCH),
        master=_get(MASTER_BRANCH_KEY, DEFAULT_MASTER_BRANCH),
    )
    logger.debug("Loaded git-flow config for %s: %s", repo_root, config)
    return config
