"""Tests for feature branch name resolution."""

import pytest

from flowtrack.gitflow.config import GitFlowConfig
from flowtrack.gitflow.naming import (
    FeatureBranchNames,
    feature_name_from_remote_ref,
    remote_feature_prefix,
    resolve_feature_names,
)


def test_resolve_feature_names_with_default_prefix() -> None:
    names = resolve_feature_names("login", GitFlowConfig())

    assert names == FeatureBranchNames(
        feature_name="login",
        local_branch="feature/login",
        remote_ref="refs/remotes/origin/feature/login",
        upstream_branch="refs/heads/feature/login",
    )


def test_resolve_feature_names_with_custom_prefix() -> None:
    names = resolve_feature_names("login", GitFlowConfig(feature_prefix="feat-"))

    assert names.local_branch == "feat-login"
    assert names.remote_ref == "refs/remotes/origin/feat-login"
    assert names.upstream_branch == "refs/heads/feat-login"


def test_resolve_feature_names_with_empty_prefix() -> None:
    names = resolve_feature_names("login", GitFlowConfig(feature_prefix=""))

    assert names.local_branch == "login"
    assert names.remote_ref == "refs/remotes/origin/login"


def test_resolve_feature_names_keeps_nested_names_verbatim() -> None:
    """Slashes and case in the feature name are not normalized."""
    names = resolve_feature_names("JIRA-12/Login", GitFlowConfig())

    assert names.local_branch == "feature/JIRA-12/Login"
    assert names.upstream_branch == "refs/heads/feature/JIRA-12/Login"


def test_resolve_feature_names_rejects_empty_name() -> None:
    with pytest.raises(ValueError, match="must not be empty"):
        resolve_feature_names("", GitFlowConfig())


def test_remote_feature_prefix() -> None:
    assert remote_feature_prefix(GitFlowConfig()) == "refs/remotes/origin/feature/"


def test_feature_name_from_remote_ref_strips_prefix() -> None:
    name = feature_name_from_remote_ref("refs/remotes/origin/feature/login", GitFlowConfig())

    assert name == "login"


def test_feature_name_from_remote_ref_keeps_nested_suffix() -> None:
    name = feature_name_from_remote_ref("refs/remotes/origin/feature/a/b", GitFlowConfig())

    assert name == "a/b"


def test_feature_name_from_remote_ref_rejects_other_namespace() -> None:
    with pytest.raises(ValueError, match="not a remote feature branch"):
        feature_name_from_remote_ref("refs/remotes/origin/release/1.0", GitFlowConfig())


def test_feature_name_from_remote_ref_rejects_other_remote() -> None:
    with pytest.raises(ValueError):
        feature_name_from_remote_ref("refs/remotes/upstream/feature/login", GitFlowConfig())


def test_feature_name_from_remote_ref_rejects_bare_prefix() -> None:
    with pytest.raises(ValueError):
        feature_name_from_remote_ref("refs/remotes/origin/feature/", GitFlowConfig())


@pytest.mark.parametrize("prefix", ["feature/", "feat-", ""])
def test_remote_ref_round_trips_to_local_branch(prefix: str) -> None:
    """The local branch derived from a remote ref equals the ref minus the remote namespace."""
    config = GitFlowConfig(feature_prefix=prefix)
    ref_name = f"refs/remotes/origin/{prefix}login"

    feature_name = feature_name_from_remote_ref(ref_name, config)
    names = resolve_feature_names(feature_name, config)

    assert names.remote_ref == ref_name
    assert names.local_branch == ref_name.removeprefix("refs/remotes/origin/")
