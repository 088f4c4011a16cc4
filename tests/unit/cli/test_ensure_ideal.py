"""Tests for EnsureIdeal narrowing of track results."""

import pytest

from flowtrack.cli.ensure_ideal import EnsureIdeal
from flowtrack.gateway.git.branch_ops.types import CheckoutStatus
from flowtrack.gateway.git.remote_ops.types import FetchError, FetchResult
from flowtrack.gitflow.types import (
    CheckoutFailed,
    ConfigWriteFailed,
    FeatureTracked,
    FetchFailed,
    LocalBranchAlreadyExists,
    TrackCanceled,
    TrackState,
)

TRACKED = FeatureTracked(
    local_branch="feature/login",
    remote="origin",
    upstream_branch="refs/heads/feature/login",
    fetch_result=FetchResult(remote="origin", updates=()),
)


def test_ideal_state_passes_success_through() -> None:
    result = FetchResult(remote="origin", updates=())

    assert EnsureIdeal.ideal_state(result) is result


def test_ideal_state_exits_on_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        EnsureIdeal.ideal_state(FetchError(remote="origin", message="Could not resolve host"))

    assert exc_info.value.code == 1
    assert "Error: Could not resolve host" in capsys.readouterr().err


def test_tracked_passes_success_through() -> None:
    assert EnsureIdeal.tracked(TRACKED) is TRACKED


def test_tracked_exits_with_message_and_hint(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        EnsureIdeal.tracked(LocalBranchAlreadyExists(branch_name="feature/login"))

    assert exc_info.value.code == 1
    err = capsys.readouterr().err
    assert "Error: Local branch 'feature/login' already exists" in err
    assert "Nothing was changed" in err


def test_tracked_fetch_failure(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        EnsureIdeal.tracked(FetchFailed(remote="origin", message="timed out"))

    err = capsys.readouterr().err
    assert "Error: timed out" in err
    assert "Nothing was changed" in err


def test_tracked_checkout_failure_shows_git_output(capsys: pytest.CaptureFixture[str]) -> None:
    error = CheckoutFailed(
        branch_name="feature/login",
        status=CheckoutStatus.CONFLICTS,
        detail="error: untracked working tree files would be overwritten",
    )

    with pytest.raises(SystemExit):
        EnsureIdeal.tracked(error)

    err = capsys.readouterr().err
    assert "Checkout of 'feature/login' returned CONFLICTS" in err
    assert "untracked working tree files would be overwritten" in err
    assert "git checkout feature/login" in err


def test_tracked_config_failure_suggests_repair(capsys: pytest.CaptureFixture[str]) -> None:
    error = ConfigWriteFailed(branch_name="feature/login", key="k", cause="locked")

    with pytest.raises(SystemExit):
        EnsureIdeal.tracked(error)

    err = capsys.readouterr().err
    assert "Unable to store git config: locked" in err
    assert "--set-upstream-to=origin/feature/login" in err


def test_tracked_cancel(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        EnsureIdeal.tracked(TrackCanceled(step=TrackState.CHECKING_OUT))

    assert "Tracking canceled before step 'checking-out'" in capsys.readouterr().err
