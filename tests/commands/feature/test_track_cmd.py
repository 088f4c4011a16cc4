"""Tests for flowtrack feature track."""

from pathlib import Path

from click.testing import CliRunner

from flowtrack.cli.cli import cli
from flowtrack.core.context import FlowContext
from flowtrack.gateway.git.branch_ops.fake import FakeGitBranchOps
from flowtrack.gateway.git.branch_ops.types import CheckoutResult, CheckoutStatus, RebaseMode
from flowtrack.gateway.git.config_ops.fake import FakeGitConfigOps
from flowtrack.gateway.git.fake import FakeGit
from flowtrack.gateway.git.remote_ops.fake import FakeGitRemoteOps
from flowtrack.gateway.git.remote_ops.types import FetchResult, RefUpdateKind, TrackingRefUpdate

REPO = Path("/repo")
LOGIN_FETCH = FetchResult(
    remote="origin",
    updates=(
        TrackingRefUpdate(
            kind=RefUpdateKind.NEW,
            old_object_id="0" * 40,
            new_object_id="a" * 40,
            local_ref="refs/remotes/origin/feature/login",
        ),
    ),
)


def _fake_git(
    *,
    root: Path = REPO,
    remote: FakeGitRemoteOps | None = None,
    branch: FakeGitBranchOps | None = None,
    config: FakeGitConfigOps | None = None,
) -> FakeGit:
    if branch is None:
        branch = FakeGitBranchOps(
            local_branches={root: ["develop"]}, current_branches={root: "develop"}
        )
    return FakeGit(remote=remote, branch=branch, config=config, repository_roots={root: root})


def test_track_feature_by_name() -> None:
    git = _fake_git(remote=FakeGitRemoteOps(fetch_results={(REPO, "origin"): LOGIN_FETCH}))
    ctx = FlowContext.for_test(git=git, cwd=REPO)

    runner = CliRunner()
    result = runner.invoke(cli, ["feature", "track", "login"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0, result.output
    assert "[1/3] Fetching from origin" in result.output
    assert "Fetched 1 ref update(s)" in result.output
    assert "Tracking 'feature/login' from 'origin'" in result.output
    assert git.remote.fetch_calls == [(REPO, "origin", 60)]
    assert git.branch.created_branches == [
        (REPO, "feature/login", "refs/remotes/origin/feature/login", RebaseMode.NONE)
    ]
    assert git.branch.get_current_branch(REPO) == "feature/login"
    assert git.config.get_config_value(REPO, "branch.feature/login.remote") == "origin"
    assert (
        git.config.get_config_value(REPO, "branch.feature/login.merge")
        == "refs/heads/feature/login"
    )


def test_track_reports_up_to_date_remote() -> None:
    git = _fake_git()
    ctx = FlowContext.for_test(git=git, cwd=REPO)

    runner = CliRunner()
    result = runner.invoke(cli, ["feature", "track", "login"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0, result.output
    assert "Remote already up to date" in result.output


def test_track_from_subdirectory() -> None:
    git = _fake_git()
    ctx = FlowContext.for_test(git=git, cwd=REPO / "src" / "app")

    runner = CliRunner()
    result = runner.invoke(cli, ["feature", "track", "login"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0, result.output
    assert git.branch.get_current_branch(REPO) == "feature/login"


def test_track_full_remote_ref() -> None:
    git = _fake_git()
    ctx = FlowContext.for_test(git=git, cwd=REPO)

    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["feature", "track", "refs/remotes/origin/feature/signup"],
        obj=ctx,
        catch_exceptions=False,
    )

    assert result.exit_code == 0, result.output
    assert "Tracking 'feature/signup' from 'origin'" in result.output
    assert git.branch.created_branches[0][1:3] == (
        "feature/signup",
        "refs/remotes/origin/feature/signup",
    )


def test_track_rejects_ref_outside_feature_namespace() -> None:
    git = _fake_git()
    ctx = FlowContext.for_test(git=git, cwd=REPO)

    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["feature", "track", "refs/remotes/origin/release/1.0"],
        obj=ctx,
        catch_exceptions=False,
    )

    assert result.exit_code == 1
    assert "not a remote feature branch" in result.output
    assert git.remote.fetch_calls == []


def test_track_uses_configured_feature_prefix() -> None:
    git = _fake_git(
        config=FakeGitConfigOps(config_values={(REPO, "gitflow.prefix.feature"): "feat-"})
    )
    ctx = FlowContext.for_test(git=git, cwd=REPO)

    runner = CliRunner()
    result = runner.invoke(cli, ["feature", "track", "login"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0, result.output
    assert "Tracking 'feat-login' from 'origin'" in result.output


def test_track_fails_when_local_branch_exists() -> None:
    git = _fake_git(
        branch=FakeGitBranchOps(
            local_branches={REPO: ["develop", "feature/login"]},
            current_branches={REPO: "develop"},
        )
    )
    ctx = FlowContext.for_test(git=git, cwd=REPO)

    runner = CliRunner()
    result = runner.invoke(cli, ["feature", "track", "login"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "Error: Local branch 'feature/login' already exists" in result.output
    assert git.branch.created_branches == []
    assert git.branch.get_current_branch(REPO) == "develop"


def test_track_fails_when_fetch_fails() -> None:
    git = _fake_git(
        remote=FakeGitRemoteOps(
            fetch_failures={(REPO, "origin"): "fatal: Could not read from remote repository."}
        )
    )
    ctx = FlowContext.for_test(git=git, cwd=REPO)

    runner = CliRunner()
    result = runner.invoke(cli, ["feature", "track", "login"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "Could not read from remote repository" in result.output
    assert git.branch.created_branches == []


def test_track_checkout_failure_explains_leftover_branch() -> None:
    git = _fake_git(
        branch=FakeGitBranchOps(
            local_branches={REPO: ["develop"]},
            current_branches={REPO: "develop"},
            checkout_results={
                "feature/login": CheckoutResult(
                    status=CheckoutStatus.CONFLICTS,
                    conflicting_paths=("notes.txt",),
                    message="error: The following untracked working tree files would be "
                    "overwritten by checkout:\n\tnotes.txt",
                )
            },
        )
    )
    ctx = FlowContext.for_test(git=git, cwd=REPO)

    runner = CliRunner()
    result = runner.invoke(cli, ["feature", "track", "login"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "Checkout of 'feature/login' returned CONFLICTS" in result.output
    assert "notes.txt" in result.output
    assert "was created but not checked out" in result.output
    assert git.branch.has_local_branch(REPO, "feature/login")


def test_track_timeout_option() -> None:
    git = _fake_git()
    ctx = FlowContext.for_test(git=git, cwd=REPO)

    runner = CliRunner()
    result = runner.invoke(
        cli, ["feature", "track", "login", "--timeout", "7"], obj=ctx, catch_exceptions=False
    )

    assert result.exit_code == 0, result.output
    assert git.remote.fetch_calls == [(REPO, "origin", 7)]


def test_track_rejects_non_positive_timeout() -> None:
    ctx = FlowContext.for_test(git=_fake_git(), cwd=REPO)

    runner = CliRunner()
    result = runner.invoke(cli, ["feature", "track", "login", "--timeout", "0"], obj=ctx)

    assert result.exit_code == 2


def test_track_reads_timeout_from_config_file(tmp_path: Path) -> None:
    (tmp_path / ".flowtrack").mkdir()
    (tmp_path / ".flowtrack" / "config.toml").write_text("[fetch]\ntimeout = 15\n")
    git = _fake_git(root=tmp_path)
    ctx = FlowContext.for_test(git=git, cwd=tmp_path)

    runner = CliRunner()
    result = runner.invoke(cli, ["feature", "track", "login"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0, result.output
    assert git.remote.fetch_calls == [(tmp_path, "origin", 15)]


def test_track_reports_invalid_config_file(tmp_path: Path) -> None:
    (tmp_path / ".flowtrack").mkdir()
    (tmp_path / ".flowtrack" / "config.toml").write_text("[fetch]\ntimeout = -1\n")
    git = _fake_git(root=tmp_path)
    ctx = FlowContext.for_test(git=git, cwd=tmp_path)

    runner = CliRunner()
    result = runner.invoke(cli, ["feature", "track", "login"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "positive integer" in result.output
    assert git.remote.fetch_calls == []


def test_track_reports_fetch_key_that_is_not_a_table(tmp_path: Path) -> None:
    (tmp_path / ".flowtrack").mkdir()
    (tmp_path / ".flowtrack" / "config.toml").write_text("fetch = 5\n")
    git = _fake_git(root=tmp_path)
    ctx = FlowContext.for_test(git=git, cwd=tmp_path)

    runner = CliRunner()
    result = runner.invoke(cli, ["feature", "track", "login"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "Error: " in result.output
    assert "[fetch] must be a table" in result.output
    assert git.remote.fetch_calls == []


def test_track_outside_repository() -> None:
    ctx = FlowContext.for_test(git=FakeGit(), cwd=Path("/not/a/repo"))

    runner = CliRunner()
    result = runner.invoke(cli, ["feature", "track", "login"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "Not in a git repository" in result.output


def test_track_dry_run_prints_commands_without_mutating() -> None:
    git = _fake_git()
    ctx = FlowContext.for_test(git=git, cwd=REPO)

    runner = CliRunner()
    result = runner.invoke(
        cli, ["feature", "track", "login", "--dry-run"], obj=ctx, catch_exceptions=False
    )

    assert result.exit_code == 0, result.output
    assert "[DRY RUN] $ git fetch --porcelain origin" in result.output
    assert (
        "[DRY RUN] $ git branch --no-track feature/login refs/remotes/origin/feature/login"
        in result.output
    )
    assert "[DRY RUN] $ git checkout feature/login" in result.output
    assert "[DRY RUN] $ git config --local branch.feature/login.merge" in result.output
    assert "[DRY RUN] Would track 'feature/login' from 'origin'" in result.output
    assert "Remote already up to date" not in result.output
    assert "✓ Tracking" not in result.output
    assert git.remote.fetch_calls == []
    assert git.branch.created_branches == []
    assert git.branch.get_current_branch(REPO) == "develop"
    assert git.config.config_sets == []


def test_track_rejects_empty_name() -> None:
    git = _fake_git()
    ctx = FlowContext.for_test(git=git, cwd=REPO)

    runner = CliRunner()
    result = runner.invoke(cli, ["feature", "track", ""], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "Feature name must not be empty" in result.output
    assert git.remote.fetch_calls == []
