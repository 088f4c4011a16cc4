"""Tests for PrintingGit command echo."""

from pathlib import Path

import pytest

from flowtrack.gateway.git.branch_ops.types import RebaseMode
from flowtrack.gateway.git.dry_run import DryRunGit
from flowtrack.gateway.git.fake import FakeGit
from flowtrack.gateway.git.printing import PrintingGit

REPO = Path("/repo")


def test_printing_git_echoes_commands_and_delegates(capsys: pytest.CaptureFixture[str]) -> None:
    fake = FakeGit()
    git = PrintingGit(fake)

    git.remote.fetch(REPO, "origin", timeout=1)
    git.branch.create_local_branch(
        REPO, "feature/login", "refs/remotes/origin/feature/login", rebase_mode=RebaseMode.NONE
    )
    git.branch.checkout(REPO, "feature/login")
    git.config.set_config_value(REPO, "branch.feature/login.remote", "origin")

    err = capsys.readouterr().err
    assert "$ git fetch --porcelain origin" in err
    assert "$ git branch --no-track feature/login refs/remotes/origin/feature/login" in err
    assert "$ git config --local branch.feature/login.rebase false" in err
    assert "$ git checkout feature/login" in err
    assert "$ git config --local branch.feature/login.remote origin" in err
    assert "[DRY RUN]" not in err
    assert len(fake.remote.fetch_calls) == 1
    assert fake.branch.checked_out_branches == [(REPO, "feature/login")]


def test_printing_git_marks_dry_run(capsys: pytest.CaptureFixture[str]) -> None:
    fake = FakeGit()
    git = PrintingGit(DryRunGit(fake), dry_run=True)

    git.branch.checkout(REPO, "feature/login")

    assert "[DRY RUN] $ git checkout feature/login" in capsys.readouterr().err
    assert fake.branch.checked_out_branches == []


def test_printing_git_script_mode_is_silent(capsys: pytest.CaptureFixture[str]) -> None:
    git = PrintingGit(FakeGit(), script_mode=True)

    git.branch.checkout(REPO, "feature/login")

    assert capsys.readouterr().err == ""


def test_printing_git_queries_print_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    git = PrintingGit(FakeGit())

    git.branch.has_local_branch(REPO, "develop")
    git.config.get_config_value(REPO, "gitflow.prefix.feature")
    git.remote.list_remote_refs(REPO, "origin")

    assert capsys.readouterr().err == ""
