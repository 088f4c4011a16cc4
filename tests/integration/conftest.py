"""Real-git fixtures: a bare origin, a seed clone that publishes branches, and a work clone."""

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

import pytest

from flowtrack.gateway.git.remote_ops.types import PORCELAIN_FETCH_MIN_VERSION, parse_git_version


def run_git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        [
            "git",
            "-c",
            "user.name=Test User",
            "-c",
            "user.email=test@example.com",
            "-c",
            "commit.gpgsign=false",
            *args,
        ],
        cwd=cwd,
        capture_output=True,
        text=True,
        errors="replace",
        check=True,
    )
    return result.stdout.strip()


def git_supports_porcelain_fetch() -> bool:
    output = subprocess.run(
        ["git", "--version"], capture_output=True, text=True, check=True
    ).stdout
    version = parse_git_version(output)
    return version is not None and version >= PORCELAIN_FETCH_MIN_VERSION


@pytest.fixture(autouse=True)
def _require_git() -> None:
    if shutil.which("git") is None:
        pytest.skip("requires the git binary")


@dataclass(frozen=True)
class GitFlowRemote:
    """A bare origin plus two clones of it.

    Attributes:
        origin: Bare repository acting as the shared remote
        seed: Clone used to publish branches to origin
        work: Clone the code under test operates on
    """

    origin: Path
    seed: Path
    work: Path

    def publish_feature(self, branch: str, files: dict[str, str]) -> str:
        """Commit files on a new branch off develop in seed and push it. Returns the commit."""
        run_git(self.seed, "checkout", "-q", "-b", branch, "develop")
        for name, content in files.items():
            (self.seed / name).write_text(content, encoding="utf-8")
        run_git(self.seed, "add", "--all")
        run_git(self.seed, "commit", "-q", "-m", f"Work on {branch}")
        run_git(self.seed, "push", "-q", "origin", branch)
        run_git(self.seed, "checkout", "-q", "develop")
        return run_git(self.seed, "rev-parse", branch)

    def rewrite_feature(self, branch: str, message: str) -> str:
        """Amend the tip of a published branch and force-push it. Returns the new commit."""
        run_git(self.seed, "checkout", "-q", branch)
        run_git(self.seed, "commit", "-q", "--amend", "-m", message)
        run_git(self.seed, "push", "-q", "--force", "origin", branch)
        run_git(self.seed, "checkout", "-q", "develop")
        return run_git(self.seed, "rev-parse", branch)


@pytest.fixture
def gitflow_remote(tmp_path: Path) -> GitFlowRemote:
    origin = tmp_path / "origin.git"
    seed = tmp_path / "seed"
    work = tmp_path / "work"

    run_git(tmp_path, "init", "-q", "--bare", "-b", "develop", str(origin))
    run_git(tmp_path, "clone", "-q", str(origin), str(seed))
    run_git(seed, "symbolic-ref", "HEAD", "refs/heads/develop")
    (seed / "README.md").write_text("# project\n", encoding="utf-8")
    run_git(seed, "add", "README.md")
    run_git(seed, "commit", "-q", "-m", "Initial commit")
    run_git(seed, "push", "-q", "origin", "develop")
    run_git(tmp_path, "clone", "-q", str(origin), str(work))

    return GitFlowRemote(origin=origin, seed=seed, work=work)
