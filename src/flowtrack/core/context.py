"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from flowtrack.gateway.git.abc import Git
from flowtrack.gateway.git.dry_run import DryRunGit
from flowtrack.gateway.git.fake import FakeGit
from flowtrack.gateway.git.printing import PrintingGit
from flowtrack.gateway.git.real import RealGit


@dataclass(frozen=True)
class FlowContext:
    """Immutable context holding all dependencies for flowtrack operations.

    Created at CLI entry point and threaded through the application via Click's
    context system. Frozen to prevent accidental modification at runtime.
    """

    git: Git
    cwd: Path
    dry_run: bool

    @staticmethod
    def for_test(
        git: Git | None = None,
        cwd: Path | None = None,
        dry_run: bool = False,
    ) -> "FlowContext":
        """Create a context around fakes.

        Args:
            git: Optional Git implementation, usually a pre-configured FakeGit.
                If None, creates an empty FakeGit.
            cwd: Optional working directory. If None, defaults to
                Path("/test/default/cwd") so tests never touch the real cwd.
            dry_run: Whether to wrap git with DryRunGit

        Example:
            >>> git = FakeGit(repository_roots={Path("/repo"): Path("/repo")})
            >>> ctx = FlowContext.for_test(git=git, cwd=Path("/repo"))
        """
        resolved_git: Git = git if git is not None else FakeGit()
        if dry_run:
            resolved_git = DryRunGit(resolved_git)
        return FlowContext(
            git=resolved_git,
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool, verbose: bool = False) -> FlowContext:
    """Create production context with real implementations.

    Args:
        dry_run: Replace every git mutation with a printed no-op
        verbose: Print each git command before running it

    Returns:
        FlowContext with RealGit, wrapped for dry-run or verbose output as requested
    """
    git: Git = RealGit()
    if dry_run:
        git = PrintingGit(DryRunGit(git), dry_run=True)
    elif verbose:
        git = PrintingGit(git)
    return FlowContext(git=git, cwd=Path.cwd(), dry_run=dry_run)


def with_dry_run(ctx: FlowContext) -> FlowContext:
    """Rewrap an existing context so git mutations are printed instead of run.

    Queries still reach the wrapped gateway, so a dry run reports against the
    repository's real state.
    """
    if ctx.dry_run:
        return ctx
    return FlowContext(
        git=PrintingGit(DryRunGit(ctx.git), dry_run=True),
        cwd=ctx.cwd,
        dry_run=True,
    )
