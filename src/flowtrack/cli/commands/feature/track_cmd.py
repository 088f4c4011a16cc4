"""flowtrack feature track: create a local branch for a feature on origin."""

import click

from flowtrack.cli.ensure import Ensure
from flowtrack.cli.ensure_ideal import EnsureIdeal
from flowtrack.cli.progress import ClickProgressMonitor, interrupt_requests_cancel
from flowtrack.core.config import load_config
from flowtrack.core.context import FlowContext, with_dry_run
from flowtrack.gateway.git.remote_ops.types import R_REMOTES, RemoteRef
from flowtrack.gitflow.feature_track import FeatureTrackOperation
from flowtrack.gitflow.naming import resolve_feature_names
from flowtrack.gitflow.repository import GitFlowRepository
from flowtrack.output import user_output


def _build_operation(
    repository: GitFlowRepository, name: str, timeout: int
) -> FeatureTrackOperation:
    if name.startswith(R_REMOTES):
        try:
            return FeatureTrackOperation.from_remote_ref(
                repository, RemoteRef(name=name), timeout=timeout
            )
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    names = resolve_feature_names(name, repository.config)
    return FeatureTrackOperation.for_feature(
        repository, RemoteRef(name=names.remote_ref), name, timeout=timeout
    )


@click.command("track")
@click.argument("name")
@click.option(
    "--timeout",
    type=click.IntRange(min=1),
    default=None,
    help="Seconds allowed for the fetch (default: .flowtrack/config.toml, or 60)",
)
@click.option("--dry-run", is_flag=True, help="Print the git commands without changing anything")
@click.pass_obj
def track_cmd(ctx: FlowContext, name: str, timeout: int | None, dry_run: bool) -> None:
    """Track the remote feature NAME as a local branch.

    NAME is a feature name such as 'login' or a full remote ref such as
    'refs/remotes/origin/feature/login'. The remote is fetched first; the
    local branch is then created from the remote branch, checked out and
    configured to track it.

    \b
    Usage:
      flowtrack feature track login
      flowtrack feature track refs/remotes/origin/feature/login
    """
    Ensure.invariant(name != "", "Feature name must not be empty")
    if dry_run:
        ctx = with_dry_run(ctx)

    repo_root = Ensure.repo_root(ctx)
    if timeout is None:
        try:
            timeout = load_config(repo_root).fetch_timeout
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    repository = GitFlowRepository.load(ctx.git, repo_root)
    operation = _build_operation(repository, name, timeout)

    monitor = ClickProgressMonitor()
    with interrupt_requests_cancel(monitor):
        result = operation.execute(monitor)
    tracked = EnsureIdeal.tracked(result)

    if ctx.dry_run:
        user_output(
            click.style("[DRY RUN] ", fg="yellow")
            + f"Would track '{tracked.local_branch}' from '{tracked.remote}'"
        )
        return

    fetch_result = tracked.fetch_result
    if fetch_result.is_up_to_date:
        user_output("Remote already up to date")
    else:
        user_output(f"Fetched {len(fetch_result.updated_refs)} ref update(s)")
    user_output(
        click.style("✓ ", fg="green")
        + f"Tracking '{tracked.local_branch}' from '{tracked.remote}'"
    )
