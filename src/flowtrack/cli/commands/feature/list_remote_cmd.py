"""flowtrack feature list-remote: features that can be tracked from origin."""

import json

import click

from flowtrack.cli.ensure import Ensure
from flowtrack.core.context import FlowContext
from flowtrack.gitflow.naming import feature_name_from_remote_ref
from flowtrack.gitflow.repository import GitFlowRepository
from flowtrack.output import machine_output, user_output


@click.command("list-remote")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def list_remote_cmd(ctx: FlowContext, as_json: bool) -> None:
    """List feature branches on origin.

    Reads the remote-tracking refs as of the last fetch. Features that already
    have a local branch are marked as tracked.
    """
    repo_root = Ensure.repo_root(ctx)
    repository = GitFlowRepository.load(ctx.git, repo_root)

    entries = []
    for ref in repository.get_remote_feature_refs():
        feature_name = feature_name_from_remote_ref(ref.name, repository.config)
        local_branch = repository.config.get_feature_branch_name(feature_name)
        entries.append(
            {
                "feature": feature_name,
                "remote_ref": ref.name,
                "local_branch": local_branch,
                "tracked": repository.has_branch(local_branch),
            }
        )

    if as_json:
        machine_output(json.dumps(entries, indent=2))
        return

    if not entries:
        user_output("No feature branches on origin")
        return

    for entry in entries:
        line = entry["feature"]
        if entry["tracked"]:
            line += click.style(" (tracked)", dim=True)
        machine_output(line)
