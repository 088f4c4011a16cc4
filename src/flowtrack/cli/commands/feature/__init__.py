"""Feature branch commands."""

import click

from flowtrack.cli.commands.feature.list_remote_cmd import list_remote_cmd
from flowtrack.cli.commands.feature.track_cmd import track_cmd


@click.group("feature")
def feature_group() -> None:
    """Manage git-flow feature branches."""
    pass


feature_group.add_command(track_cmd)
feature_group.add_command(list_remote_cmd)
