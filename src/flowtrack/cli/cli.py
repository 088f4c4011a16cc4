import logging

import click

from flowtrack.cli.commands.feature import feature_group
from flowtrack.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="flowtrack")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("-v", "--verbose", is_flag=True, help="Print each git command before running it")
@click.pass_context
def cli(ctx: click.Context, debug: bool, verbose: bool) -> None:
    """Work with git-flow branches that live on origin."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(dry_run=False, verbose=verbose)


cli.add_command(feature_group)
