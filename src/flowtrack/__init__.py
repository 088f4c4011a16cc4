"""flowtrack CLI entry point.

This package provides a Click-based CLI for tracking git-flow feature branches
that already exist on a remote. See `flowtrack --help` for details.
"""

from flowtrack.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `flowtrack` console script."""
    cli()
