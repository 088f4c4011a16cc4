"""Output helpers for CLI commands with clear intent.

user_output is for humans (stderr), machine_output is for scripts and pipes
(stdout). Neither goes through logging.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Emit a message meant for the person at the terminal."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Emit structured or parseable output on stdout."""
    click.echo(message, nl=nl)
