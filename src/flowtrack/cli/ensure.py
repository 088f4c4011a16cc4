"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting preconditions in CLI
commands with consistent, user-friendly error messages. All errors use red
"Error:" prefix for visual consistency.
"""

from pathlib import Path
from typing import TYPE_CHECKING

import click

from flowtrack.output import user_output

if TYPE_CHECKING:
    from flowtrack.core.context import FlowContext


class Ensure:
    """Helper class for asserting preconditions with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def repo_root(ctx: "FlowContext") -> Path:
        """Ensure the current directory is inside a git repository.

        Returns:
            The repository root

        Raises:
            SystemExit: If git cannot find a repository (with exit code 1)
        """
        try:
            return ctx.git.get_repository_root(ctx.cwd)
        except RuntimeError:
            user_output(click.style("Error: ", fg="red") + f"Not in a git repository: {ctx.cwd}")
            raise SystemExit(1) from None
