"""Base class for gateway wrappers that echo git commands before running them."""

from typing import Any

import click

from flowtrack.output import user_output


class PrintingBase:
    """Shared plumbing for Printing* gateway wrappers.

    Subclasses also inherit from the gateway ABC they wrap and implement each
    method as: emit the equivalent git command, then delegate to `_wrapped`.

    Usage:
        printing_ops = PrintingGitRemoteOps(real_ops, script_mode=False, dry_run=False)
    """

    def __init__(self, wrapped: Any, *, script_mode: bool = False, dry_run: bool = False) -> None:
        """Create a printing wrapper.

        Args:
            wrapped: The implementation to delegate to (Real or DryRun)
            script_mode: Suppress all output (stdout is reserved for scripts)
            dry_run: Prefix printed commands with a dry-run marker
        """
        self._wrapped = wrapped
        self._script_mode = script_mode
        self._dry_run = dry_run

    def _emit(self, message: str) -> None:
        if self._script_mode:
            return
        user_output(message)

    def _format_command(self, command: str) -> str:
        prefix = click.style("[DRY RUN] ", fg="yellow") if self._dry_run else ""
        return prefix + click.style(f"$ {command}", dim=True)
