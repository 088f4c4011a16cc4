"""CLI error handling for non-ideal-state type narrowing.

This module provides the EnsureIdeal class for narrowing types from operations
that can return non-ideal states. Unlike ensure.py which contains
invariant/precondition checks, this module narrows discriminated union types by
handling the non-ideal cases and exiting with user-friendly errors.
"""

from typing import TypeVar

import click

from flowtrack.gitflow.types import (
    BranchCreationFailed,
    CheckoutFailed,
    ConfigWriteFailed,
    FeatureTracked,
    FetchFailed,
    LocalBranchAlreadyExists,
    TrackCanceled,
    TrackError,
    TrackOperationFailed,
)
from flowtrack.non_ideal_state import NonIdealState
from flowtrack.output import user_output

T = TypeVar("T")


def _recovery_hint(error: TrackError) -> str:
    """What the user can do next, given how far the repository got."""
    if isinstance(error, FetchFailed):
        return "Nothing was changed. Check your network and credentials, then retry."
    if isinstance(error, LocalBranchAlreadyExists):
        return (
            f"Nothing was changed. Check out '{error.branch_name}' directly "
            "or track the feature under another name."
        )
    if isinstance(error, BranchCreationFailed):
        return f"Inspect 'git branch --list {error.branch_name}' before retrying."
    if isinstance(error, CheckoutFailed):
        return (
            f"Branch '{error.branch_name}' was created but not checked out. "
            f"Retry with 'git checkout {error.branch_name}' or delete it with "
            f"'git branch -D {error.branch_name}'."
        )
    if isinstance(error, ConfigWriteFailed):
        return (
            f"Branch '{error.branch_name}' is checked out without upstream tracking. "
            f"Repair with 'git branch --set-upstream-to=origin/{error.branch_name}'."
        )
    if isinstance(error, TrackCanceled):
        return "Steps that already ran were kept."
    if isinstance(error, TrackOperationFailed):
        return f"Failed while {error.step.value}; inspect the repository before retrying."
    return ""


class EnsureIdeal:
    """Helper class for narrowing non-ideal-state discriminated unions."""

    @staticmethod
    def ideal_state(result: T | NonIdealState) -> T:
        """Ensure result is not a NonIdealState, otherwise exit with error.

        Raises:
            SystemExit: If result is NonIdealState (with exit code 1)
        """
        if isinstance(result, NonIdealState):
            user_output(click.style("Error: ", fg="red") + result.message)
            raise SystemExit(1)
        return result

    @staticmethod
    def tracked(result: FeatureTracked | TrackError) -> FeatureTracked:
        """Ensure the feature track operation succeeded.

        Prints the error, git's own output where there is one, and a recovery
        hint that depends on the step that failed.

        Raises:
            SystemExit: If tracking failed (with exit code 1)
        """
        if isinstance(result, FeatureTracked):
            return result

        user_output(click.style("Error: ", fg="red") + result.message)
        if isinstance(result, CheckoutFailed) and result.detail:
            user_output(click.style(result.detail, dim=True))
        hint = _recovery_hint(result)
        if hint:
            user_output(hint)
        raise SystemExit(1)
