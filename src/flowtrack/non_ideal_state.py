"""Protocol shared by every non-ideal outcome returned instead of raised.

Gateway methods and operations return `Success | SomeError` unions where the
error half is a frozen dataclass exposing `error_type` and `message`. Callers
narrow with isinstance checks; the CLI narrows with EnsureIdeal.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class NonIdealState(Protocol):
    """A result that describes why an operation did not reach its ideal state."""

    @property
    def error_type(self) -> str:
        """Stable kebab-case identifier for the failure kind."""
        ...

    @property
    def message(self) -> str:
        """Human-readable description, suitable for the terminal."""
        ...
