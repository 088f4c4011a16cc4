"""Terminal progress monitor with Ctrl-C as a cooperative cancel request."""

import signal
from collections.abc import Iterator
from contextlib import contextmanager

import click

from flowtrack.gitflow.progress import ProgressMonitor
from flowtrack.output import user_output


class ClickProgressMonitor(ProgressMonitor):
    """Prints one line per step, e.g. "[1/3] Fetching from origin"."""

    def __init__(self, *, quiet: bool = False) -> None:
        self._quiet = quiet
        self._total = 0
        self._worked = 0
        self._canceled = False

    def begin(self, task_name: str, total_units: int) -> None:
        self._total = total_units
        if not self._quiet:
            user_output(click.style(task_name, bold=True))

    def subtask(self, name: str) -> None:
        if not self._quiet:
            user_output(click.style(f"[{self._worked + 1}/{self._total}] ", dim=True) + name)

    def worked(self, units: int) -> None:
        self._worked += units

    def done(self) -> None:
        pass

    def cancel(self) -> None:
        self._canceled = True

    @property
    def is_canceled(self) -> bool:
        return self._canceled


@contextmanager
def interrupt_requests_cancel(monitor: ClickProgressMonitor) -> Iterator[None]:
    """Turn SIGINT into a cancel request for the duration of the block.

    The running step finishes; the operation stops at the next step boundary.
    """
    previous = signal.getsignal(signal.SIGINT)

    def _handler(signum: int, frame: object) -> None:
        user_output(click.style("Cancel requested, stopping after the current step", fg="yellow"))
        monitor.cancel()

    signal.signal(signal.SIGINT, _handler)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)
