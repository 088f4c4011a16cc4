"""Cooperative progress reporting and cancellation for git-flow operations."""

from abc import ABC, abstractmethod


class ProgressMonitor(ABC):
    """Receives progress from a running operation and can ask it to stop.

    Operations call begin() once, subtask() and worked() as they go, and check
    is_canceled at step boundaries. Cancellation is never preemptive.
    """

    @abstractmethod
    def begin(self, task_name: str, total_units: int) -> None: ...

    @abstractmethod
    def subtask(self, name: str) -> None: ...

    @abstractmethod
    def worked(self, units: int) -> None: ...

    @abstractmethod
    def done(self) -> None: ...

    @property
    @abstractmethod
    def is_canceled(self) -> bool: ...


class NullProgressMonitor(ProgressMonitor):
    """Monitor used when the caller does not pass one. Never cancels."""

    def begin(self, task_name: str, total_units: int) -> None:
        pass

    def subtask(self, name: str) -> None:
        pass

    def worked(self, units: int) -> None:
        pass

    def done(self) -> None:
        pass

    @property
    def is_canceled(self) -> bool:
        return False


class FakeProgressMonitor(ProgressMonitor):
    """In-memory monitor for tests.

    Constructor Injection:
    ---------------------
    - cancel_after_units: report is_canceled once this many units were worked
      (0 cancels before the first step, None never cancels)

    Tracking:
    --------
    - tasks: (task_name, total_units) passed to begin()
    - subtasks: names passed to subtask()
    - units_worked: running total of worked() units
    - is_done: whether done() was called
    """

    def __init__(self, *, cancel_after_units: int | None = None) -> None:
        self._cancel_after_units = cancel_after_units
        self._tasks: list[tuple[str, int]] = []
        self._subtasks: list[str] = []
        self._units_worked = 0
        self._is_done = False

    def begin(self, task_name: str, total_units: int) -> None:
        self._tasks.append((task_name, total_units))

    def subtask(self, name: str) -> None:
        self._subtasks.append(name)

    def worked(self, units: int) -> None:
        self._units_worked += units

    def done(self) -> None:
        self._is_done = True

    @property
    def is_canceled(self) -> bool:
        if self._cancel_after_units is None:
            return False
        return self._units_worked >= self._cancel_after_units

    @property
    def tasks(self) -> list[tuple[str, int]]:
        return list(self._tasks)

    @property
    def subtasks(self) -> list[str]:
        return list(self._subtasks)

    @property
    def units_worked(self) -> int:
        return self._units_worked

    @property
    def is_done(self) -> bool:
        return self._is_done
