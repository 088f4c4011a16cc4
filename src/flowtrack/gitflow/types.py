"""States, success result and error union of the feature track operation.

Each error implements NonIdealState and names the step that produced it, so
callers can tell how far the repository got before the sequence stopped.
"""

from dataclasses import dataclass
from enum import Enum

from flowtrack.gateway.git.branch_ops.types import CheckoutStatus
from flowtrack.gateway.git.remote_ops.types import FetchResult


class TrackState(Enum):
    """States of the feature track state machine."""

    START = "start"
    FETCHING = "fetching"
    FETCHED = "fetched"
    CHECKING_PRECONDITIONS = "checking-preconditions"
    CLEAR = "clear"
    CREATING_BRANCH = "creating-branch"
    CREATED = "created"
    CHECKING_OUT = "checking-out"
    CHECKED_OUT = "checked-out"
    WRITING_CONFIG = "writing-config"
    DONE = "done"
    FETCH_FAILED = "fetch-failed"
    ALREADY_EXISTS = "already-exists"
    CREATE_FAILED = "create-failed"
    CHECKOUT_FAILED = "checkout-failed"
    CONFIG_FAILED = "config-failed"
    CANCELED = "canceled"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINAL_STATES


_TERMINAL_STATES = frozenset(
    {
        TrackState.DONE,
        TrackState.FETCH_FAILED,
        TrackState.ALREADY_EXISTS,
        TrackState.CREATE_FAILED,
        TrackState.CHECKOUT_FAILED,
        TrackState.CONFIG_FAILED,
        TrackState.CANCELED,
        TrackState.FAILED,
    }
)


@dataclass(frozen=True)
class FeatureTracked:
    """Success: the local branch exists, is checked out and tracks the remote branch."""

    local_branch: str
    remote: str
    upstream_branch: str
    fetch_result: FetchResult


@dataclass(frozen=True)
class FetchFailed:
    """Network, authentication or timeout failure. Nothing was mutated."""

    remote: str
    message: str

    @property
    def error_type(self) -> str:
        return "fetch-failed"

    @property
    def step(self) -> TrackState:
        return TrackState.FETCHING


@dataclass(frozen=True)
class LocalBranchAlreadyExists:
    """The derived local branch name is taken. Nothing was mutated."""

    branch_name: str

    @property
    def message(self) -> str:
        return f"Local branch '{self.branch_name}' already exists"

    @property
    def error_type(self) -> str:
        return "local-branch-exists"

    @property
    def step(self) -> TrackState:
        return TrackState.CHECKING_PRECONDITIONS


@dataclass(frozen=True)
class BranchCreationFailed:
    """The ref update failed. The branch may or may not exist."""

    branch_name: str
    message: str

    @property
    def error_type(self) -> str:
        return "branch-creation-failed"

    @property
    def step(self) -> TrackState:
        return TrackState.CREATING_BRANCH


@dataclass(frozen=True)
class CheckoutFailed:
    """The branch was created but the working tree was not switched to it."""

    branch_name: str
    status: CheckoutStatus
    detail: str = ""

    @property
    def message(self) -> str:
        return f"Checkout of '{self.branch_name}' returned {self.status.name}"

    @property
    def error_type(self) -> str:
        return "checkout-failed"

    @property
    def step(self) -> TrackState:
        return TrackState.CHECKING_OUT


@dataclass(frozen=True)
class ConfigWriteFailed:
    """The branch is checked out but its tracking config is missing or partial."""

    branch_name: str
    key: str
    cause: str

    @property
    def message(self) -> str:
        return f"Unable to store git config: {self.cause}"

    @property
    def error_type(self) -> str:
        return "config-write-failed"

    @property
    def step(self) -> TrackState:
        return TrackState.WRITING_CONFIG


@dataclass(frozen=True)
class TrackCanceled:
    """Cancellation was requested; `step` is the step that did not start."""

    step: TrackState

    @property
    def message(self) -> str:
        return f"Tracking canceled before step '{self.step.value}'"

    @property
    def error_type(self) -> str:
        return "track-canceled"


@dataclass(frozen=True)
class TrackOperationFailed:
    """Unexpected failure from the git layer, with its original message."""

    step: TrackState
    message: str

    @property
    def error_type(self) -> str:
        return "track-operation-failed"


TrackError = (
    FetchFailed
    | LocalBranchAlreadyExists
    | BranchCreationFailed
    | CheckoutFailed
    | ConfigWriteFailed
    | TrackCanceled
    | TrackOperationFailed
)
