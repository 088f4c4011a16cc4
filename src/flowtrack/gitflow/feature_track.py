"""git flow feature track.

Creates a local branch for a feature that already exists on origin, checks it
out, and records origin as its upstream. Git offers no transaction across
these steps, so the operation runs them in a fixed order and stops at the
first failure, leaving whatever was already done in place:

    fetch -> precondition -> create branch -> checkout -> tracking config

No step is retried and no completed step is rolled back.
"""

import logging

from flowtrack.gateway.git.branch_ops.types import BranchCreateError, RebaseMode
from flowtrack.gateway.git.config_ops.types import ConfigWriteError
from flowtrack.gateway.git.remote_ops.types import (
    DEFAULT_REMOTE_NAME,
    FetchError,
    FetchResult,
    RemoteRef,
)
from flowtrack.gitflow.naming import (
    FeatureBranchNames,
    feature_name_from_remote_ref,
    resolve_feature_names,
)
from flowtrack.gitflow.progress import NullProgressMonitor, ProgressMonitor
from flowtrack.gitflow.repository import GitFlowRepository
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
    TrackState,
)

logger = logging.getLogger(__name__)

DEFAULT_FETCH_TIMEOUT = 60

# fetch, create, checkout
TOTAL_WORK = 3

_FAILURE_STATES: dict[type, TrackState] = {
    FetchFailed: TrackState.FETCH_FAILED,
    LocalBranchAlreadyExists: TrackState.ALREADY_EXISTS,
    BranchCreationFailed: TrackState.CREATE_FAILED,
    CheckoutFailed: TrackState.CHECKOUT_FAILED,
    ConfigWriteFailed: TrackState.CONFIG_FAILED,
    TrackCanceled: TrackState.CANCELED,
    TrackOperationFailed: TrackState.FAILED,
}


class FeatureTrackOperation:
    """Track a remote feature branch locally.

    Construct with from_remote_ref() or for_feature(), call execute() once,
    then inspect operation_result for what the fetch brought in.
    """

    def __init__(
        self,
        repository: GitFlowRepository,
        *,
        remote_feature: RemoteRef,
        feature_name: str,
        timeout: int,
    ) -> None:
        self._repository = repository
        self._remote_feature = remote_feature
        self._names = resolve_feature_names(feature_name, repository.config)
        self._timeout = timeout
        self._state = TrackState.START
        self._operation_result: FetchResult | None = None
        self._outcome: FeatureTracked | TrackError | None = None

    @classmethod
    def from_remote_ref(
        cls,
        repository: GitFlowRepository,
        ref: RemoteRef,
        *,
        timeout: int = DEFAULT_FETCH_TIMEOUT,
    ) -> "FeatureTrackOperation":
        """Track the feature a remote ref points at.

        Args:
            repository: Repository handle, borrowed for the operation's lifetime
            ref: Remote ref under refs/remotes/origin/<feature prefix>
            timeout: Seconds allowed for the fetch

        Raises:
            ValueError: If ref is not under the remote feature namespace
        """
        feature_name = feature_name_from_remote_ref(ref.name, repository.config)
        return cls(repository, remote_feature=ref, feature_name=feature_name, timeout=timeout)

    @classmethod
    def for_feature(
        cls,
        repository: GitFlowRepository,
        ref: RemoteRef,
        feature_name: str,
        *,
        timeout: int = DEFAULT_FETCH_TIMEOUT,
    ) -> "FeatureTrackOperation":
        """Track ref locally as the feature named feature_name.

        The local branch is the configured feature prefix plus feature_name,
        whatever the remote ref is called.
        """
        return cls(repository, remote_feature=ref, feature_name=feature_name, timeout=timeout)

    @property
    def names(self) -> FeatureBranchNames:
        return self._names

    @property
    def remote_feature(self) -> RemoteRef:
        return self._remote_feature

    @property
    def timeout(self) -> int:
        return self._timeout

    @property
    def state(self) -> TrackState:
        return self._state

    @property
    def outcome(self) -> FeatureTracked | TrackError | None:
        """Terminal result of execute(), or None before it ran."""
        return self._outcome

    @property
    def operation_result(self) -> FetchResult | None:
        """Result of the fetch step.

        Set as soon as the fetch succeeds, even when a later step fails.
        None if execute() was never called or the fetch did not complete.
        """
        return self._operation_result

    def execute(self, progress: ProgressMonitor | None = None) -> FeatureTracked | TrackError:
        """Run the track sequence.

        Args:
            progress: Receives three units of work (fetch, create, checkout)
                and is polled for cancellation between steps

        Returns:
            FeatureTracked, or the error of the first step that failed

        Raises:
            RuntimeError: If the operation was already executed
        """
        if self._state != TrackState.START:
            raise RuntimeError(
                f"Feature track of '{self._names.feature_name}' was already executed"
            )

        monitor = progress if progress is not None else NullProgressMonitor()
        monitor.begin(f"Tracking feature '{self._names.feature_name}'", TOTAL_WORK)
        try:
            outcome = self._run(monitor)
        except (RuntimeError, OSError, ValueError) as e:
            outcome = TrackOperationFailed(step=self._state, message=str(e))
        finally:
            monitor.done()

        if isinstance(outcome, FeatureTracked):
            self._transition(TrackState.DONE)
        else:
            logger.debug("Feature track failed in %s: %s", self._state.value, outcome.message)
            self._transition(_FAILURE_STATES[type(outcome)])
        self._outcome = outcome
        return outcome

    def _run(self, monitor: ProgressMonitor) -> FeatureTracked | TrackError:
        names = self._names
        repository = self._repository

        if monitor.is_canceled:
            return TrackCanceled(step=TrackState.FETCHING)
        self._transition(TrackState.FETCHING)
        monitor.subtask(f"Fetching from {DEFAULT_REMOTE_NAME}")
        fetched = repository.fetch(timeout=self._timeout)
        monitor.worked(1)
        if isinstance(fetched, FetchError):
            return FetchFailed(remote=fetched.remote, message=fetched.message)
        self._operation_result = fetched
        self._transition(TrackState.FETCHED)

        self._transition(TrackState.CHECKING_PRECONDITIONS)
        if repository.has_branch(names.local_branch):
            return LocalBranchAlreadyExists(branch_name=names.local_branch)
        self._transition(TrackState.CLEAR)

        if monitor.is_canceled:
            return TrackCanceled(step=TrackState.CREATING_BRANCH)
        self._transition(TrackState.CREATING_BRANCH)
        monitor.subtask(f"Creating branch {names.local_branch}")
        created = repository.create_local_branch(
            names.local_branch, self._remote_feature.name, rebase_mode=RebaseMode.NONE
        )
        monitor.worked(1)
        if isinstance(created, BranchCreateError):
            return BranchCreationFailed(branch_name=names.local_branch, message=created.message)
        self._transition(TrackState.CREATED)

        if monitor.is_canceled:
            return TrackCanceled(step=TrackState.CHECKING_OUT)
        self._transition(TrackState.CHECKING_OUT)
        monitor.subtask(f"Checking out {names.local_branch}")
        checkout = repository.checkout(names.local_branch)
        monitor.worked(1)
        if not checkout.is_ok:
            return CheckoutFailed(
                branch_name=names.local_branch, status=checkout.status, detail=checkout.message
            )
        self._transition(TrackState.CHECKED_OUT)

        if monitor.is_canceled:
            return TrackCanceled(step=TrackState.WRITING_CONFIG)
        self._transition(TrackState.WRITING_CONFIG)
        remote_written = repository.set_remote(names.local_branch, DEFAULT_REMOTE_NAME)
        if isinstance(remote_written, ConfigWriteError):
            return _config_write_failed(names.local_branch, remote_written)
        upstream_written = repository.set_upstream_branch_name(
            names.local_branch, names.upstream_branch
        )
        if isinstance(upstream_written, ConfigWriteError):
            return _config_write_failed(names.local_branch, upstream_written)

        return FeatureTracked(
            local_branch=names.local_branch,
            remote=DEFAULT_REMOTE_NAME,
            upstream_branch=names.upstream_branch,
            fetch_result=fetched,
        )

    def _transition(self, state: TrackState) -> None:
        logger.debug("feature track %s: %s -> %s", self._names.feature_name, self._state, state)
        self._state = state


def _config_write_failed(branch_name: str, error: ConfigWriteError) -> ConfigWriteFailed:
    return ConfigWriteFailed(branch_name=branch_name, key=error.key, cause=error.message)
