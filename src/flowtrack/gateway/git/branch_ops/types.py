"""Value and discriminated union types for Git branch operations.

BranchCreated | BranchCreateError follows the NonIdealState pattern
established by FetchResult | FetchError in remote_ops/types.py.
"""

from dataclasses import dataclass
from enum import Enum

R_HEADS = "refs/heads/"


class RebaseMode(Enum):
    """How `git pull` integrates upstream changes into a branch.

    Values are what git stores under branch.<name>.rebase.
    """

    NONE = "false"
    REBASE = "true"
    MERGES = "merges"
    INTERACTIVE = "interactive"


@dataclass(frozen=True)
class BranchCreated:
    """Success result from creating a branch."""

    branch_name: str
    start_point: str


@dataclass(frozen=True)
class BranchCreateError:
    """Error: the ref update for a new branch failed. Implements NonIdealState."""

    branch_name: str
    message: str

    @property
    def error_type(self) -> str:
        return "branch-create-failed"


class CheckoutStatus(Enum):
    """Outcome classification of switching the working tree to a branch."""

    NOT_TRIED = "NOT_TRIED"
    OK = "OK"
    CONFLICTS = "CONFLICTS"
    NONDELETED = "NONDELETED"
    ERROR = "ERROR"


@dataclass(frozen=True)
class CheckoutResult:
    """Result of a checkout.

    Attributes:
        status: Outcome classification
        conflicting_paths: Paths git refused to overwrite (CONFLICTS only)
        message: Raw git output when status is not OK
    """

    status: CheckoutStatus
    conflicting_paths: tuple[str, ...] = ()
    message: str = ""

    @property
    def is_ok(self) -> bool:
        return self.status == CheckoutStatus.OK


def classify_checkout_failure(stderr: str) -> CheckoutResult:
    """Turn the stderr of a failed `git checkout` into a CheckoutResult."""
    conflicting: list[str] = []
    collecting = False
    for line in stderr.splitlines():
        if "would be overwritten by checkout" in line:
            collecting = True
            continue
        if collecting and line.startswith("\t"):
            conflicting.append(line.strip())
            continue
        collecting = False

    message = stderr.strip()
    if conflicting:
        return CheckoutResult(
            status=CheckoutStatus.CONFLICTS,
            conflicting_paths=tuple(conflicting),
            message=message,
        )
    if "did not match any file(s) known to git" in stderr or "invalid reference" in stderr:
        return CheckoutResult(status=CheckoutStatus.NOT_TRIED, message=message)
    if "unable to unlink" in stderr or "Deletion of directory" in stderr:
        return CheckoutResult(status=CheckoutStatus.NONDELETED, message=message)
    return CheckoutResult(status=CheckoutStatus.ERROR, message=message)
