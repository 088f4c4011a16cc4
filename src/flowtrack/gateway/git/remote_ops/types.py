"""Value and discriminated union types for Git remote operations.

FetchResult | FetchError follows the NonIdealState pattern: the error half
carries error_type and message, the success half carries what was fetched.
"""

import re
from dataclasses import dataclass
from enum import Enum

from packaging.version import Version

R_REMOTES = "refs/remotes/"
DEFAULT_REMOTE_NAME = "origin"

# First git release with `git fetch --porcelain`
PORCELAIN_FETCH_MIN_VERSION = Version("2.41")


@dataclass(frozen=True)
class RemoteRef:
    """A remote-tracking ref such as refs/remotes/origin/feature/login."""

    name: str
    object_id: str | None = None

    @property
    def short_name(self) -> str:
        """Name without the refs/remotes/ namespace (e.g. 'origin/feature/login')."""
        if self.name.startswith(R_REMOTES):
            return self.name[len(R_REMOTES) :]
        return self.name


class RefUpdateKind(Enum):
    """Flag column of `git fetch --porcelain` output."""

    FAST_FORWARD = " "
    FORCED = "+"
    PRUNED = "-"
    TAG = "t"
    NEW = "*"
    REJECTED = "!"
    UP_TO_DATE = "="


@dataclass(frozen=True)
class TrackingRefUpdate:
    """One local ref touched by a fetch."""

    kind: RefUpdateKind
    old_object_id: str
    new_object_id: str
    local_ref: str


@dataclass(frozen=True)
class FetchResult:
    """Success result from fetching a remote.

    The tracking operation stores this verbatim for callers; it never looks
    inside beyond success or failure.
    """

    remote: str
    updates: tuple[TrackingRefUpdate, ...]

    @property
    def updated_refs(self) -> tuple[TrackingRefUpdate, ...]:
        """Updates that actually moved or created a local ref."""
        return tuple(
            u
            for u in self.updates
            if u.kind not in (RefUpdateKind.UP_TO_DATE, RefUpdateKind.REJECTED)
        )

    @property
    def rejected_refs(self) -> tuple[TrackingRefUpdate, ...]:
        return tuple(u for u in self.updates if u.kind == RefUpdateKind.REJECTED)

    @property
    def is_up_to_date(self) -> bool:
        """True when the fetch brought nothing new."""
        return not self.updated_refs

    def get_update(self, local_ref: str) -> TrackingRefUpdate | None:
        for update in self.updates:
            if update.local_ref == local_ref:
                return update
        return None


@dataclass(frozen=True)
class FetchError:
    """Error result from fetching a remote. Implements NonIdealState."""

    remote: str
    message: str

    @property
    def error_type(self) -> str:
        return "fetch-failed"


def parse_fetch_porcelain(remote: str, stdout: str) -> FetchResult:
    """Parse `git fetch --porcelain` output into a FetchResult.

    Each line has the form "<flag> <old-oid> <new-oid> <local-ref>", where the
    flag of a fast-forward is a single space.
    """
    flags = {kind.value: kind for kind in RefUpdateKind}
    updates: list[TrackingRefUpdate] = []
    for line in stdout.splitlines():
        if len(line) < 2 or line[0] not in flags:
            continue
        parts = line[2:].split(" ", 2)
        if len(parts) != 3:
            continue
        old_oid, new_oid, local_ref = parts
        updates.append(
            TrackingRefUpdate(
                kind=flags[line[0]],
                old_object_id=old_oid,
                new_object_id=new_oid,
                local_ref=local_ref.strip(),
            )
        )
    return FetchResult(remote=remote, updates=tuple(updates))


def parse_git_version(version_output: str) -> Version | None:
    """Extract the version from `git --version` output.

    Handles vendor suffixes such as "2.39.3 (Apple Git-145)" and
    "2.41.0.windows.1". Returns None when no version number is present.
    """
    match = re.search(r"(\d+\.\d+(?:\.\d+)?)", version_output)
    if match is None:
        return None
    return Version(match.group(1))


def fetch_result_from_ref_snapshots(
    remote: str,
    before: dict[str, str],
    after: dict[str, str],
    *,
    forced_refs: frozenset[str] = frozenset(),
) -> FetchResult:
    """Build a FetchResult by comparing remote-tracking refs around a plain fetch.

    Used where `git fetch --porcelain` is unavailable. Refs are mapped to their
    object ids; forced_refs names the changed refs whose old tip is not an
    ancestor of the new one. Tags are not reported.
    """
    updates: list[TrackingRefUpdate] = []
    for ref in sorted(before.keys() | after.keys()):
        if ref not in before:
            kind = RefUpdateKind.NEW
            new_oid = after[ref]
            old_oid = "0" * len(new_oid)
        elif ref not in after:
            kind = RefUpdateKind.PRUNED
            old_oid = before[ref]
            new_oid = "0" * len(old_oid)
        elif before[ref] == after[ref]:
            continue
        else:
            kind = RefUpdateKind.FORCED if ref in forced_refs else RefUpdateKind.FAST_FORWARD
            old_oid = before[ref]
            new_oid = after[ref]
        updates.append(
            TrackingRefUpdate(
                kind=kind, old_object_id=old_oid, new_object_id=new_oid, local_ref=ref
            )
        )
    return FetchResult(remote=remote, updates=tuple(updates))
