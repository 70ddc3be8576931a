"""Commit actuality of a homework solution.

A solution is *actual* when the commit recorded at submission time is still
the newest commit on the pull request branch. Every other outcome is a normal
result carrying a reason code, never an exception.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class ActualityReason(str, Enum):
    """Stable cause codes the review UI can branch on."""

    NO_STORED_COMMIT = "no_stored_commit"
    COMMITS_REMOVED = "commits_removed"
    LAST_COMMIT_NOT_FOUND = "last_commit_not_found"
    NEW_COMMITS_ADDED = "new_commits_added"
    ACTUAL = "actual"


_COMMENTS = {
    ActualityReason.NO_STORED_COMMIT: "No commit information was stored for this solution",
    ActualityReason.COMMITS_REMOVED: "Commits were removed from the branch. A force push may have happened",
    ActualityReason.LAST_COMMIT_NOT_FOUND: (
        "The solution's last commit was not found on the current branch. A force push may have happened"
    ),
    ActualityReason.NEW_COMMITS_ADDED: "New commits were added since the solution was last submitted",
    ActualityReason.ACTUAL: "",
}


@dataclass(frozen=True)
class StoredSolutionCommit:
    """Commit hash recorded when a solution was submitted."""

    commit_hash: str


@dataclass(frozen=True)
class ActualityResult:
    is_actual: bool
    comment: str
    additional_data: str  # stored commit hash, "" when none was recorded
    reason: ActualityReason

    @classmethod
    def from_reason(cls, reason: ActualityReason, additional_data: str = "") -> ActualityResult:
        comment = _COMMENTS[reason]
        return cls(is_actual=comment == "", comment=comment, additional_data=additional_data, reason=reason)

    def to_dict(self) -> dict:
        return {
            "is_actual": self.is_actual,
            "comment": self.comment,
            "additional_data": self.additional_data,
            "reason": self.reason.value,
        }


def _classify(live_commits: Sequence[str], stored_hash: str | None) -> ActualityReason:
    if stored_hash is None:
        return ActualityReason.NO_STORED_COMMIT
    if not live_commits:
        return ActualityReason.COMMITS_REMOVED
    if stored_hash not in set(live_commits):
        return ActualityReason.LAST_COMMIT_NOT_FOUND
    if live_commits[-1] != stored_hash:
        return ActualityReason.NEW_COMMITS_ADDED
    return ActualityReason.ACTUAL


def get_commit_actuality(
    live_commits: Sequence[str],
    last_commit: StoredSolutionCommit | None,
) -> ActualityResult:
    """Classify a stored solution commit against the commits now on the pull request.

    ``live_commits`` must be ordered oldest to newest, as GitHub lists them.
    Rules are checked from "nothing recorded" to "recorded but outdated"; the
    first one that applies decides the result.
    """
    stored_hash = last_commit.commit_hash if last_commit is not None else None
    reason = _classify(live_commits, stored_hash)
    return ActualityResult.from_reason(reason, additional_data=stored_hash or "")
