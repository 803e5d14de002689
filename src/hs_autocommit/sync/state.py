"""Branch state classification against the remote-tracking branch."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from hs_autocommit.sync.queries import commits_between

__all__ = ["BranchState", "classify", "state_from_sets"]


class BranchState(str, Enum):
    """Ancestry relationship between a local branch and its remote counterpart."""

    UP_TO_DATE = "up_to_date"
    AHEAD = "ahead"
    BEHIND = "behind"
    DIVERGED = "diverged"


def state_from_sets(ahead: bool, behind: bool) -> BranchState:
    if ahead and behind:
        return BranchState.DIVERGED
    if ahead:
        return BranchState.AHEAD
    if behind:
        return BranchState.BEHIND
    return BranchState.UP_TO_DATE


def classify(repo_root: Path, branch: str, remote_branch: str) -> BranchState:
    """Classify ``branch`` against ``remote_branch``.

    The remote-tracking ref is only as fresh as the last fetch, so callers
    fetch right before calling this.
    """
    ahead = commits_between(repo_root, remote_branch, branch)
    behind = commits_between(repo_root, branch, remote_branch)
    return state_from_sets(bool(ahead), bool(behind))
