"""Sync subpackage: the repository synchronization and auto-commit protocol.

Modules:
    queries: Read-only git queries
    state: Branch state classification
    validator: Dirty-tree validation outside the managed home
    merge: Stash, verify, pull and restore for a branch that is behind
    compactor: Daily rolling auto commit
    protocol: The full run tying the steps together
"""

from __future__ import annotations

from .compactor import CommitOutcome, auto_commit, build_auto_commit_message
from .merge import safe_remote_merge
from .protocol import SyncReport, run_sync
from .state import BranchState, classify
from .validator import DirtyPathReport, validate_clean

__all__ = [
    "BranchState",
    "CommitOutcome",
    "DirtyPathReport",
    "SyncReport",
    "auto_commit",
    "build_auto_commit_message",
    "classify",
    "run_sync",
    "safe_remote_merge",
    "validate_clean",
]
