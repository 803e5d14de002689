"""End-to-end sync run: fetch, classify, validate, merge, commit."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Callable

from hs_autocommit.cli.helpers import console
from hs_autocommit.core.env import SyncContext
from hs_autocommit.core.errors import DivergedError
from hs_autocommit.core.git_ops import run_git
from hs_autocommit.sync.compactor import CommitOutcome, auto_commit, build_auto_commit_message
from hs_autocommit.sync.merge import safe_remote_merge
from hs_autocommit.sync.state import BranchState, classify
from hs_autocommit.sync.validator import DirtyPathReport, validate_clean

__all__ = ["SyncReport", "run_sync"]

logger = logging.getLogger(__name__)


@dataclass
class SyncReport:
    """What a completed run did."""

    state: BranchState
    message: str
    outcome: CommitOutcome
    dirty_paths: list[DirtyPathReport] = field(default_factory=list)
    merged: bool = False


def run_sync(
    ctx: SyncContext,
    confirm: Callable[[str], bool],
    today: date | None = None,
    edit: bool = True,
) -> SyncReport:
    """Run the whole protocol against ``ctx``.

    Nothing is pushed. Every failure propagates as an
    :class:`~hs_autocommit.core.errors.AutoCommitError` subclass.
    """
    if today is None:
        today = datetime.now(timezone.utc).date()

    run_git(ctx.repo_root, ["fetch", "--all"])
    state = classify(ctx.repo_root, ctx.branch, ctx.remote_branch)
    console.print(f"branch state = {state.value}")

    if state is BranchState.DIVERGED:
        raise DivergedError(ctx.branch, ctx.remote_branch)

    dirty_paths = validate_clean(ctx.repo_root, ctx.home, confirm)

    merged = False
    if state is BranchState.BEHIND:
        logger.info("Pulling %s into %s", ctx.remote_branch, ctx.branch)
        safe_remote_merge(ctx)
        merged = True

    outcome = auto_commit(ctx, today=today, edit=edit)
    return SyncReport(
        state=state,
        message=build_auto_commit_message(ctx.home, today),
        outcome=outcome,
        dirty_paths=dirty_paths,
        merged=merged,
    )
