"""Daily rolling auto commit.

The commit message is generated from the UTC date and the home's basename,
e.g. ``[Auto Commit 2022-11-30 (my_scripts)]``. When HEAD's subject starts
with today's message, the new changes are folded into it through the final
amend instead of creating another commit. Editing the message so it no
longer starts with the generated prefix turns the commit into a regular one
that will never be amended automatically.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from enum import Enum
from pathlib import Path

from hs_autocommit.cli.helpers import console
from hs_autocommit.core.env import SyncContext
from hs_autocommit.core.git_ops import run_git
from hs_autocommit.sync.queries import last_commit_subject

__all__ = ["CommitOutcome", "auto_commit", "build_auto_commit_message", "is_auto_commit"]

logger = logging.getLogger(__name__)


class CommitOutcome(str, Enum):
    CREATED = "created"
    AMENDED = "amended"


def build_auto_commit_message(home: Path, today: date | None = None) -> str:
    if today is None:
        today = datetime.now(timezone.utc).date()
    return f"[Auto Commit {today.strftime('%Y-%m-%d')} ({home.name})]"


def is_auto_commit(subject: str, message: str) -> bool:
    """Whether ``subject`` belongs to the auto commit named by ``message``.

    Prefix match, so text appended after the generated message still counts.
    """
    return subject.startswith(message)


def auto_commit(
    ctx: SyncContext,
    today: date | None = None,
    edit: bool = True,
) -> CommitOutcome:
    """Stage everything and create or extend today's auto commit.

    The final ``git commit --amend`` always runs; with ``edit`` it opens the
    editor so the operator can review the message.
    """
    message = build_auto_commit_message(ctx.home, today)
    last_subject = last_commit_subject(ctx.repo_root)

    run_git(ctx.repo_root, ["add", "-A"])
    if is_auto_commit(last_subject, message):
        console.print("Amend the last commit")
        outcome = CommitOutcome.AMENDED
    else:
        console.print("Create new commit")
        run_git(ctx.repo_root, ["commit", "-m", message])
        outcome = CommitOutcome.CREATED

    amend_args = ["commit", "--amend"]
    if not edit:
        amend_args.append("--no-edit")
    run_git(ctx.repo_root, amend_args, capture=not edit)
    logger.debug("Auto commit %s: %s", outcome.value, message)
    return outcome
