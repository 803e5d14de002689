"""Bring a ``behind`` branch up to date without losing local edits.

Sequence: stage and stash everything, make sure the remote did not touch the
managed home, pull, then restore the stash on top of the pulled state. If the
remote did touch the home, the stash is restored before the error is raised
so the working tree is never left half-stashed.
"""

from __future__ import annotations

import logging

from hs_autocommit.cli.helpers import console
from hs_autocommit.core.env import SyncContext
from hs_autocommit.core.errors import GitCommandError, RemoteHomeChangedError
from hs_autocommit.core.git_ops import run_git
from hs_autocommit.sync.queries import diff_stat, stash_ref

__all__ = ["safe_remote_merge"]

logger = logging.getLogger(__name__)


def safe_remote_merge(ctx: SyncContext) -> None:
    """Stash, verify, pull and restore for a branch that is behind its remote.

    Raises:
        RemoteHomeChangedError: the remote copy of the home differs from the
            local one; the stash has already been restored.
        GitCommandError: any git step failed.
    """
    run_git(ctx.repo_root, ["add", "-A"])
    before = stash_ref(ctx.repo_root)
    run_git(ctx.repo_root, ["stash"])
    stashed = stash_ref(ctx.repo_root) != before
    if not stashed:
        logger.info("Nothing to stash before pulling")

    # A home that was never committed vanishes with the stash
    if ctx.home.exists():
        try:
            diff = diff_stat(ctx.repo_root, ctx.remote_branch, ctx.home)
        except GitCommandError:
            if stashed:
                run_git(ctx.repo_root, ["stash", "pop"])
            raise
        if diff:
            console.print("[red]remote home had changed![/red]")
            console.print(diff, markup=False, highlight=False)
            if stashed:
                run_git(ctx.repo_root, ["stash", "pop"])
            raise RemoteHomeChangedError(ctx.remote_branch, diff)

    run_git(ctx.repo_root, ["pull", ctx.remote, ctx.branch])
    if stashed:
        run_git(ctx.repo_root, ["stash", "pop"])
