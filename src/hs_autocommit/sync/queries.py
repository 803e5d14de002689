"""Read-only git queries used by the sync protocol.

None of these functions mutate the working tree, the index or any ref.
Failures propagate as :class:`~hs_autocommit.core.errors.GitCommandError`.
"""

from __future__ import annotations

from pathlib import Path

from hs_autocommit.core.errors import GitCommandError
from hs_autocommit.core.git_ops import run_git

__all__ = [
    "commits_between",
    "diff_stat",
    "last_commit_subject",
    "stash_ref",
    "status_porcelain",
]


def commits_between(repo_root: Path, exclude: str, include: str) -> list[str]:
    """Return SHAs reachable from ``include`` but not from ``exclude``."""
    output = run_git(repo_root, ["rev-list", f"{exclude}..{include}"]).stdout
    return [line.strip() for line in output.splitlines() if line.strip()]


def status_porcelain(repo_root: Path, path: Path) -> str:
    """Porcelain status restricted to ``path``; empty when clean."""
    return run_git(repo_root, ["status", "--porcelain", "--", str(path)]).stdout.rstrip()


def diff_stat(repo_root: Path, revision: str, path: Path) -> str:
    """Diff-stat between ``revision`` and the working tree, limited to ``path``."""
    return run_git(repo_root, ["diff", "--stat", revision, "--", str(path)]).stdout.rstrip()


def last_commit_subject(repo_root: Path) -> str:
    """Subject line of HEAD, or an empty string when there are no commits yet."""
    args = ["log", "--pretty=format:%s", "--max-count", "1"]
    result = run_git(repo_root, args, check=False)
    if result.returncode == 0:
        return result.stdout.strip()

    # A fresh repository has no HEAD to log
    head = run_git(repo_root, ["rev-parse", "-q", "--verify", "HEAD"], check=False)
    if head.returncode != 0:
        return ""
    raise GitCommandError(args, result.returncode, result.stdout, result.stderr)


def stash_ref(repo_root: Path) -> str | None:
    """SHA of the top stash entry, or ``None`` when the stash is empty."""
    result = run_git(repo_root, ["rev-parse", "-q", "--verify", "refs/stash"], check=False)
    sha = result.stdout.strip()
    return sha or None
