"""Thin subprocess wrapper around the git executable.

Every call takes the working tree explicitly; nothing here relies on the
process working directory.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from hs_autocommit.core.errors import GitCommandError

__all__ = ["GitCommandResult", "run_git"]

logger = logging.getLogger(__name__)


@dataclass
class GitCommandResult:
    returncode: int
    stdout: str
    stderr: str


def run_git(
    repo_root: Path,
    args: list[str],
    *,
    capture: bool = True,
    check: bool = True,
) -> GitCommandResult:
    """Run ``git <args>`` inside ``repo_root``.

    With ``capture=False`` the child inherits the terminal, which is what
    interactive commands such as ``git commit --amend`` need.

    Raises:
        GitCommandError: when ``check`` is set and git exits non-zero, or when
            the git executable cannot be found.
    """
    logger.debug("git %s (cwd=%s)", " ".join(args), repo_root)
    try:
        if capture:
            completed = subprocess.run(
                ["git", *args],
                cwd=str(repo_root),
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        else:
            completed = subprocess.run(["git", *args], cwd=str(repo_root), check=False)
    except FileNotFoundError:
        raise GitCommandError(args, 127, stderr="git executable not found on PATH") from None

    result = GitCommandResult(
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )
    if check and result.returncode != 0:
        raise GitCommandError(args, result.returncode, result.stdout, result.stderr)
    return result
