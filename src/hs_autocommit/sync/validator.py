"""Dirty-tree validation for paths that are not part of the managed home.

The walk starts at the repository root and only descends along the chain of
directories leading to the managed home. Every sibling subtree hanging off
that chain gets a single ``git status`` query; the managed home itself is
never checked since its contents are what gets committed.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from hs_autocommit.cli.helpers import console
from hs_autocommit.core.errors import DirtyTreeDeclinedError
from hs_autocommit.sync.queries import status_porcelain

__all__ = ["DirtyPathReport", "SKIPPED_ENTRIES", "validate_clean"]

logger = logging.getLogger(__name__)

SKIPPED_ENTRIES = frozenset({".git"})


@dataclass(frozen=True)
class DirtyPathReport:
    """Uncommitted changes found under a path unrelated to the home."""

    path: Path
    status_text: str


def _is_same_path(left: Path, right: Path) -> bool:
    try:
        return os.path.samefile(left, right)
    except OSError:
        return False


def _is_ancestor(candidate: Path, home: Path) -> bool:
    return candidate == home or candidate in home.parents


def validate_clean(
    repo_root: Path,
    home: Path,
    confirm: Callable[[str], bool],
) -> list[DirtyPathReport]:
    """Walk ``repo_root`` and ask ``confirm`` about every unclean unrelated path.

    Returns:
        The dirty paths the operator agreed to proceed with.

    Raises:
        DirtyTreeDeclinedError: as soon as the operator answers no.
    """
    accepted: list[DirtyPathReport] = []
    _check_path(repo_root, repo_root, home, confirm, accepted)
    return accepted


def _check_path(
    path: Path,
    repo_root: Path,
    home: Path,
    confirm: Callable[[str], bool],
    accepted: list[DirtyPathReport],
) -> None:
    if _is_same_path(home, path):
        return

    if not _is_ancestor(path, home):
        status = status_porcelain(repo_root, path)
        if not status:
            return
        report = DirtyPathReport(path=path, status_text=status)
        console.print(status, markup=False, highlight=False)
        if not confirm(f"{path} is not clean. Sure to proceed? [Y/N]"):
            raise DirtyTreeDeclinedError(report)
        logger.info("Proceeding with dirty path %s", path)
        accepted.append(report)
        return

    for entry in sorted(path.iterdir(), key=lambda p: p.name):
        if entry.name in SKIPPED_ENTRIES:
            continue
        _check_path(entry, repo_root, home, confirm, accepted)
