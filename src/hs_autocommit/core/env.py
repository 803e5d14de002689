"""Resolution of the managed home and its enclosing repository."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from hs_autocommit.core.config import DEFAULT_REMOTE
from hs_autocommit.core.errors import HomeNotFoundError
from hs_autocommit.core.git_ops import run_git

__all__ = ["HOME_ENV_VAR", "SyncContext", "resolve_context"]

HOME_ENV_VAR = "HS_HOME"


@dataclass(frozen=True)
class SyncContext:
    """Per-run paths and names, resolved once and passed to every step."""

    home: Path
    repo_root: Path
    branch: str
    remote: str = DEFAULT_REMOTE

    @property
    def remote_branch(self) -> str:
        return f"{self.remote}/{self.branch}"


def resolve_context(home: Path, remote: str = DEFAULT_REMOTE) -> SyncContext:
    """Build a :class:`SyncContext` for ``home``.

    The home is symlink-resolved before anything else so that the identity
    checks of the dirty-tree walk compare canonical paths.
    """
    if not home.exists():
        raise HomeNotFoundError(f"Home directory {home} does not exist")
    real_home = home.resolve()

    toplevel = run_git(real_home, ["rev-parse", "--show-toplevel"]).stdout.strip()
    branch = run_git(real_home, ["rev-parse", "--abbrev-ref", "HEAD"]).stdout.strip()

    return SyncContext(
        home=real_home,
        repo_root=Path(toplevel).resolve(),
        branch=branch,
        remote=remote,
    )
