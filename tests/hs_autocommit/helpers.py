"""Git helpers shared by the hs_autocommit tests."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from hs_autocommit.core.env import SyncContext


def git(repo: Path, *args: str) -> str:
    completed = subprocess.run(
        ["git", *args],
        cwd=repo,
        check=True,
        capture_output=True,
        text=True,
    )
    return completed.stdout


def commit_all(repo: Path, message: str) -> None:
    git(repo, "add", "-A")
    git(repo, "commit", "-m", message)


def head_subject(repo: Path) -> str:
    return git(repo, "log", "--pretty=format:%s", "--max-count", "1").strip()


def head_sha(repo: Path, rev: str = "HEAD") -> str:
    return git(repo, "rev-parse", rev).strip()


def commit_count(repo: Path) -> int:
    return int(git(repo, "rev-list", "--count", "HEAD").strip())


def stash_count(repo: Path) -> int:
    return len(git(repo, "stash", "list").splitlines())


@dataclass
class SyncRepos:
    """A bare remote with two clones of it.

    ``local`` is the working tree being synchronized and ``home`` its managed
    directory; ``other`` stands in for another machine pushing to the remote.
    """

    remote: Path
    local: Path
    other: Path
    home: Path

    def context(self, remote: str = "origin") -> SyncContext:
        return SyncContext(home=self.home, repo_root=self.local, branch="main", remote=remote)

    def push_from_other(self, relpath: str, content: str, message: str = "remote change") -> None:
        target = self.other / relpath
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        commit_all(self.other, message)
        git(self.other, "push", "origin", "main")

    def commit_local(self, relpath: str, content: str, message: str = "local change") -> None:
        target = self.local / relpath
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        commit_all(self.local, message)

    def fetch(self) -> None:
        git(self.local, "fetch", "--all")


def clone(remote: Path, dest: Path) -> Path:
    subprocess.run(
        ["git", "clone", str(remote), str(dest)],
        check=True,
        capture_output=True,
    )
    git(dest, "config", "pull.rebase", "false")
    return dest


def add_backup_remote(repos: SyncRepos, name: str = "backup") -> Path:
    """Register a second bare remote on ``repos.local``, starting even with origin."""
    backup = repos.remote.parent / f"{name}.git"
    subprocess.run(
        ["git", "clone", "--bare", str(repos.remote), str(backup)],
        check=True,
        capture_output=True,
    )
    git(repos.local, "remote", "add", name, str(backup))
    return backup


def push_to(remote: Path, workdir: Path, relpath: str, content: str, message: str = "remote change") -> None:
    """Clone ``remote`` into ``workdir``, commit one file and push it back."""
    if not workdir.exists():
        clone(remote, workdir)
    target = workdir / relpath
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    commit_all(workdir, message)
    git(workdir, "push", "origin", "main")
