from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from tests.hs_autocommit.helpers import SyncRepos, clone, commit_all, git


@pytest.fixture(autouse=True)
def _isolated_git_env(tmp_path: Path, monkeypatch):
    """Keep git away from the user's config and never block on an editor."""
    fake_home = tmp_path / "user_home"
    fake_home.mkdir()
    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "HS Tester")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "hs@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "HS Tester")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "hs@example.com")
    monkeypatch.setenv("GIT_EDITOR", "true")
    monkeypatch.delenv("HS_HOME", raising=False)


@pytest.fixture
def sync_repos(tmp_path: Path) -> SyncRepos:
    """Remote with ``my_scripts/`` (the home), ``notes/`` and a README."""
    root = tmp_path.resolve()
    seed = root / "seed"
    seed.mkdir()
    git(seed, "init", "--initial-branch=main")
    (seed / "README.md").write_text("# dotfiles\n", encoding="utf-8")
    (seed / "my_scripts").mkdir()
    (seed / "my_scripts" / "hello.sh").write_text("echo hello\n", encoding="utf-8")
    (seed / "notes").mkdir()
    (seed / "notes" / "todo.txt").write_text("nothing\n", encoding="utf-8")
    commit_all(seed, "Initial commit")

    remote = root / "remote.git"
    subprocess.run(
        ["git", "clone", "--bare", str(seed), str(remote)],
        check=True,
        capture_output=True,
    )

    local = clone(remote, root / "local")
    other = clone(remote, root / "other")
    return SyncRepos(remote=remote, local=local, other=other, home=local / "my_scripts")
