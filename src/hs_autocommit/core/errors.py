"""Exception taxonomy for the auto-commit protocol."""

from __future__ import annotations

__all__ = [
    "AutoCommitError",
    "ConfigError",
    "DirtyTreeDeclinedError",
    "DivergedError",
    "GitCommandError",
    "HomeNotFoundError",
    "PromptInterrupted",
    "RemoteHomeChangedError",
]


class AutoCommitError(Exception):
    """Base class for every fatal condition of a sync run."""


class GitCommandError(AutoCommitError):
    """A git command exited with a non-zero status."""

    def __init__(self, args: list[str], returncode: int, stdout: str = "", stderr: str = ""):
        self.args_list = list(args)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        detail = stderr.strip().splitlines()[0] if stderr.strip() else ""
        message = f"Command `git {' '.join(args)}` exit with {returncode}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class DivergedError(AutoCommitError):
    """Local and remote branches both carry commits the other lacks."""

    def __init__(self, branch: str, remote_branch: str):
        self.branch = branch
        self.remote_branch = remote_branch
        super().__init__(f"branch {branch} is diverged from {remote_branch}!")


class DirtyTreeDeclinedError(AutoCommitError):
    """The operator refused to proceed with an unclean unrelated path."""

    def __init__(self, report):
        self.report = report
        super().__init__(f"{report.path} is not clean, aborted by user")


class RemoteHomeChangedError(AutoCommitError):
    """The remote modified the managed home; merging could lose local edits."""

    def __init__(self, remote_branch: str, diff_stat: str):
        self.remote_branch = remote_branch
        self.diff_stat = diff_stat
        super().__init__(f"remote home had changed on {remote_branch}!")


class HomeNotFoundError(AutoCommitError):
    """The managed home directory does not exist."""


class ConfigError(AutoCommitError):
    """Raised when the configuration file is invalid."""


class PromptInterrupted(AutoCommitError):
    """Ctrl-C was pressed while waiting for a confirmation key."""
