"""Core utilities: git runner, configuration, errors and context resolution."""

from .config import AutoCommitConfig, CommitConfig, DEFAULT_REMOTE
from .env import HOME_ENV_VAR, SyncContext, resolve_context
from .errors import (
    AutoCommitError,
    ConfigError,
    DirtyTreeDeclinedError,
    DivergedError,
    GitCommandError,
    HomeNotFoundError,
    PromptInterrupted,
    RemoteHomeChangedError,
)
from .git_ops import GitCommandResult, run_git

__all__ = [
    "AutoCommitConfig",
    "CommitConfig",
    "DEFAULT_REMOTE",
    "HOME_ENV_VAR",
    "SyncContext",
    "resolve_context",
    "AutoCommitError",
    "ConfigError",
    "DirtyTreeDeclinedError",
    "DivergedError",
    "GitCommandError",
    "HomeNotFoundError",
    "PromptInterrupted",
    "RemoteHomeChangedError",
    "GitCommandResult",
    "run_git",
]
