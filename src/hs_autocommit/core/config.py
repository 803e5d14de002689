"""User configuration for hs-autocommit"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import toml  # type: ignore[import-untyped]

from hs_autocommit.core.errors import ConfigError

DEFAULT_REMOTE = "origin"


@dataclass(slots=True)
class CommitConfig:
    """Settings stored under the ``[commit]`` table."""

    remote: str = DEFAULT_REMOTE
    edit: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "CommitConfig":
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError("[commit] must be a table")

        remote = data.get("remote", DEFAULT_REMOTE)
        if not isinstance(remote, str) or not remote.strip():
            raise ConfigError("commit.remote must be a non-empty string")

        edit = data.get("edit", True)
        if not isinstance(edit, bool):
            raise ConfigError("commit.edit must be a boolean")

        return cls(remote=remote.strip(), edit=edit)


class AutoCommitConfig:
    """Manage the hs-autocommit configuration file"""

    def __init__(self, config_dir: Path | None = None) -> None:
        self.config_dir = config_dir or Path.home() / ".hs-autocommit"
        self.config_file = self.config_dir / "config.toml"

    def load(self) -> CommitConfig:
        """Load the commit settings, falling back to defaults."""
        if not self.config_file.exists():
            return CommitConfig()

        try:
            config: dict[str, Any] = toml.load(self.config_file)
        except toml.TomlDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {self.config_file}: {exc}") from exc
        return CommitConfig.from_dict(config.get("commit"))
