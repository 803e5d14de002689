"""CLI command modules for hs-autocommit."""

from __future__ import annotations

import typer

from .commit import commit


def register_commands(app: typer.Typer) -> None:
    app.command()(commit)


__all__ = ["commit", "register_commands"]
