"""Commit command implementation.

Creates (or extends) the daily auto commit for a hyper-scripter home after
bringing the branch up to date with its remote. Nothing is ever pushed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler
from rich.markup import escape

from hs_autocommit.cli.helpers import console
from hs_autocommit.cli.ui import confirm
from hs_autocommit.core.config import AutoCommitConfig
from hs_autocommit.core.env import HOME_ENV_VAR, resolve_context
from hs_autocommit.core.errors import (
    AutoCommitError,
    DirtyTreeDeclinedError,
    GitCommandError,
    PromptInterrupted,
    RemoteHomeChangedError,
)
from hs_autocommit.sync.protocol import run_sync

INTERRUPTED_EXIT_CODE = 130


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def commit(
    home: Path = typer.Option(
        ...,
        "--home",
        "-H",
        envvar=HOME_ENV_VAR,
        help="Hyper-scripter home to commit (defaults to $HS_HOME)",
    ),
    remote: Optional[str] = typer.Option(
        None,
        "--remote",
        help="Remote to sync with (defaults to the configured remote, then 'origin')",
    ),
    edit: Optional[bool] = typer.Option(
        None,
        "--edit/--no-edit",
        help="Open the editor on the final amend",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every git command"),
) -> None:
    """Create git commit for hyper-scripter home.

    The commit message is auto-generated by date and home name, e.g.
    [Auto Commit 2022-11-30 (my_scripts)]. Consecutive runs on the same day
    fold into that commit with --amend. Edit the message so it no longer
    starts with the generated text to keep the commit from being amended.
    """
    configure_logging(verbose)

    try:
        settings = AutoCommitConfig().load()
        ctx = resolve_context(home, remote=remote or settings.remote)
        report = run_sync(ctx, confirm, edit=settings.edit if edit is None else edit)
    except PromptInterrupted:
        console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(INTERRUPTED_EXIT_CODE)
    except DirtyTreeDeclinedError as exc:
        console.print(f"[red]Aborted:[/red] {escape(str(exc))}")
        raise typer.Exit(1)
    except RemoteHomeChangedError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        console.print("[dim]Local changes were restored; merge the remote home manually.[/dim]")
        raise typer.Exit(1)
    except GitCommandError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        if exc.stderr.strip():
            console.print(exc.stderr.rstrip(), markup=False, highlight=False)
        raise typer.Exit(1)
    except AutoCommitError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)

    console.print(
        f"[green]{report.outcome.value.capitalize()}[/green] {escape(report.message)}",
        highlight=False,
    )
