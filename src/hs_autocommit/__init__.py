"""
hs-autocommit - daily auto commit for a hyper-scripter home.

Usage:
    hs-autocommit commit
    hs-autocommit commit --home ~/.config/hyper_scripter --no-edit
"""

import typer

from hs_autocommit.cli.commands import register_commands

app = typer.Typer(
    name="hs-autocommit",
    help="Sync a hyper-scripter home with its git remote and auto commit it",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def callback():
    """Sync a hyper-scripter home with its git remote and auto commit it."""


register_commands(app)


def main():
    app()


if __name__ == "__main__":
    main()
