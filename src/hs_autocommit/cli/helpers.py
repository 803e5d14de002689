"""Shared console for hs-autocommit output.

Everything the operator reads goes to stderr so stdout stays free for
scripts wrapping the command.
"""

from __future__ import annotations

from rich.console import Console

console = Console(stderr=True, soft_wrap=True)

__all__ = ["console"]
