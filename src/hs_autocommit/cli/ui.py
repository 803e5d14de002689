"""Single-keypress yes/no confirmation for hs-autocommit."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

import readchar
from rich.console import Console

from hs_autocommit.cli.helpers import console as shared_console
from hs_autocommit.core.errors import PromptInterrupted


class KeyPress(Enum):
    YES = "yes"
    NO = "no"
    INTERRUPT = "interrupt"
    OTHER = "other"


def decode_key(raw: str) -> KeyPress:
    """Map a raw key string from readchar to a :class:`KeyPress`."""
    if raw == readchar.key.CTRL_C:
        return KeyPress.INTERRUPT
    if raw in ("y", "Y"):
        return KeyPress.YES
    if raw in ("n", "N"):
        return KeyPress.NO
    return KeyPress.OTHER


def read_key() -> KeyPress:
    """Block until one key is pressed and decode it."""
    try:
        raw = readchar.readkey()
    except KeyboardInterrupt:
        # recent readchar releases raise on Ctrl-C themselves
        return KeyPress.INTERRUPT
    return decode_key(raw)


def confirm(
    prompt_text: str,
    console: Optional[Console] = None,
    reader: Callable[[], KeyPress] = read_key,
) -> bool:
    """Ask ``prompt_text`` until the operator presses Y or N.

    Raises:
        PromptInterrupted: on Ctrl-C.
    """
    if console is None:
        console = shared_console
    while True:
        console.print(prompt_text, end=" ", markup=False, highlight=False)
        key = reader()
        if key is KeyPress.INTERRUPT:
            console.print()
            raise PromptInterrupted("Confirmation interrupted")
        if key is KeyPress.YES:
            console.print("Y")
            return True
        if key is KeyPress.NO:
            console.print("N")
            return False
        console.print("Only Y and N is allowed")
