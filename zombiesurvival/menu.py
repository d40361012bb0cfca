"""The title menu shown before a game starts."""

from __future__ import annotations

import re
from enum import IntEnum
from typing import TextIO

_BANNER = "=============================="

MENU_TEXT = (
    f"{_BANNER}\n"
    "\tZOMBIE SURVIVAL\n"
    f"{_BANNER}\n"
    "\t1. New Game\n"
    "\t2. Load Game (not implemented) \n"
    "\t3. Options (not implemented) \n"
    "\t4. Exit\n"
    "GAME START? : "
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class MenuChoice(IntEnum):
    """Entries of the title menu, numbered as they are shown."""

    NEW_GAME = 1
    LOAD_GAME = 2
    OPTIONS = 3
    EXIT = 4


def parse_choice(text: str) -> MenuChoice | None:
    """Read the leading number of an answer; None when it names no entry."""
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    try:
        return MenuChoice(int(match.group(1)))
    except ValueError:
        return None


def show_menu(stdin: TextIO, stdout: TextIO) -> MenuChoice | None:
    """Print the menu, read one answer line and return the entry chosen."""
    stdout.write(MENU_TEXT)
    stdout.flush()
    return parse_choice(stdin.readline())