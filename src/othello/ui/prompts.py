from __future__ import annotations
from typing import Optional, Union

from othello.types import Move

COMMANDS = {
    "q": "quit", "quit": "quit", "exit": "quit",
    "u": "undo", "undo": "undo",
    "r": "restart", "restart": "restart",
    "h": "hints", "hints": "hints",
}


def parse_move(raw: str, size: int) -> Optional[Union[Move, str]]:
    """
    A Move, a command name ("quit", "undo", "restart", "hints"),
    or None for empty input.
    """
    s = raw.strip().lower()
    if not s:
        return None
    if s in COMMANDS:
        return COMMANDS[s]
    return Move.parse(s, size)
