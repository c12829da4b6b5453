from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from othello.config import OPENING_MAX_PLY
from othello.core.board import Board
from othello.core.rules import is_legal
from othello.types import Move, Side

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OpeningLine:
    """
    A known line: after exactly `moves` have been played (any sides),
    answer with `reply`.
    """
    name: str
    moves: Tuple[Move, ...]
    reply: Move


def _line(name: str, *coords: Tuple[int, int]) -> OpeningLine:
    *played, reply = coords
    return OpeningLine(name, tuple(Move(r, c) for r, c in played), Move(*reply))


# Coordinates are (row, col) with the start position of Board.start().
# First match wins, so order matters for identical prefixes.
OPENINGS: Tuple[OpeningLine, ...] = (
    # Replies to each of the four (symmetric) first moves
    _line("Perpendicular", (4, 5), (5, 3)),
    _line("Perpendicular", (2, 3), (4, 2)),
    _line("Perpendicular", (3, 2), (2, 4)),
    _line("Perpendicular", (5, 4), (3, 5)),

    # Tiger
    _line("Tiger", (4, 5), (5, 3), (2, 2)),
    _line("Tiger", (4, 5), (5, 3), (2, 2), (2, 3)),
    _line("Tiger", (4, 5), (5, 3), (2, 2), (2, 3), (3, 2)),
    _line("Tiger", (4, 5), (5, 3), (2, 2), (2, 3), (3, 2), (3, 5)),
    _line("Aubrey", (4, 5), (5, 3), (2, 2), (2, 3), (3, 2), (3, 5), (4, 2)),

    # Diagonal
    _line("Diagonal", (4, 5), (5, 5), (5, 4)),
    _line("Diagonal", (4, 5), (5, 5), (5, 4), (3, 5)),
    _line("Heath", (4, 5), (5, 5), (5, 4), (3, 5), (2, 4)),

    # Parallel
    _line("Parallel", (4, 5), (3, 5), (2, 4)),
)


def match_opening(log: Sequence[Move], table: Sequence[OpeningLine] = OPENINGS) -> Optional[OpeningLine]:
    """
    First line whose move list has the log's length and the same
    coordinates at every index. Sides are not compared.
    """
    if len(log) >= OPENING_MAX_PLY:
        return None

    n = len(log)
    for line in table:
        if len(line.moves) != n:
            continue
        if all(line.moves[i] == log[i] for i in range(n)):
            return line
    return None


def opening_move(board: Board, side: Side, log: Sequence[Move]) -> Optional[Move]:
    line = match_opening(log)
    if line is None:
        return None

    if not is_legal(board, side, line.reply):
        logger.debug("opening %s reply %s is not legal here; ignoring", line.name, line.reply)
        return None

    logger.debug("opening %s -> %s", line.name, line.reply)
    return line.reply
