from __future__ import annotations
from typing import Iterable, List, Optional, Set

from othello.config import CLEAR_SCREEN
from othello.core.board import Board
from othello.types import Cell, Move
from othello.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_GREEN, FG_WHITE, FG_YELLOW, REVERSE, RESET


def _piece(cell: Cell, hint: bool = False) -> str:
    if cell is None:
        return c("*", FG_GREEN) if hint else c("·", FG_GRAY)
    if cell == "B":
        return c("●", BOLD)
    return c("○", FG_WHITE)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(
    board: Board,
    status: str = "",
    hints: Optional[Iterable[Move]] = None,
    highlight: Optional[Move] = None,
    sidebar: Optional[List[str]] = None,
) -> None:
    clear_screen()

    hint_set: Set[Move] = set(hints) if hints else set()
    side_lines = sidebar or []

    print(c("OTHELLO", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    letters = "   " + " ".join(chr(ord("A") + i) for i in range(board.size))
    print(c(letters, DIM))

    for r in range(board.size):
        parts = []
        for col in range(board.size):
            p = _piece(board.grid[r][col], Move(r, col) in hint_set)
            if highlight is not None and (r, col) == (highlight.row, highlight.col):
                p = f"{REVERSE}{p}{RESET}"
            parts.append(p)

        row = f"{c(str(r), DIM)} | " + " ".join(parts) + " |"
        if r < len(side_lines):
            row += "   " + side_lines[r]
        print(row)

    print(c("   " + "—" * (2 * board.size - 1), DIM))
    print(c("   Enter a move like 2D. u = undo, r = restart, h = hints, q = quit.", DIM))


def kifu_lines(lines: List[str], limit: int = 12) -> List[str]:
    """Last `limit` move-log lines for the sidebar."""
    if not lines:
        return [c("No moves yet.", DIM)]
    shown = lines[-limit:]
    return [c(line, FG_YELLOW) for line in shown]
