from __future__ import annotations
from typing import Dict, List, Optional

from othello.core.board import DIRECTIONS, Board, Coord
from othello.types import Move, Side, other


def _run_closed_by(board: Board, side: Side, r: int, c: int, dr: int, dc: int) -> List[Coord]:
    """
    Opponent disks in one direction that a disk of `side` at (r, c) would flip.
    Empty list unless the run is non-empty and closed by a `side` disk.
    """
    opp = other(side)
    line: List[Coord] = []
    for rr, cc in board.ray(r, c, dr, dc):
        cell = board.grid[rr][cc]
        if cell == opp:
            line.append((rr, cc))
            continue
        if cell == side:
            return line
        return []
    # ran off the board
    return []


def flips_for(board: Board, side: Side, move: Move) -> List[Coord]:
    r, c = move.row, move.col
    if not board.in_bounds(r, c) or board.grid[r][c] is not None:
        return []

    flips: List[Coord] = []
    for dr, dc in DIRECTIONS:
        flips.extend(_run_closed_by(board, side, r, c, dr, dc))
    return flips


def is_legal(board: Board, side: Side, move: Move) -> bool:
    r, c = move.row, move.col
    if not board.in_bounds(r, c) or board.grid[r][c] is not None:
        return False
    return any(_run_closed_by(board, side, r, c, dr, dc) for dr, dc in DIRECTIONS)


def legal_moves(board: Board, side: Side) -> List[Move]:
    """Legal moves for `side` in row-major order."""
    return [
        Move(r, c)
        for r, c in board.cells()
        if board.grid[r][c] is None and is_legal(board, side, Move(r, c))
    ]


def has_legal_move(board: Board, side: Side) -> bool:
    return any(
        board.grid[r][c] is None and is_legal(board, side, Move(r, c))
        for r, c in board.cells()
    )


def make_move(board: Board, side: Side, move: Move) -> List[Coord]:
    """
    Place `side` at `move` and flip every bracketed run.
    Returns the flipped cells; an empty list means the move was illegal
    and the board was not touched.
    """
    flips = flips_for(board, side, move)
    if not flips:
        return []

    board.grid[move.row][move.col] = side
    for r, c in flips:
        board.grid[r][c] = side
    return flips


def unmake_move(board: Board, side: Side, move: Move, flips: List[Coord]) -> None:
    """Reverse a make_move() using its flip list."""
    opp = other(side)
    board.grid[move.row][move.col] = None
    for r, c in flips:
        board.grid[r][c] = opp


def apply_move(board: Board, side: Side, move: Move) -> bool:
    return bool(make_move(board, side, move))


def disk_counts(board: Board) -> Dict[Side, int]:
    return {"B": board.count("B"), "W": board.count("W")}


def is_game_over(board: Board) -> bool:
    return not has_legal_move(board, "B") and not has_legal_move(board, "W")


def winner(board: Board) -> Optional[Side]:
    counts = disk_counts(board)
    if counts["B"] > counts["W"]:
        return "B"
    if counts["W"] > counts["B"]:
        return "W"
    return None
