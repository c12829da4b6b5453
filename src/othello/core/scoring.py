from __future__ import annotations
from typing import List, Tuple

from othello.config import CORNER_BONUS, MOBILITY_WEIGHT
from othello.core.board import Board
from othello.core.rules import legal_moves
from othello.types import Side, other

# Corners are worth the most; the squares touching them hand corners away.
# -40 on the diagonal X-squares, -20 on the edge C-squares.
WEIGHTS: Tuple[Tuple[int, ...], ...] = (
    (100, -20, 10,  5,  5, 10, -20, 100),
    (-20, -40, -5, -5, -5, -5, -40, -20),
    (10,   -5,  1,  1,  1,  1,  -5,  10),
    (5,    -5,  1,  1,  1,  1,  -5,   5),
    (5,    -5,  1,  1,  1,  1,  -5,   5),
    (10,   -5,  1,  1,  1,  1,  -5,  10),
    (-20, -40, -5, -5, -5, -5, -40, -20),
    (100, -20, 10,  5,  5, 10, -20, 100),
)


def _corners(board: Board) -> List[Tuple[int, int]]:
    last = board.size - 1
    return [(0, 0), (0, last), (last, 0), (last, last)]


def positional(board: Board, side: Side) -> int:
    opp = other(side)
    score = 0
    for r, row in enumerate(board.grid):
        for c, cell in enumerate(row):
            if cell == side:
                score += WEIGHTS[r][c]
            elif cell == opp:
                score -= WEIGHTS[r][c]
    return score


def corner_control(board: Board, side: Side) -> int:
    opp = other(side)
    score = 0
    for r, c in _corners(board):
        if board.grid[r][c] == side:
            score += CORNER_BONUS
        elif board.grid[r][c] == opp:
            score -= CORNER_BONUS
    return score


def mobility(board: Board, side: Side) -> int:
    return MOBILITY_WEIGHT * (len(legal_moves(board, side)) - len(legal_moves(board, other(side))))


def evaluate(board: Board, side: Side) -> int:
    """
    Heuristic score of `board` for `side` (higher is better).
    Position table + corner bonus + mobility. No disk-count term, so this
    is not a final-score estimate even near the end of the game.
    """
    return positional(board, side) + corner_control(board, side) + mobility(board, side)
