from __future__ import annotations

from dataclasses import dataclass
from math import inf
from typing import NamedTuple, Optional

from othello.core.board import Board
from othello.core.rules import legal_moves, make_move, unmake_move
from othello.core.scoring import evaluate
from othello.types import Move, Side, other


class SearchResult(NamedTuple):
    score: float
    move: Optional[Move]  # None: no legal move at this node


@dataclass(slots=True)
class Searcher:
    """
    Depth-bounded minimax with alpha-beta pruning.

    Leaves are always scored for `perspective` (the root player), at
    minimizing nodes too. A side with no legal moves is a leaf; passes
    are not played out inside the tree.
    """
    perspective: Side
    nodes: int = 0
    cutoffs: int = 0

    def search(
        self,
        board: Board,
        to_play: Side,
        depth: int,
        alpha: float = -inf,
        beta: float = inf,
        maximizing: bool = True,
    ) -> SearchResult:
        self.nodes += 1

        moves = legal_moves(board, to_play) if depth > 0 else []
        if not moves:
            return SearchResult(float(evaluate(board, self.perspective)), None)

        best_move: Optional[Move] = None
        if maximizing:
            best = -inf
            for m in moves:
                flips = make_move(board, to_play, m)
                child = self.search(board, other(to_play), depth - 1, alpha, beta, False)
                unmake_move(board, to_play, m, flips)

                if child.score > best:
                    best, best_move = child.score, m
                alpha = max(alpha, best)
                if beta <= alpha:
                    self.cutoffs += 1
                    break
        else:
            best = inf
            for m in moves:
                flips = make_move(board, to_play, m)
                child = self.search(board, other(to_play), depth - 1, alpha, beta, True)
                unmake_move(board, to_play, m, flips)

                if child.score < best:
                    best, best_move = child.score, m
                beta = min(beta, best)
                if beta <= alpha:
                    self.cutoffs += 1
                    break

        return SearchResult(best, best_move)


def minimax(board: Board, side: Side, depth: int) -> SearchResult:
    """Search `depth` plies for `side` on a private copy of `board`."""
    return Searcher(perspective=side).search(board.copy(), side, depth)
