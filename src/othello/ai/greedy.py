from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import List, Tuple

from othello.core.board import Board
from othello.core.rules import legal_moves, make_move, unmake_move
from othello.core.scoring import evaluate
from othello.game.state import GameState
from othello.types import Move, Side


def score_moves(board: Board, side: Side) -> List[Tuple[Move, int]]:
    """Evaluator score of the position after each legal move."""
    work = board.copy()
    scored: List[Tuple[Move, int]] = []
    for m in legal_moves(work, side):
        flips = make_move(work, side, m)
        scored.append((m, evaluate(work, side)))
        unmake_move(work, side, m, flips)
    return scored


def greedy_move(board: Board, side: Side, rng: random.Random | None = None) -> Tuple[Move, int]:
    """
    1-ply choice: the best evaluated move, uniformly random among ties.
    Always produces a move while one exists.
    """
    scored = score_moves(board, side)
    if not scored:
        raise ValueError("No valid moves.")

    best_score = max(s for (_, s) in scored)
    candidates = [m for (m, s) in scored if s == best_score]
    return (rng or random).choice(candidates), best_score


@dataclass(slots=True)
class GreedyAgent:
    """
    Evaluator-only player. Also what the engine falls back to when
    search does not produce a move.
    """
    name: str = "Greedy (1-ply)"
    rng: random.Random = field(default_factory=random.Random)

    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Move:
        start = time.perf_counter()
        move, score = greedy_move(state.board, state.current, self.rng)
        elapsed = time.perf_counter() - start

        self.last_info = {
            "path": "evaluator-fallback",
            "depth": 1,
            "nodes": len(legal_moves(state.board, state.current)),
            "cutoffs": 0,
            "eval": score,
            "move": move.label,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        return move
