from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Optional

from othello.ai.greedy import greedy_move
from othello.ai.minimax import Searcher
from othello.ai.openings import opening_move
from othello.config import ENDGAME_EMPTIES, MIDGAME_DEPTH, MIDGAME_EMPTIES, OPENING_MAX_PLY
from othello.core.rules import legal_moves
from othello.game.state import GameState
from othello.types import Move, Side

logger = logging.getLogger(__name__)

PATH_OPENING = "opening"
PATH_EXACT = "exact-search"
PATH_MIDGAME = f"depth-{MIDGAME_DEPTH}-search"
PATH_FALLBACK = "evaluator-fallback"


def search_plan(empties: int) -> tuple[Optional[str], int]:
    """Which search (if any) runs at this many empty cells, and how deep."""
    if empties <= ENDGAME_EMPTIES:
        return PATH_EXACT, min(empties, ENDGAME_EMPTIES)
    if empties <= MIDGAME_EMPTIES:
        return PATH_MIDGAME, MIDGAME_DEPTH
    return None, 0


@dataclass(slots=True)
class EngineAgent:
    """
    The CPU player. Decision chain, first hit wins:
      1) opening table (while fewer than OPENING_MAX_PLY moves are logged)
      2) exact search to the end with few empties left
      3) fixed-depth search in the midgame
      4) greedy evaluator choice, random among ties
    """
    name: str = "CPU"
    rng: random.Random = field(default_factory=random.Random)

    # Stats
    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Move:
        board = state.board
        me: Side = state.current

        if not legal_moves(board, me):
            raise ValueError("No valid moves.")

        start = time.perf_counter()
        empties = board.empties()
        played = state.moves_played()

        move: Optional[Move] = None
        path = PATH_FALLBACK
        depth = 0
        score: Optional[float] = None
        nodes = 0
        cutoffs = 0

        if len(played) < OPENING_MAX_PLY:
            move = opening_move(board, me, played)
            if move is not None:
                path = PATH_OPENING

        if move is None:
            planned, d = search_plan(empties)
            if planned is not None:
                searcher = Searcher(perspective=me)
                result = searcher.search(board.copy(), me, d)
                nodes, cutoffs = searcher.nodes, searcher.cutoffs
                if result.move is not None:
                    move, path, depth, score = result.move, planned, d, result.score
                else:
                    logger.debug("%s search at depth %d produced no move", planned, d)

        if move is None:
            move, greedy_score = greedy_move(board, me, self.rng)
            path, depth, score = PATH_FALLBACK, 1, float(greedy_score)

        elapsed = time.perf_counter() - start
        self.last_info = {
            "path": path,
            "depth": depth,
            "empties": empties,
            "nodes": nodes,
            "cutoffs": cutoffs,
            "eval": int(score) if score is not None else None,
            "move": move.label,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug("engine %s -> %s via %s (d=%d nodes=%d)", me, move.label, path, depth, nodes)
        return move
