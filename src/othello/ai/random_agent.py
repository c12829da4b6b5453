from __future__ import annotations

import random
from dataclasses import dataclass, field

from othello.core.rules import legal_moves
from othello.game.state import GameState
from othello.types import Move


@dataclass(slots=True)
class RandomAgent:
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)
    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Move:
        moves = legal_moves(state.board, state.current)
        if not moves:
            raise ValueError("No valid moves.")
        choice = self.rng.choice(moves)
        self.last_info = {"path": "random", "depth": 0, "nodes": 0, "cutoffs": 0, "move": choice.label}
        return choice
