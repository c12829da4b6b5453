from __future__ import annotations
from typing import Protocol, runtime_checkable

from othello.game.state import GameState
from othello.types import Move


@runtime_checkable
class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Move:
        ...
