"""
Shared pytest fixtures for the othello tests.

Game-state fixtures are function-scoped so every test starts from a
fresh board.
"""

import random

import matplotlib
import pytest

matplotlib.use("Agg")

from othello.core.board import Board
from othello.core.rules import legal_moves, make_move
from othello.types import other


@pytest.fixture
def start_board():
    return Board.start()


@pytest.fixture
def random_position():
    """Factory: play `plies` seeded random moves from the start (passes included)."""

    def _make(seed: int, plies: int):
        rng = random.Random(seed)
        board = Board.start()
        side = "B"
        for _ in range(plies):
            moves = legal_moves(board, side)
            if not moves:
                side = other(side)
                moves = legal_moves(board, side)
                if not moves:
                    break
            make_move(board, side, rng.choice(moves))
            side = other(side)
        return board, side

    return _make


class DeferredScheduler:
    """Holds the CPU's turn until the test runs it."""

    def __init__(self):
        self.pending = []

    def __call__(self, callback):
        self.pending.append(callback)

    def run_all(self):
        while self.pending:
            self.pending.pop(0)()


@pytest.fixture
def deferred():
    return DeferredScheduler()


class RecordingAgent:
    """Plays the first legal move and remembers every call."""

    name = "Recorder"

    def __init__(self):
        self.calls = 0
        self.last_info = {}

    def choose_move(self, state):
        self.calls += 1
        move = legal_moves(state.board, state.current)[0]
        self.last_info = {"path": "test", "move": move.label}
        return move


@pytest.fixture
def recording_agent():
    return RecordingAgent()
