from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Deque, Dict, List, Optional, Tuple

from othello.config import HISTORY_LIMIT
from othello.core.board import Board
from othello.core.rules import disk_counts, winner as board_winner
from othello.types import Move, Side

if TYPE_CHECKING:
    from othello.ai.base import Agent

Scheduler = Callable[[Callable[[], None]], None]


def run_now(callback: Callable[[], None]) -> None:
    callback()


class Phase(Enum):
    HUMAN_TO_MOVE = "human_to_move"
    AUTOMATED_TO_MOVE = "automated_to_move"
    AUTOMATED_THINKING = "automated_thinking"
    GAME_OVER = "game_over"


@dataclass(frozen=True, slots=True)
class LogEntry:
    move: Move
    side: Side
    tag: str  # "B"/"W", or "CPU" for the CPU's human-chosen first move

    def __str__(self) -> str:
        return f"{self.move.label} ({self.tag})"


@dataclass(frozen=True, slots=True)
class Snapshot:
    board: Board
    current: Side
    log: Tuple[LogEntry, ...]


@dataclass(slots=True)
class GameState:
    board: Board
    current: Side
    cpu_side: Side
    cpu_first: bool = False
    agent: Optional[Agent] = None
    schedule: Scheduler = run_now
    phase: Phase = Phase.HUMAN_TO_MOVE
    log: List[LogEntry] = field(default_factory=list)
    history: Deque[Snapshot] = field(default_factory=lambda: deque(maxlen=HISTORY_LIMIT))
    last_engine_move: Optional[Move] = None
    last_path: Optional[str] = None
    last_info: Dict[str, Any] = field(default_factory=dict)
    skipped: Optional[Side] = None  # side whose turn was just skipped
    last_status: str = "Black starts."

    @property
    def human_side(self) -> Side:
        return "W" if self.cpu_side == "B" else "B"

    @property
    def status(self) -> str:
        return self.last_status

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    @property
    def winner(self) -> Optional[Side]:
        return board_winner(self.board) if self.game_over else None

    @property
    def awaiting_cpu_first(self) -> bool:
        # CPU-first games: the human picks the CPU's opening move
        return self.cpu_first and not self.log

    @property
    def counts(self) -> Dict[Side, int]:
        return disk_counts(self.board)

    def moves_played(self) -> List[Move]:
        return [e.move for e in self.log]

    def log_lines(self) -> List[str]:
        return [f"{i}. {e}" for i, e in enumerate(self.log, start=1)]

    def snapshot(self) -> Snapshot:
        return Snapshot(self.board.copy(), self.current, tuple(self.log))
