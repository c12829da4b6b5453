from __future__ import annotations

import logging
from typing import Optional

from othello.ai.base import Agent
from othello.core.board import Board
from othello.core.rules import disk_counts, has_legal_move, is_legal, make_move
from othello.game.state import GameState, LogEntry, Phase, Scheduler, run_now
from othello.types import SIDE_NAMES, Move, other

logger = logging.getLogger(__name__)


def _phase_for(state: GameState) -> Phase:
    return Phase.AUTOMATED_TO_MOVE if state.current == state.cpu_side else Phase.HUMAN_TO_MOVE


def _final_status(board: Board) -> str:
    counts = disk_counts(board)
    b, w = counts["B"], counts["W"]
    if b == w:
        result = "Draw game."
    else:
        result = f"{SIDE_NAMES['B' if b > w else 'W']} wins!"
    return f"Game over. Black {b} - White {w}. {result}"


def new_game(cpu_first: bool = False, agent: Optional[Agent] = None, schedule: Optional[Scheduler] = None) -> GameState:
    """
    Fresh board, empty log and history. Black always moves first; the CPU
    plays Black when `cpu_first` is set, and its first move is then chosen
    by the human.
    """
    if agent is None:
        from othello.ai.engine_agent import EngineAgent

        agent = EngineAgent()

    state = GameState(
        board=Board.start(),
        current="B",
        cpu_side="B" if cpu_first else "W",
        cpu_first=cpu_first,
        agent=agent,
        schedule=schedule or run_now,
    )
    state.phase = _phase_for(state)
    if cpu_first:
        state.last_status = "CPU plays Black. Choose the CPU's first move."
    else:
        state.last_status = "Black starts. Your move."
    return state


def _apply(state: GameState, move: Move, tag: str) -> None:
    side = state.current
    state.history.append(state.snapshot())
    make_move(state.board, side, move)
    state.log.append(LogEntry(move, side, tag))
    state.skipped = None


def _advance(state: GameState) -> None:
    """Flip the turn, resolve skips and game end, and start the CPU if it is next."""
    state.current = other(state.current)

    if not has_legal_move(state.board, state.current):
        if not has_legal_move(state.board, other(state.current)):
            state.phase = Phase.GAME_OVER
            state.last_status = _final_status(state.board)
            logger.info("game over: %s", state.counts)
            return

        # Forced pass: nothing is logged, the other side plays again
        state.skipped = state.current
        state.last_status = f"{SIDE_NAMES[state.current]} has no legal moves. Turn skipped."
        logger.debug("%s passes", state.current)
        state.current = other(state.current)

    state.phase = _phase_for(state)
    if state.phase is Phase.AUTOMATED_TO_MOVE:
        _start_thinking(state)


def _start_thinking(state: GameState) -> None:
    state.phase = Phase.AUTOMATED_THINKING
    state.schedule(lambda: _cpu_turn(state))


def _cpu_turn(state: GameState) -> None:
    skipped = state.skipped
    move = state.agent.choose_move(state)
    info = dict(getattr(state.agent, "last_info", None) or {})

    _apply(state, move, state.current)
    state.last_engine_move = move
    state.last_path = info.get("path")
    state.last_info = info

    status = f"CPU played {move.label}"
    if state.last_path:
        status += f" ({state.last_path})"
    if skipped is not None:
        status = f"{SIDE_NAMES[skipped]} had no legal moves. {status}"
    state.last_status = status + "."

    _advance(state)


def submit_move(state: GameState, move: Move) -> bool:
    """
    Human input. Returns False, changing nothing, for illegal moves and
    whenever it is not the human's turn to choose.
    """
    if state.phase is Phase.HUMAN_TO_MOVE:
        tag: str = state.current
    elif state.phase is Phase.AUTOMATED_TO_MOVE and state.awaiting_cpu_first:
        tag = "CPU"
    else:
        logger.debug("rejected %s during %s", move, state.phase.value)
        return False

    if not is_legal(state.board, state.current, move):
        logger.debug("rejected illegal move %s for %s", move, state.current)
        return False

    _apply(state, move, tag)
    state.last_status = f"{SIDE_NAMES[state.log[-1].side]} played {move.label}."
    _advance(state)
    return True


def undo(state: GameState) -> bool:
    """Restore the position before the last applied move (one ply)."""
    if state.phase is Phase.AUTOMATED_THINKING or not state.history:
        return False

    snap = state.history.pop()
    state.board = snap.board.copy()
    state.current = snap.current
    state.log = list(snap.log)
    state.skipped = None

    cpu_moves = [e.move for e in state.log if e.side == state.cpu_side and e.tag != "CPU"]
    state.last_engine_move = cpu_moves[-1] if cpu_moves else None
    state.last_path = None

    state.phase = _phase_for(state)
    state.last_status = "Move undone."
    return True


def resume(state: GameState) -> bool:
    """Let the CPU move if an undo left it to play."""
    if state.phase is not Phase.AUTOMATED_TO_MOVE or state.awaiting_cpu_first:
        return False
    _start_thinking(state)
    return True
