from __future__ import annotations

from typing import List

from othello.config import SHOW_HINTS
from othello.core.rules import legal_moves
from othello.game.controller import new_game, resume, submit_move, undo
from othello.game.state import GameState, Phase
from othello.types import SIDE_NAMES
from othello.ui.effects import thinking_scheduler
from othello.ui.prompts import parse_move
from othello.ui.render import kifu_lines, render


def _sidebar(state: GameState) -> List[str]:
    counts = state.counts
    who = "CPU" if state.current == state.cpu_side else "You"
    lines = [
        f"Black ● {counts['B']:>2}",
        f"White ○ {counts['W']:>2}",
        f"Turn: {SIDE_NAMES[state.current]} ({who})",
        "",
    ]
    return lines + kifu_lines(state.log_lines(), limit=4)


def _takeback(state: GameState) -> None:
    """Undo back to a position where the human chooses the next move."""
    if not undo(state):
        state.last_status = "Nothing to undo."
        return

    while state.phase is Phase.AUTOMATED_TO_MOVE and not state.awaiting_cpu_first:
        if not undo(state):
            break

    if resume(state):
        return
    state.last_status = f"Move undone. {SIDE_NAMES[state.current]} to play."


def run_game(cpu_first: bool = False) -> None:
    show_hints = SHOW_HINTS

    def show(current: GameState) -> None:
        hints = None
        if show_hints and current.phase in (Phase.HUMAN_TO_MOVE, Phase.AUTOMATED_TO_MOVE):
            hints = legal_moves(current.board, current.current)
        render(
            current.board,
            current.status,
            hints=hints,
            highlight=current.last_engine_move,
            sidebar=_sidebar(current),
        )

    # `state` is rebound on restart; the scheduler always redraws the live game
    schedule = thinking_scheduler(before=lambda: show(state))
    state = new_game(cpu_first=cpu_first, schedule=schedule)

    while True:
        show(state)

        prompt = "u = undo, r = new game, q = quit: " if state.game_over else f"{SIDE_NAMES[state.current]} move: "
        raw = input(prompt)

        try:
            cmd = parse_move(raw, state.board.size)
        except ValueError as e:
            state.last_status = str(e)
            continue

        if cmd is None:
            continue

        if cmd == "quit":
            state.last_status = "Game quit."
            show(state)
            return

        if cmd == "restart":
            state = new_game(cpu_first=cpu_first, schedule=schedule)
            continue

        if cmd == "hints":
            show_hints = not show_hints
            continue

        if cmd == "undo":
            _takeback(state)
            continue

        if state.game_over:
            continue

        if not submit_move(state, cmd):
            state.last_status = f"{cmd.label} is not a legal move."
