"""Tests for the turn / skip / game-over state machine."""

from othello.config import HISTORY_LIMIT
from othello.core.board import Board
from othello.game.controller import new_game, resume, submit_move, undo
from othello.game.state import Phase
from othello.types import Move
from othello.ui.session import _takeback

START_ROWS = Board.start().to_rows()


class TestNewGame:
    def test_human_first_defaults(self):
        state = new_game()
        assert state.phase is Phase.HUMAN_TO_MOVE
        assert state.current == "B"
        assert state.cpu_side == "W"
        assert state.log == []
        assert len(state.history) == 0
        assert state.counts == {"B": 2, "W": 2}

    def test_cpu_first_waits_for_the_human_to_pick(self, recording_agent):
        state = new_game(cpu_first=True, agent=recording_agent)
        assert state.cpu_side == "B"
        assert state.phase is Phase.AUTOMATED_TO_MOVE
        assert state.awaiting_cpu_first
        assert recording_agent.calls == 0


class TestSubmitMove:
    def test_illegal_move_is_a_no_op(self):
        state = new_game()
        assert not submit_move(state, Move(0, 0))
        assert state.board.to_rows() == START_ROWS
        assert state.log == []
        assert len(state.history) == 0

    def test_cpu_answers_immediately(self):
        state = new_game()

        assert submit_move(state, Move(2, 3))

        assert [e.move for e in state.log] == [Move(2, 3), Move(4, 2)]
        assert state.log_lines() == ["1. 2D (B)", "2. 4C (W)"]
        assert state.last_engine_move == Move(4, 2)
        assert state.last_path == "opening"
        assert state.status == "CPU played 4C (opening)."
        assert state.phase is Phase.HUMAN_TO_MOVE
        assert state.current == "B"
        assert state.board.total_disks() == 6

    def test_input_is_ignored_while_cpu_thinks(self, deferred):
        state = new_game(schedule=deferred)

        assert submit_move(state, Move(2, 3))
        assert state.phase is Phase.AUTOMATED_THINKING
        assert len(deferred.pending) == 1

        rows = state.board.to_rows()
        assert not submit_move(state, Move(2, 2))
        assert not undo(state)
        assert state.board.to_rows() == rows

        deferred.run_all()
        assert state.phase is Phase.HUMAN_TO_MOVE
        assert len(state.log) == 2

    def test_cpu_first_move_is_logged_for_the_cpu(self, recording_agent):
        state = new_game(cpu_first=True, agent=recording_agent)

        assert not submit_move(state, Move(0, 0))
        assert submit_move(state, Move(4, 5))

        assert state.log[0].tag == "CPU"
        assert state.log[0].side == "B"
        assert str(state.log[0]) == "4F (CPU)"
        assert state.current == "W"
        assert state.phase is Phase.HUMAN_TO_MOVE
        assert recording_agent.calls == 0

        # from here on the CPU moves by itself
        assert submit_move(state, Move(5, 3))
        assert recording_agent.calls == 1
        assert state.log[2].tag == "B"
        assert state.phase is Phase.HUMAN_TO_MOVE


class TestSkipAndGameOver:
    def test_cpu_without_moves_is_skipped(self, recording_agent):
        state = new_game(agent=recording_agent)
        state.board = Board.from_rows([
            "BW......",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            "BW......",
        ])

        assert submit_move(state, Move(0, 2))

        assert len(state.log) == 1
        assert state.current == "B"
        assert state.phase is Phase.HUMAN_TO_MOVE
        assert state.skipped == "W"
        assert state.status == "White has no legal moves. Turn skipped."
        assert state.board.to_rows()[0] == "BBB....."
        assert state.board.to_rows()[7] == "BW......"
        assert recording_agent.calls == 0

        # next move leaves nobody able to play, with empties left
        assert submit_move(state, Move(7, 2))
        assert state.game_over
        assert state.winner == "B"
        assert state.status == "Game over. Black 6 - White 0. Black wins!"
        assert not submit_move(state, Move(1, 1))
        assert len(state.history) == len(state.log) == 2

        # a finished game can still be taken back
        assert undo(state)
        assert not state.game_over
        assert state.winner is None
        assert state.phase is Phase.HUMAN_TO_MOVE
        assert state.current == "B"
        assert len(state.log) == 1
        assert state.board.to_rows()[7] == "BW......"
        assert submit_move(state, Move(7, 2))
        assert state.game_over

    def test_human_without_moves_lets_cpu_play_again(self, recording_agent, deferred):
        state = new_game(agent=recording_agent, schedule=deferred)
        state.board = Board.from_rows([
            "WB......",
            "........",
            "........",
            "WB......",
            "........",
            "........",
            "........",
            "BW......",
        ])

        assert submit_move(state, Move(7, 2))
        deferred.pending.pop(0)()

        # black cannot answer, so the CPU goes again without a log entry for the pass
        assert state.skipped == "B"
        assert state.phase is Phase.AUTOMATED_THINKING
        assert [e.move for e in state.log] == [Move(7, 2), Move(0, 2)]

        deferred.pending.pop(0)()
        assert [e.move for e in state.log] == [Move(7, 2), Move(0, 2), Move(3, 2)]
        assert recording_agent.calls == 2
        assert state.game_over
        assert state.winner == "W"
        assert state.status == "Game over. Black 3 - White 6. White wins!"


class TestUndo:
    def test_undo_one_ply_at_a_time(self):
        state = new_game()
        submit_move(state, Move(2, 3))

        assert undo(state)
        assert len(state.log) == 1
        assert state.current == "W"
        assert state.phase is Phase.AUTOMATED_TO_MOVE
        assert state.last_engine_move is None

        assert undo(state)
        assert state.log == []
        assert state.board.to_rows() == START_ROWS
        assert state.phase is Phase.HUMAN_TO_MOVE

        assert not undo(state)

    def test_resume_after_undo_lets_cpu_move(self):
        state = new_game()
        submit_move(state, Move(2, 3))
        undo(state)

        assert resume(state)
        assert len(state.log) == 2
        assert state.phase is Phase.HUMAN_TO_MOVE
        assert not resume(state)

    def test_one_snapshot_per_ply(self):
        state = new_game()
        assert submit_move(state, Move(2, 3))

        # human move plus the CPU reply
        assert len(state.log) == 2
        assert len(state.history) == len(state.log)
        assert [snap.current for snap in state.history] == ["B", "W"]
        assert state.history[0].board.to_rows() == START_ROWS

    def test_history_is_bounded(self):
        state = new_game()
        for _ in range(HISTORY_LIMIT + 5):
            state.history.append(state.snapshot())
        assert len(state.history) == HISTORY_LIMIT == 60


class TestTakeback:
    """The terminal `u` command rewinds to a position where the human moves."""

    def test_takeback_skips_over_cpu_reply(self):
        state = new_game()
        submit_move(state, Move(2, 3))

        _takeback(state)
        assert state.log == []
        assert state.phase is Phase.HUMAN_TO_MOVE
        assert state.board.to_rows() == START_ROWS
        assert state.status == "Move undone. Black to play."

    def test_takeback_from_game_over(self, recording_agent):
        state = new_game(agent=recording_agent)
        state.board = Board.from_rows([
            "BW......",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            "BW......",
        ])
        submit_move(state, Move(0, 2))
        submit_move(state, Move(7, 2))
        assert state.game_over

        _takeback(state)
        assert not state.game_over
        assert state.phase is Phase.HUMAN_TO_MOVE
        assert [e.move for e in state.log] == [Move(0, 2)]

    def test_nothing_to_take_back(self):
        state = new_game()
        _takeback(state)
        assert state.status == "Nothing to undo."
