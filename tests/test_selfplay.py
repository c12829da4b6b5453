"""Tests for headless self-play and the CSV analysis tooling."""

import pytest

from othello.ai import engine_agent
from othello.scripts.selfplay import GAME_COLUMNS, MOVE_COLUMNS, play_headless, run_selfplay, write_csv
from othello_analysis.__main__ import main as analysis_main
from othello_analysis.io.load_results import LoadSpec, load_latest_from_dir, load_moves
from othello_analysis.metrics.summarize import SummaryConfig, path_table, time_by_empties
from othello_analysis.plots.chart import plot_path_share, plot_time_vs_empties

ENGINE_PATHS = {"opening", "exact-search", "depth-4-search", "evaluator-fallback"}


@pytest.fixture(autouse=True)
def shallow_engine(monkeypatch):
    """Keep full games quick: depth-1 midgame, exact search only for the last 4 empties."""
    monkeypatch.setattr(engine_agent, "MIDGAME_DEPTH", 1)
    monkeypatch.setattr(engine_agent, "ENDGAME_EMPTIES", 4)


class TestPlayHeadless:
    def test_full_game_rows(self):
        summary, rows = play_headless("B", "random", seed=3)

        assert summary["plies"] == len(rows)
        assert summary["black"] + summary["white"] == summary["plies"] + 4
        assert summary["winner"] in {"B", "W", "D"}

        cpu_rows = [r for r in rows if r["agent"] == "CPU"]
        assert cpu_rows
        assert all(r["side"] == "B" for r in cpu_rows)
        assert {r["path"] for r in cpu_rows} <= ENGINE_PATHS
        assert [r["ply"] for r in rows] == list(range(1, len(rows) + 1))

    def test_run_alternates_colours(self):
        summaries, moves = run_selfplay(2, opponent="greedy", seed=9, max_workers=1)
        assert [s["engine_side"] for s in summaries] == ["B", "W"]
        assert {m["game"] for m in moves} == {0, 1}


class TestAnalysis:
    @pytest.fixture
    def moves_csv(self, tmp_path):
        summaries, moves = run_selfplay(2, opponent="random", seed=4, max_workers=1)
        results = tmp_path / "results"
        write_csv(results / "selfplay_moves_20260101_000000.csv", MOVE_COLUMNS, moves)
        write_csv(results / "selfplay_games_20260101_000000.csv", GAME_COLUMNS, summaries)
        return results, moves

    def test_latest_file_and_path_table(self, moves_csv):
        results, moves = moves_csv
        csv_path = load_latest_from_dir(results)
        assert csv_path.name == "selfplay_moves_20260101_000000.csv"

        df = load_moves(LoadSpec(csv_path=csv_path))
        table = path_table(df, SummaryConfig(agent="CPU"))

        cpu_moves = sum(1 for m in moves if m["agent"] == "CPU")
        assert int(table["moves"].sum()) == cpu_moves
        assert set(table["path"]) <= ENGINE_PATHS
        assert table["share"].sum() == pytest.approx(1.0)
        assert not time_by_empties(df).empty

    def test_figures_are_written(self, moves_csv, tmp_path):
        results, _ = moves_csv
        df = load_moves(LoadSpec(csv_path=load_latest_from_dir(results)))

        out = plot_time_vs_empties(df, tmp_path / "figs", show=False)
        share = plot_path_share(path_table(df, SummaryConfig()), tmp_path / "figs", show=False)

        assert out is not None and out.exists()
        assert share is not None and share.exists()

    def test_cli_analyze(self, moves_csv, capsys):
        results, _ = moves_csv
        assert analysis_main(["analyze", "--results-dir", str(results)]) == 0
        assert "Decision paths" in capsys.readouterr().out

    def test_missing_csv_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_moves(LoadSpec(csv_path=tmp_path / "nope.csv"))

    def test_cli_unknown_subcommand(self, capsys):
        assert analysis_main(["--agent", "CPU"]) == 2
        assert "Usage:" in capsys.readouterr().out
