from __future__ import annotations

import argparse
import csv
import logging
import random
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, List, Tuple

from othello.ai.engine_agent import EngineAgent
from othello.ai.greedy import GreedyAgent
from othello.ai.random_agent import RandomAgent
from othello.core.board import Board
from othello.core.rules import disk_counts, has_legal_move, make_move, winner
from othello.game.state import GameState, LogEntry
from othello.types import Side, other

logger = logging.getLogger(__name__)

OPPONENTS = {
    "random": RandomAgent,
    "greedy": GreedyAgent,
}

MOVE_COLUMNS = [
    "game", "ply", "side", "agent", "path", "depth",
    "empties", "nodes", "cutoffs", "time_ms", "eval",
]
GAME_COLUMNS = ["game", "engine_side", "opponent", "winner", "black", "white", "plies", "passes"]


def play_headless(engine_side: Side, opponent: str, seed: int, game_id: int = 0) -> Tuple[Dict, List[Dict]]:
    """
    One full game, engine against a baseline, with passes handled.
    Returns the game summary row and one row per move.
    """
    engine = EngineAgent(rng=random.Random(seed))
    baseline = OPPONENTS[opponent](rng=random.Random(seed + 1))
    agents = {engine_side: engine, other(engine_side): baseline}

    state = GameState(board=Board.start(), current="B", cpu_side=engine_side)
    rows: List[Dict] = []
    passes = 0

    while True:
        if not has_legal_move(state.board, state.current):
            if not has_legal_move(state.board, other(state.current)):
                break
            passes += 1
            logger.debug("game %d: %s passes", game_id, state.current)
            state.current = other(state.current)
            continue

        agent = agents[state.current]
        empties = state.board.empties()
        start = time.perf_counter()
        move = agent.choose_move(state)
        elapsed_ms = max(1, int((time.perf_counter() - start) * 1000))
        info = getattr(agent, "last_info", None) or {}

        rows.append({
            "game": game_id,
            "ply": len(state.log) + 1,
            "side": state.current,
            "agent": agent.name,
            "path": info.get("path", ""),
            "depth": info.get("depth", 0),
            "empties": empties,
            "nodes": info.get("nodes", 0),
            "cutoffs": info.get("cutoffs", 0),
            "time_ms": elapsed_ms,
            "eval": info.get("eval"),
        })

        make_move(state.board, state.current, move)
        state.log.append(LogEntry(move, state.current, state.current))
        state.current = other(state.current)

    counts = disk_counts(state.board)
    summary = {
        "game": game_id,
        "engine_side": engine_side,
        "opponent": opponent,
        "winner": winner(state.board) or "D",
        "black": counts["B"],
        "white": counts["W"],
        "plies": len(state.log),
        "passes": passes,
    }
    return summary, rows


def _play_one(args) -> Tuple[Dict, List[Dict]]:
    (game_id, engine_side, opponent, seed) = args
    return play_headless(engine_side, opponent, seed, game_id=game_id)


def run_selfplay(
    games: int,
    opponent: str = "greedy",
    seed: int = 1234,
    max_workers: int | None = 1,
) -> Tuple[List[Dict], List[Dict]]:
    # Alternate colours so the engine plays both sides equally
    jobs = [
        (g, "B" if g % 2 == 0 else "W", opponent, seed + 1000 * g)
        for g in range(games)
    ]

    results: List[Tuple[Dict, List[Dict]]] = []
    if max_workers == 1:
        for job in jobs:
            results.append(_play_one(job))
            print(f"Game {job[0] + 1}/{games} complete")
    else:
        with ProcessPoolExecutor(max_workers=max_workers) as ex:
            futures = [ex.submit(_play_one, job) for job in jobs]
            for done, fut in enumerate(as_completed(futures), start=1):
                results.append(fut.result())
                print(f"Game {done}/{games} complete")

    results.sort(key=lambda t: t[0]["game"])
    summaries = [s for (s, _) in results]
    moves = [row for (_, rows) in results for row in rows]
    return summaries, moves


def write_csv(path: Path, columns: List[str], rows: List[Dict]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(columns)
        for row in rows:
            w.writerow([row.get(col) for col in columns])


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="othello-selfplay", description="Play the engine against a baseline and export per-move stats.")
    ap.add_argument("--games", type=int, default=10, help="Number of games (engine alternates colours)")
    ap.add_argument("--opponent", choices=sorted(OPPONENTS), default="greedy", help="Baseline opponent")
    ap.add_argument("--seed", type=int, default=1234, help="Base RNG seed")
    ap.add_argument("--workers", type=int, default=1, help="Worker processes (1 = play in-process)")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Where to write the CSVs")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    summaries, moves = run_selfplay(
        args.games,
        opponent=args.opponent,
        seed=args.seed,
        max_workers=args.workers,
    )

    ts = time.strftime("%Y%m%d_%H%M%S")
    out_dir = Path(args.results_dir)
    moves_path = out_dir / f"selfplay_moves_{ts}.csv"
    games_path = out_dir / f"selfplay_games_{ts}.csv"
    write_csv(moves_path, MOVE_COLUMNS, moves)
    write_csv(games_path, GAME_COLUMNS, summaries)

    engine_wins = sum(1 for s in summaries if s["winner"] == s["engine_side"])
    draws = sum(1 for s in summaries if s["winner"] == "D")
    print("\n=== SELF-PLAY RESULTS ===")
    print(f"Engine wins: {engine_wins}")
    print(f"Draws:       {draws}")
    print(f"Losses:      {len(summaries) - engine_wins - draws}")
    print(f"Wrote CSV: {moves_path}")
    print(f"Wrote CSV: {games_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
