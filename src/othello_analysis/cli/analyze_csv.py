from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import LoadSpec, load_latest_from_dir, load_moves
from ..metrics.summarize import SummaryConfig, numeric_summary, path_table, time_by_empties


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Summarize Othello self-play move CSVs.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a moves CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing selfplay_moves_*.csv")
    ap.add_argument("--pattern", type=str, default="selfplay_moves_*.csv", help="Glob pattern for selecting latest file")
    ap.add_argument("--agent", type=str, default="CPU", help="Only rows played by this agent name ('' = all)")
    ap.add_argument("--max-ms", type=float, default=None, help="Drop moves slower than this")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    # Choose CSV
    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    df = load_moves(LoadSpec(csv_path=csv_path))

    print(f"\nLoaded: {csv_path}")
    print(f"Rows: {len(df):,}  Cols: {len(df.columns)}")

    cfg = SummaryConfig(agent=args.agent or None, max_time_ms=args.max_ms)

    table = path_table(df, cfg)
    print("\n=== Decision paths ===")
    print(table.to_string(index=False))

    by_empties = time_by_empties(df)
    if not by_empties.empty:
        print("\n=== Time by empty cells ===")
        print(by_empties.to_string(index=False))

    desc = numeric_summary(df)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
