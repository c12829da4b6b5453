from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import LoadSpec, load_latest_from_dir, load_moves
from ..metrics.summarize import SummaryConfig, filter_rows, path_table
from ..plots.chart import plot_path_histograms, plot_path_share, plot_time_vs_empties


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="othello_analysis figures",
        description="Generate figures from selfplay_moves_*.csv",
    )
    ap.add_argument("--csv", type=str, default=None, help="Path to a specific moves CSV.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory to search when --csv is not provided.")
    ap.add_argument("--pattern", type=str, default="selfplay_moves_*.csv", help="Glob pattern for the latest CSV.")
    ap.add_argument("--figures-dir", type=str, default="data/figures", help="Output directory.")
    ap.add_argument("--agent", type=str, default="CPU", help="Only rows played by this agent name ('' = all)")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-hists", action="store_true", help="Disable per-path histograms")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    df = load_moves(LoadSpec(csv_path=csv_path))
    cfg = SummaryConfig(agent=args.agent or None)
    rows = filter_rows(df, cfg)

    outdir = Path(args.figures_dir)
    created = []
    created.append(plot_time_vs_empties(rows, outdir, show=args.show))
    created.append(plot_path_share(path_table(df, cfg), outdir, show=args.show))
    if not args.no_hists:
        created.extend(plot_path_histograms(rows, outdir, show=args.show))

    created = [p for p in created if p is not None]
    print(f"Loaded: {csv_path}")
    if not args.show:
        print(f"Wrote {len(created)} figures under: {outdir.resolve()}")
        for p in created:
            print(f"- {p}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
