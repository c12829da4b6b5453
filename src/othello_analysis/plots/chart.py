from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    out = outdir / filename
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_time_vs_empties(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Thinking time per move against empty cells, one colour per decision path."""
    if "empties" not in df.columns or "time_ms" not in df.columns:
        return None

    fig = plt.figure(figsize=(9, 5))
    for path, group in df[df["path"].str.len() > 0].groupby("path"):
        plt.scatter(group["empties"], group["time_ms"], alpha=0.6, label=path, s=14)
    plt.gca().invert_xaxis()
    plt.title("Thinking time vs empty cells")
    plt.xlabel("empty cells (game progresses →)")
    plt.ylabel("time_ms")
    plt.yscale("log")
    plt.legend()

    return _finish(fig, outdir, "time_vs_empties.png", show)


def plot_path_histograms(df: pd.DataFrame, outdir: Path, metric: str = "time_ms", *, show: bool) -> list[Path]:
    if metric not in df.columns or not pd.api.types.is_numeric_dtype(df[metric]):
        return []

    created: list[Path] = []
    for path, group in df[df["path"].str.len() > 0].groupby("path"):
        fig = plt.figure()
        plt.hist(group[metric].dropna(), bins=30)
        plt.title(f"{metric}: {path}")
        plt.xlabel(metric)
        plt.ylabel("count")
        out = _finish(fig, outdir, f"hist_{metric}_{path}.png", show)
        if out is not None:
            created.append(out)
    return created


def plot_path_share(table: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if table.empty or "path" not in table.columns:
        return None

    fig = plt.figure(figsize=(7, 4))
    plt.bar(table["path"].astype(str), table["moves"].astype(float))
    plt.title("Moves per decision path")
    plt.xlabel("path")
    plt.ylabel("moves")
    plt.xticks(rotation=30, ha="right")

    return _finish(fig, outdir, "path_share.png", show)
