from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class SummaryConfig:
    agent: str | None = None       # restrict to one agent name
    max_time_ms: float | None = None


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    out = df.copy()

    if cfg.agent is not None:
        _require_cols(out, ["agent"])
        out = out[out["agent"] == cfg.agent].copy()

    if cfg.max_time_ms is not None:
        out = out[out["time_ms"].fillna(float("inf")) <= cfg.max_time_ms].copy()

    return out


def path_table(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    """One row per decision path: how often it ran and what it cost."""
    _require_cols(df, ["path", "time_ms"])

    out = filter_rows(df, cfg)
    out = out[out["path"].str.len() > 0]
    if out.empty:
        return pd.DataFrame(columns=["path", "moves", "share", "mean_ms", "max_ms", "mean_nodes", "mean_depth"])

    agg = {
        "moves": ("time_ms", "size"),
        "mean_ms": ("time_ms", "mean"),
        "max_ms": ("time_ms", "max"),
    }
    if "nodes" in out.columns:
        agg["mean_nodes"] = ("nodes", "mean")
    if "depth" in out.columns:
        agg["mean_depth"] = ("depth", "mean")

    table = out.groupby("path").agg(**agg).reset_index()
    table.insert(2, "share", table["moves"] / table["moves"].sum())
    return table.sort_values("moves", ascending=False).reset_index(drop=True)


def time_by_empties(df: pd.DataFrame) -> pd.DataFrame:
    """Mean and max thinking time at each empty-cell count."""
    _require_cols(df, ["empties", "time_ms"])
    out = df.dropna(subset=["empties", "time_ms"])
    return (
        out.groupby("empties")["time_ms"]
        .agg(["mean", "max", "count"])
        .reset_index()
        .sort_values("empties", ascending=False)
        .reset_index(drop=True)
    )


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe(percentiles=[0.05, 0.25, 0.5, 0.75, 0.95]).T
