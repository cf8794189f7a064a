#!/usr/bin/env python3
from __future__ import annotations
import argparse, os
from pathlib import Path
from typing import Iterable

import pandas as pd

KEYS = ["heuristic", "algorithm", "side", "depth"]
METRICS = ["visited", "time_sec", "g", "iterations"]


def load(paths: Iterable[str]) -> pd.DataFrame:
    dfs = []
    for fn in paths:
        df = pd.read_csv(fn)
        df["__src__"] = os.path.basename(fn)
        dfs.append(df)
    if not dfs:
        return pd.DataFrame(columns=KEYS + METRICS)
    df = pd.concat(dfs, ignore_index=True, sort=False)

    for c in ("side", "depth", "seed", "visited", "iterations", "g", "peak_recursion", "bound_final"):
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    if "time_sec" in df.columns:
        df["time_sec"] = pd.to_numeric(df["time_sec"], errors="coerce")
    return df


def summarize(df: pd.DataFrame, only_solved: bool = True) -> pd.DataFrame:
    """Mean/std/count of each metric per (heuristic, algorithm, side, depth)."""
    if only_solved and "termination" in df.columns:
        df = df[df["termination"].fillna("ok") == "ok"]
    if df.empty:
        return pd.DataFrame()
    metrics = [m for m in METRICS if m in df.columns]
    out = df.groupby(KEYS)[metrics].agg(["mean", "std", "count"])
    out.columns = [f"{m}_{stat}" for m, stat in out.columns]
    # single-sample groups have no spread
    std_cols = [c for c in out.columns if c.endswith("_std")]
    out[std_cols] = out[std_cols].fillna(0.0)
    return out.reset_index()


def termination_counts(df: pd.DataFrame) -> pd.DataFrame:
    if "termination" not in df.columns:
        return pd.DataFrame()
    return (df.groupby(["heuristic", "algorithm", "termination"])
              .size().rename("runs").reset_index())


def main(argv=None):
    ap = argparse.ArgumentParser(description="Aggregate runner CSVs (mean/std per depth).")
    ap.add_argument("csv", nargs="+", help="One or more CSVs written by the runner")
    ap.add_argument("--out", type=Path, default=None, help="Also write the summary here")
    ap.add_argument("--all", action="store_true", help="Include runs that did not end with a solution")
    args = ap.parse_args(argv)

    df = load(args.csv)
    summary = summarize(df, only_solved=not args.all)
    if summary.empty:
        print("No rows to summarize. Are your CSVs empty?")
        return

    with pd.option_context("display.max_columns", None, "display.width", 200):
        print(summary.to_string(index=False))
        counts = termination_counts(df)
        if not counts.empty:
            print()
            print(counts.to_string(index=False))

    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(args.out, index=False)
        print(f"Saved: {args.out}")


if __name__ == "__main__":
    main()
