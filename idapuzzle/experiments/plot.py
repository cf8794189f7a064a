#!/usr/bin/env python3
import argparse, os, sys
from pathlib import Path

import numpy as np
import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from idapuzzle.experiments.summarize import load, summarize


def plot_metric(ax, summary, metric, log=False):
    groups = summary.groupby(["algorithm", "heuristic"])
    width = 0.25
    for k, ((algo, heur), g) in enumerate(sorted(groups, key=lambda kv: kv[0])):
        g = g.sort_values("depth")
        # offset series slightly so error bars don't overlap
        xs = g["depth"].to_numpy(dtype=float) + (k - (groups.ngroups - 1) / 2) * width / 2
        ys = g[f"{metric}_mean"].to_numpy(dtype=float)
        es = g[f"{metric}_std"].to_numpy(dtype=float)
        ax.errorbar(xs, ys, yerr=es, marker="o", capsize=3, label=f"{algo} | {heur}")
    if log and np.all(summary[f"{metric}_mean"].to_numpy() > 0):
        ax.set_yscale("log")
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs depth (mean ± std)")
    ax.grid(True)
    ax.legend()


def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path


def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--log", action="store_true", help="Log-scale y axis")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    summary = summarize(load(args.csv))
    if summary.empty:
        print("No rows to plot. Are your CSVs empty?")
        sys.exit(0)

    outdir = Path(args.save)
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    for ax, metric in zip(axes, ["visited", "time_sec"]):
        plot_metric(ax, summary, metric, log=args.log)
    plt.tight_layout()
    save_fig(fig, outdir, f"{base}_combined")
    if not args.show:
        plt.close(fig)

    for metric in ["visited", "time_sec", "iterations"]:
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, summary, metric, log=args.log and metric != "iterations")
        plt.tight_layout()
        save_fig(fig, outdir, f"{base}_{metric}")
        plt.close(fig)

    if args.show:
        plt.show()


if __name__ == "__main__":
    main()
