#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import Sequence

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from idapuzzle.domains.board import REFERENCE_BOARDS, scramble, side
from idapuzzle.heuristics.registry import HEURISTICS, get_heuristic
from idapuzzle.search.ida_star import ida_star


def draw_board(board: Sequence[int], out_path: Path):
    n = side(board)
    plt.figure(figsize=(3, 3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n + 1):
        ax.plot([0, n], [i, i], linewidth=1)
        ax.plot([i, i], [0, n], linewidth=1)
    # tiles
    for idx, t in enumerate(board):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c + 0.5, r + 0.6, str(t), ha="center", va="center", fontsize=16)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()


def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one board and save board images along the path.")
    p.add_argument("--board", type=int, nargs="+", default=None)
    p.add_argument("--reference", choices=sorted(REFERENCE_BOARDS), default=None)
    p.add_argument("--side", type=int, default=3, help="Side of the scrambled board when none is given")
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    p.add_argument("--outdir", default="results/figs/example_path")
    args = p.parse_args(argv)

    if args.board:
        start = tuple(args.board)
    elif args.reference:
        start = REFERENCE_BOARDS[args.reference]
    else:
        start = scramble(args.side, args.depth, args.seed)

    res = ida_star(start, get_heuristic(args.heuristic))
    if not res["path"]:
        print(f"No path ({res['termination']}). Try a smaller depth.")
        return

    outdir = Path(args.outdir)
    for i, b in enumerate(res["path"]):
        draw_board(b, outdir / f"step_{i:03d}.png")
    print(f"Saved {len(res['path'])} frames to {outdir}")


if __name__ == "__main__":
    main()
