#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    py = sys.executable
    run(f"{py} -m idapuzzle.experiments.runner --side 3 --depths 4 8 12 16 20 --per_depth 10 --heuristic manhattan --out results/p8_manhattan.csv")
    run(f"{py} -m idapuzzle.experiments.runner --side 3 --depths 4 8 12 16 20 --per_depth 10 --heuristic misplaced --out results/p8_misplaced.csv")
    run(f"{py} -m idapuzzle.experiments.runner --side 3 --depths 4 8 12 16 20 --per_depth 10 --heuristic manhattan --unsorted --out results/p8_manhattan_unsorted.csv")
    run(f"{py} -m idapuzzle.experiments.runner --side 2 --depths 2 4 6 --per_depth 5 --include_unsolvable --out results/p3_unsolvable.csv")
    run(f"{py} -m idapuzzle.experiments.summarize results/p8_manhattan.csv results/p8_misplaced.csv results/p8_manhattan_unsorted.csv --out results/p8_summary.csv")
    run(f"{py} -m idapuzzle.experiments.plot results/p8_manhattan.csv results/p8_misplaced.csv results/p8_manhattan_unsorted.csv --log")

if __name__ == "__main__":
    main()
