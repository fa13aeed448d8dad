#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("A* vs BFS", "python -m tilesolver.experiments.runner --depths 6 10 14 18 --per_depth 10 --algo both --out results/astar_vs_bfs.csv")
    for tie in ("fifo", "lifo", "h", "g"):
        run(f"A* tie={tie}", f"python -m tilesolver.experiments.runner --depths 6 10 14 18 22 --per_depth 20 --tie_break {tie} --out results/astar_tie_{tie}.csv")
    run("Unsolvable", "python -m tilesolver.experiments.runner --depths 10 --per_depth 2 --include_unsolvable --out results/unsolvable.csv")
    run("Summary", "python -m tilesolver.experiments.analyze results/astar_vs_bfs.csv results/unsolvable.csv --save results/plots")

if __name__ == "__main__":
    main()
