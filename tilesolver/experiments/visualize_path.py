#!/usr/bin/env python3
import argparse, os, random
from pathlib import Path
from typing import List
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from tilesolver.domains.board import Board, N
from tilesolver.domains.scrambler import Scrambler
from tilesolver.search.a_star import AStarSolver

def draw_board(board: Board, out_path: Path, title: str = ""):
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, N); ax.set_ylim(0, N)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(N+1):
        ax.plot([0,N],[i,i], linewidth=1)
        ax.plot([i,i],[0,N], linewidth=1)
    # tiles
    for idx, t in enumerate(board.tiles):
        if t == 0: continue
        r, c = divmod(idx, N)
        ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title, fontsize=10)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()

def save_frames(path: List[Board], outdir: Path) -> List[Path]:
    last = len(path) - 1
    frames = []
    for i, b in enumerate(path):
        p = outdir / f"step_{i:03d}.png"
        draw_board(b, p, title=f"Step {i}/{last}")
        frames.append(p)
    return frames

def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one scramble and save board images along the path.")
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--depth", type=int, default=None,
                   help="Scramble by a random walk of this many moves instead of a full shuffle")
    p.add_argument("--tie_break", choices=["fifo","lifo","h","g"], default="fifo")
    p.add_argument("--outdir", default="report/figs/example_path")
    args = p.parse_args(argv)

    scrambler = Scrambler(random.Random(args.seed))
    start = scrambler.walk(args.depth) if args.depth is not None else scrambler.generate()
    path = AStarSolver(args.tie_break).solve(start)
    if not path:
        print("No path (exhausted).")
        return

    outdir = Path(args.outdir)
    save_frames(path, outdir)
    print(f"Saved {len(path)} frames to {outdir}")

if __name__ == "__main__":
    main()
