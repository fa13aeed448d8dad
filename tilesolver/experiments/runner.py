#!/usr/bin/env python3
from __future__ import annotations
import argparse, csv, random
from dataclasses import dataclass
from pathlib import Path
from typing import List

from tilesolver.domains.board import Board
from tilesolver.domains.scrambler import Scrambler, is_solvable, make_unsolvable
from tilesolver.search.a_star import a_star
from tilesolver.search.bfs import bfs

HEADER = [
    "algorithm", "depth", "seed",
    "expanded", "generated", "duplicates", "g", "time_sec",
    "peak_open", "peak_closed", "tie_break",
    "termination", "solvable",
]

@dataclass
class Instance:
    seed: int
    depth: int
    board: Board

def generate_instances(depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            b = Scrambler(random.Random(seed)).walk(d)
            seed += 1
            attempts += 1
            if is_solvable(b.tiles):
                out.append(Instance(seed=seed, depth=d, board=b))
                made += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out

def write_row(w, res, inst: Instance, solvable_flag: int):
    w.writerow([
        res.get("algorithm", ""), inst.depth, inst.seed,
        res.get("expanded", ""), res.get("generated", ""), res.get("duplicates", ""), res.get("g", ""),
        f"{res.get('time', 0.0):.6f}",
        res.get("peak_open", ""), res.get("peak_closed", ""),
        res.get("tie_break", ""), res.get("termination", "solved"), solvable_flag,
    ])

def run(insts: List[Instance], out: Path, algo: str = "a", tie_break: str = "fifo",
        include_unsolvable: bool = False) -> int:
    """Run every instance and write one CSV row per (instance, algorithm). Returns rows written."""
    want_a = algo in ("a", "both")
    want_bfs = algo in ("bfs", "both")
    rows = 0
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            cases = [(inst.board, 1)]
            if include_unsolvable:
                cases.append((make_unsolvable(inst.board), 0))
            for board, flag in cases:
                if want_a:
                    write_row(w, a_star(board, tie_break=tie_break, return_path=False), inst, flag)
                    rows += 1
                if want_bfs:
                    write_row(w, bfs(board, return_path=False), inst, flag)
                    rows += 1
    return rows

def main(argv=None):
    ap = argparse.ArgumentParser(description="A* (+BFS) 8-puzzle experiment runner")
    ap.add_argument("--algo", choices=["a", "bfs", "both"], default="a",
                    help="'both' = A*+BFS")
    ap.add_argument("--depths", type=int, nargs="+", default=[6, 10, 14, 18, 22])
    ap.add_argument("--per_depth", type=int, default=20)
    ap.add_argument("--start_seed", type=int, default=0)
    ap.add_argument("--tie_break", choices=["fifo", "lifo", "h", "g"], default="fifo")
    ap.add_argument("--include_unsolvable", action="store_true",
                    help="Also run a parity-flipped copy of each instance (slow: exhausts 9!/2 states)")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    args = ap.parse_args(argv)

    insts = generate_instances(args.depths, args.per_depth, args.start_seed)
    run(insts, args.out, args.algo, args.tie_break, args.include_unsolvable)
    print(f"Wrote {args.out} ({len(insts)} instances)")

if __name__ == "__main__":
    main()
