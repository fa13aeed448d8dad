#!/usr/bin/env python3
from __future__ import annotations
import argparse, json, random
from typing import Dict, List, Optional

from tilesolver.domains.board import Board
from tilesolver.domains.scrambler import Scrambler
from tilesolver.search.a_star import AStarSolver
from tilesolver.search.path import flatten

Snapshot = List[int]

TRUNCATE_LIMIT = 100
TRUNCATE_KEEP = 50

def truncate_path(path: List[Snapshot], limit: int = TRUNCATE_LIMIT, keep: int = TRUNCATE_KEEP) -> List[Snapshot]:
    """Keep the first and last `keep` snapshots once the path is longer than `limit`."""
    if len(path) > limit:
        return list(path[:keep]) + list(path[len(path) - keep:])
    return list(path)

def build_response(path: List[Snapshot], truncate: bool = True) -> Dict[str, List[Snapshot]]:
    return {"data": truncate_path(path) if truncate else list(path)}

class PuzzleSolverService:
    """Scrambles a board, solves it and hands back every state from start to goal."""
    def __init__(self, rng: Optional[random.Random] = None, solver: Optional[AStarSolver] = None):
        self.scrambler = Scrambler(rng)
        self._solver = solver
        self.last_start: Optional[Board] = None

    def solver(self) -> AStarSolver:
        return self._solver if self._solver is not None else AStarSolver()

    def solve(self) -> List[Snapshot]:
        start = self.scrambler.generate()
        self.last_start = start
        path = self.solver().solve(start)
        return flatten(path) if path else []

def main(argv=None):
    ap = argparse.ArgumentParser(description="Solve a random 8-puzzle scramble and print the path as JSON.")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the scrambler (random if omitted)")
    ap.add_argument("--tie_break", choices=["fifo", "lifo", "h", "g"], default="fifo")
    ap.add_argument("--full", action="store_true", help="Do not truncate long paths")
    ap.add_argument("--print", dest="print_boards", action="store_true", help="Also print every board as a grid")
    args = ap.parse_args(argv)

    service = PuzzleSolverService(random.Random(args.seed), AStarSolver(args.tie_break))
    path = service.solve()
    if args.print_boards:
        for snap in path:
            print(Board(snap).format())
            print()
    print(json.dumps(build_response(path, truncate=not args.full)))

if __name__ == "__main__":
    main()
