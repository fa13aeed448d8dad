from __future__ import annotations
from typing import Any, Dict, List, Optional
from time import perf_counter

from tilesolver.domains.board import Board
from tilesolver.search.frontier import TIE_BREAKS, Frontier, VisitedSet
from tilesolver.search.node import SearchNode
from tilesolver.search.path import reconstruct

def a_star(start: Board, tie_break: str = "fifo", return_path: bool = True) -> Dict[str, Any]:
    """
    A* with Manhattan distance and instrumentation.

    The start board is expected to be solvable. An unsolvable one is not an error:
    the search closes every reachable state and reports termination="exhausted".
    Visited boards are checked lazily: a board can sit in the frontier several
    times and is skipped on pop once it has been expanded.
    """
    t0 = perf_counter()
    frontier = Frontier(tie_break)
    closed = VisitedSet()
    frontier.push(SearchNode.root(start))

    expanded = 0
    generated = 0
    duplicates = 0
    peak_open = 1
    peak_closed = 0
    goal_node: Optional[SearchNode] = None

    while frontier:
        peak_open = max(peak_open, len(frontier))
        node = frontier.pop()
        key = node.board.key()
        if key in closed:
            duplicates += 1
            continue

        if node.board.is_goal():
            goal_node = node
            break

        closed.add(key)
        expanded += 1
        peak_closed = max(peak_closed, len(closed))

        for succ in node.board.successors():
            if succ.key() in closed:
                continue
            frontier.push(node.child(succ))
            generated += 1

    t1 = perf_counter()
    solved = goal_node is not None
    return {
        "path": reconstruct(goal_node) if solved and return_path else None,
        "g": goal_node.depth if solved else None,
        "expanded": expanded,
        "generated": generated,
        "duplicates": duplicates,
        "peak_open": peak_open,
        "peak_closed": peak_closed,
        "time": t1 - t0,
        "algorithm": "A*",
        "tie_break": tie_break,
        "termination": "solved" if solved else "exhausted",
    }

class AStarSolver:
    """Holds search settings only; every solve() builds its own frontier and visited set."""
    def __init__(self, tie_break: str = "fifo"):
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"Unknown tie_break {tie_break!r}; expected one of {TIE_BREAKS}")
        self.tie_break = tie_break

    def run(self, start: Board, return_path: bool = True) -> Dict[str, Any]:
        return a_star(start, tie_break=self.tie_break, return_path=return_path)

    def solve(self, start: Board) -> Optional[List[Board]]:
        """Boards from start to goal inclusive, or None when no solution exists."""
        return self.run(start)["path"]

def solve(start: Board, tie_break: str = "fifo") -> Optional[List[Board]]:
    return AStarSolver(tie_break).solve(start)
