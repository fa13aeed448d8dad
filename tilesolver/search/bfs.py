from collections import deque
from time import perf_counter
from typing import Dict, Optional

from tilesolver.domains.board import Board

def bfs(start: Board, return_path: bool = True):
    """Uninformed breadth-first baseline; the first goal reached is a shortest path."""
    t0 = perf_counter()
    q = deque([start])
    parent: Dict[Board, Optional[Board]] = {start: None}
    expanded = generated = duplicates = 0
    peak = 1
    while q:
        peak = max(peak, len(q))
        s = q.popleft()
        if s.is_goal():
            path = []
            node: Optional[Board] = s
            while node is not None:
                path.append(node); node = parent[node]
            path.reverse()
            return {"path": path if return_path else None, "g": len(path) - 1,
                    "expanded": expanded, "generated": generated, "duplicates": duplicates,
                    "peak_open": peak, "peak_closed": len(parent),
                    "time": perf_counter() - t0, "algorithm": "BFS", "termination": "solved"}
        expanded += 1
        for s2 in s.successors():
            generated += 1
            if s2 in parent:
                duplicates += 1
                continue
            parent[s2] = s; q.append(s2)
    return {"path": None, "g": None, "expanded": expanded, "generated": generated,
            "duplicates": duplicates, "peak_open": peak, "peak_closed": len(parent),
            "time": perf_counter() - t0, "algorithm": "BFS", "termination": "exhausted"}
