from __future__ import annotations
from typing import List, Set, Tuple
import heapq
import itertools

from tilesolver.search.node import SearchNode

TIE_BREAKS = ("fifo", "lifo", "h", "g")

class Frontier:
    """
    Min-priority queue of SearchNodes keyed on total (f = g + h).
    tie_break orders nodes with equal f:
      fifo -> older first (default), lifo -> newer first,
      h -> smaller h first, g -> larger g first; insertion order settles the rest.
    """
    def __init__(self, tie_break: str = "fifo"):
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"Unknown tie_break {tie_break!r}; expected one of {TIE_BREAKS}")
        self.tie_break = tie_break
        self._heap: List[Tuple[Tuple[int, int, int], SearchNode]] = []
        self._counter = itertools.count()

    def _priority(self, node: SearchNode) -> Tuple[int, int, int]:
        ctr = next(self._counter)
        f, g, h = node.total, node.depth, node.heuristic
        if self.tie_break == "h":    return (f, h, ctr)
        if self.tie_break == "g":    return (f, -g, ctr)
        if self.tie_break == "lifo": return (f, 0, -ctr)
        return (f, 0, ctr)

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (self._priority(node), node))

    def pop(self) -> SearchNode:
        return heapq.heappop(self._heap)[1]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

class VisitedSet:
    """Keys of boards already expanded."""
    def __init__(self):
        self._keys: Set[str] = set()

    def add(self, key: str) -> None:
        self._keys.add(key)

    def __contains__(self, key: str) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._keys)
