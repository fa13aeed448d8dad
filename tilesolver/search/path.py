from __future__ import annotations
from typing import List, Optional, Sequence

from tilesolver.domains.board import Board
from tilesolver.search.node import SearchNode

def reconstruct(node: Optional[SearchNode]) -> List[Board]:
    """Boards from the root to `node`, start first."""
    path: List[Board] = []
    while node is not None:
        path.append(node.board)
        node = node.parent
    path.reverse()
    return path

def flatten(path: Sequence[Board]) -> List[List[int]]:
    return [b.as_list() for b in path]
