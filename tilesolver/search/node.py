from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from tilesolver.domains.board import Board

@dataclass(frozen=True, eq=False)
class SearchNode:
    """A board reached at path cost `depth`; `parent` may be shared by several children."""
    board: Board
    depth: int = 0
    parent: Optional["SearchNode"] = field(default=None, repr=False)
    heuristic: int = field(init=False)
    total: int = field(init=False)

    def __post_init__(self):
        h = self.board.heuristic()
        object.__setattr__(self, "heuristic", h)
        object.__setattr__(self, "total", self.depth + h)

    @classmethod
    def root(cls, board: Board) -> "SearchNode":
        return cls(board, 0, None)

    def child(self, board: Board) -> "SearchNode":
        return SearchNode(board, self.depth + 1, self)
