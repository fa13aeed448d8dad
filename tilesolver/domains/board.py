from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

State = Tuple[int, ...]  # 9-length tuple, row-major, 0 is blank
N = 3
GOAL: State = (1, 2, 3, 4, 5, 6, 7, 8, 0)

# Blank offsets: down, up, right, left. Order decides which optimal path wins ties.
MOVES: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))

def _target(tile: int) -> Tuple[int, int]:
    return (tile - 1) // N, (tile - 1) % N

def _check(tiles: State) -> None:
    if len(tiles) != N * N:
        raise ValueError(f"Board needs {N * N} cells, got {len(tiles)}")
    if sorted(tiles) != list(range(N * N)):
        raise ValueError(f"Board must hold each of 0..{N * N - 1} exactly once: {tiles}")

@dataclass(frozen=True, init=False)
class Board:
    """3×3 tile grid with the blank position cached for successor generation."""
    tiles: State
    blank: Tuple[int, int] = field(compare=False, repr=False)

    def __init__(self, tiles: Iterable[int]):
        t = tuple(int(x) for x in tiles)
        _check(t)
        object.__setattr__(self, "tiles", t)
        object.__setattr__(self, "blank", divmod(t.index(0), N))

    @classmethod
    def from_grid(cls, rows: Sequence[Sequence[int]]) -> "Board":
        if len(rows) != N or any(len(r) != N for r in rows):
            raise ValueError("Grid must be 3x3")
        return cls(v for r in rows for v in r)

    @classmethod
    def goal(cls) -> "Board":
        return cls(GOAL)

    # ---------- transitions ----------
    def successors(self) -> List["Board"]:
        r, c = self.blank
        z = r * N + c
        out: List[Board] = []
        for dr, dc in MOVES:
            nr, nc = r + dr, c + dc
            if 0 <= nr < N and 0 <= nc < N:
                j = nr * N + nc
                lst = list(self.tiles)
                lst[z], lst[j] = lst[j], lst[z]
                out.append(Board(lst))
        return out

    def is_goal(self) -> bool:
        return self.tiles == GOAL

    def heuristic(self) -> int:
        """Sum of Manhattan distances to goal cells (blank ignored)."""
        dist = 0
        for idx, tile in enumerate(self.tiles):
            if tile == 0:
                continue
            r, c = divmod(idx, N)
            gr, gc = _target(tile)
            dist += abs(r - gr) + abs(c - gc)
        return dist

    def key(self) -> str:
        return ",".join(str(v) for v in self.tiles)

    # ---------- views ----------
    def as_list(self) -> List[int]:
        return list(self.tiles)

    def format(self) -> str:
        rows = [self.tiles[i:i + N] for i in range(0, N * N, N)]
        return "\n".join(" ".join(str(v) for v in row) for row in rows)

    def __str__(self) -> str:
        return self.format()

def is_adjacent_move(a: Board, b: Board) -> bool:
    """True iff b is reachable from a by one slide of the blank."""
    return b in a.successors()
