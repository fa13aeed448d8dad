from __future__ import annotations
from typing import List, Optional, Sequence
import random

from tilesolver.domains.board import Board, GOAL, MOVES, N

def is_solvable(s: Sequence[int]) -> bool:
    """8-puzzle solvability: parity of inversions among non-blank tiles must be even."""
    arr = [x for x in s if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return (inv % 2) == 0

def make_unsolvable(board: Board) -> Board:
    """Swap the first two non-blank tiles, which flips inversion parity."""
    lst = list(board.tiles)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return Board(lst)

class Scrambler:
    """Random start boards drawn from an injected generator (seed it for repeatable runs)."""
    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def shuffle(self, values: List[int]) -> None:
        # Fisher–Yates, in place
        for i in range(len(values) - 1, 0, -1):
            j = self.rng.randint(0, i)
            values[i], values[j] = values[j], values[i]

    def generate(self) -> Board:
        numbers = list(range(N * N))
        self.shuffle(numbers)
        while not is_solvable(numbers):
            self.shuffle(numbers)
        return Board(numbers)

    def walk(self, depth: int) -> Board:
        """Random walk of `depth` blank moves from GOAL with no immediate backtracks."""
        s = list(GOAL)
        last_blank = None
        for _ in range(depth):
            z = s.index(0)
            r, c = divmod(z, N)
            cand = [(r + dr) * N + (c + dc) for dr, dc in MOVES
                    if 0 <= r + dr < N and 0 <= c + dc < N]
            if last_blank in cand and len(cand) > 1:
                cand.remove(last_blank)
            j = self.rng.choice(cand)
            s[z], s[j] = s[j], s[z]
            last_blank = z
        return Board(s)

    is_solvable = staticmethod(is_solvable)
