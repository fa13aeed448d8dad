import random

from tilesolver.domains.board import GOAL, Board
from tilesolver.domains.scrambler import Scrambler, is_solvable, make_unsolvable

def test_parity_of_known_boards():
    assert is_solvable(GOAL)
    assert is_solvable([1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert not is_solvable([2, 1, 3, 4, 5, 6, 7, 8, 0])
    assert not is_solvable([1, 2, 3, 4, 5, 6, 8, 7, 0])
    assert Scrambler.is_solvable(GOAL)

def test_boards_reachable_from_goal_are_solvable():
    for seed in range(50):
        b = Scrambler(random.Random(seed)).walk(30)
        assert is_solvable(b.tiles)

def test_make_unsolvable_flips_parity():
    b = Board.goal()
    u = make_unsolvable(b)
    assert u.as_list() == [2, 1, 3, 4, 5, 6, 7, 8, 0]
    assert not is_solvable(u.tiles)

def test_generate_is_solvable_permutation():
    s = Scrambler(random.Random(7))
    for _ in range(25):
        b = s.generate()
        assert sorted(b.tiles) == list(range(9))
        assert is_solvable(b.tiles)

def test_seeded_scrambler_is_deterministic():
    a = [Scrambler(seed=11).generate() for _ in range(3)]
    b = [Scrambler(random.Random(11)).generate() for _ in range(3)]
    assert a == b
    assert Scrambler(seed=5).walk(12) == Scrambler(seed=5).walk(12)

def test_shuffle_keeps_values():
    values = list(range(9))
    Scrambler(seed=1).shuffle(values)
    assert sorted(values) == list(range(9))

def test_walk_zero_is_goal():
    assert Scrambler(seed=0).walk(0).is_goal()
