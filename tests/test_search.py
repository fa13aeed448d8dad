import random

import pytest

from tilesolver.domains.board import GOAL, Board, is_adjacent_move
from tilesolver.domains.scrambler import Scrambler, make_unsolvable
from tilesolver.search.a_star import AStarSolver, a_star, solve
from tilesolver.search.bfs import bfs
from tilesolver.search.node import SearchNode
from tilesolver.search.path import flatten, reconstruct

def _check_path(start, path):
    assert path[0] == start
    assert path[-1].is_goal()
    for a, b in zip(path, path[1:]):
        assert is_adjacent_move(a, b)

def test_one_move_from_goal():
    start = Board([1, 2, 3, 4, 5, 6, 7, 0, 8])
    path = solve(start)
    assert flatten(path) == [[1, 2, 3, 4, 5, 6, 7, 0, 8], list(GOAL)]

def test_start_is_goal():
    path = solve(Board.goal())
    assert path == [Board.goal()]
    res = a_star(Board.goal())
    assert res["g"] == 0
    assert res["expanded"] == 0
    assert res["termination"] == "solved"

@pytest.mark.parametrize("seed", range(8))
def test_astar_matches_bfs_optimum(seed):
    start = Scrambler(random.Random(seed)).walk(18)
    res = a_star(start)
    assert res["termination"] == "solved"
    _check_path(start, res["path"])
    assert len(res["path"]) - 1 == res["g"]
    assert res["g"] == bfs(start)["g"]

def test_full_shuffle_is_solved_optimally():
    start = Scrambler(seed=2024).generate()
    path = AStarSolver().solve(start)
    _check_path(start, path)
    assert len(path) - 1 == bfs(start, return_path=False)["g"]

@pytest.mark.parametrize("tie", ["fifo", "lifo", "h", "g"])
def test_every_tie_break_is_optimal(tie):
    start = Scrambler(seed=3).walk(16)
    res = a_star(start, tie_break=tie)
    assert res["tie_break"] == tie
    assert res["g"] == bfs(start)["g"]

def test_search_is_deterministic():
    start = Scrambler(seed=9).walk(20)
    assert solve(start) == solve(start)

@pytest.mark.parametrize("seed", range(6))
def test_heuristic_is_admissible(seed):
    start = Scrambler(seed=seed).walk(14)
    assert start.heuristic() <= bfs(start)["g"]

def test_return_path_false_keeps_cost():
    start = Scrambler(seed=1).walk(10)
    res = a_star(start, return_path=False)
    assert res["path"] is None
    assert res["g"] == bfs(start)["g"]

def test_unsolvable_board_exhausts():
    start = make_unsolvable(Board.goal())
    res = a_star(start)
    assert res["termination"] == "exhausted"
    assert res["path"] is None
    assert res["g"] is None
    assert res["expanded"] == 181440  # 9!/2

def test_solver_rejects_unknown_tie_break():
    with pytest.raises(ValueError):
        AStarSolver("random")

def test_reconstruct_walks_parents():
    root = SearchNode.root(Board([1, 2, 3, 4, 5, 6, 0, 7, 8]))
    mid = root.child(Board([1, 2, 3, 4, 5, 6, 7, 0, 8]))
    end = mid.child(Board.goal())
    assert reconstruct(end) == [root.board, mid.board, end.board]
    assert reconstruct(None) == []
