import pytest

from tilesolver.domains.board import Board
from tilesolver.search.frontier import Frontier, VisitedSet
from tilesolver.search.node import SearchNode

def _nodes():
    root = SearchNode.root(Board([1, 2, 3, 4, 5, 6, 7, 0, 8]))
    return root, root.child(Board([1, 2, 3, 4, 5, 6, 7, 8, 0]))

def test_node_costs():
    root, child = _nodes()
    assert (root.depth, root.heuristic, root.total) == (0, 1, 1)
    assert (child.depth, child.heuristic, child.total) == (1, 0, 1)
    assert child.parent is root

def test_children_share_parent():
    root = SearchNode.root(Board([1, 2, 3, 4, 0, 5, 6, 7, 8]))
    kids = [root.child(b) for b in root.board.successors()]
    assert all(k.parent is root for k in kids)

def test_pops_lowest_total_first():
    f = Frontier()
    far = SearchNode.root(Board([0, 1, 2, 3, 4, 5, 6, 7, 8]))
    near = SearchNode.root(Board([1, 2, 3, 4, 5, 6, 7, 0, 8]))
    f.push(far); f.push(near)
    assert len(f) == 2
    assert f.pop() is near
    assert f.pop() is far
    assert not f

def test_fifo_and_lifo_ties():
    root, child = _nodes()  # both total == 1
    f = Frontier("fifo")
    f.push(root); f.push(child)
    assert f.pop() is root
    f = Frontier("lifo")
    f.push(root); f.push(child)
    assert f.pop() is child

def test_h_and_g_ties():
    root, child = _nodes()
    f = Frontier("h")
    f.push(root); f.push(child)
    assert f.pop() is child
    f = Frontier("g")
    f.push(root); f.push(child)
    assert f.pop() is child

def test_unknown_tie_break():
    with pytest.raises(ValueError):
        Frontier("random")

def test_visited_set():
    v = VisitedSet()
    k = Board.goal().key()
    assert k not in v
    v.add(k); v.add(k)
    assert k in v
    assert len(v) == 1
