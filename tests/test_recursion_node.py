# -*- coding: utf-8 -*-
import pytest

from quickhull.geometry import Point, sort_points, as_points
from quickhull.recursion_node import RecursionNode, NOT_STARTED, COMPLETE, \
    progress_name

def test_seed_root(square):
    root = RecursionNode.seed_root(sort_points(as_points(square)))
    assert root.boundary == (Point(0, 0), Point(10, 10))
    assert root.points == [Point(0, 10), Point(5, 5), Point(10, 0)]
    assert root.progress == NOT_STARTED
    assert root.is_root and root.parent is None
    assert root.furthest is None

    first, second = root.first_child, root.second_child
    assert first.boundary == (Point(0, 0), Point(10, 10))
    assert first.points == [Point(10, 0)]
    assert second.boundary == (Point(10, 10), Point(0, 0))
    assert second.points == [Point(0, 10)]
    assert first.parent is root and second.parent is root
    assert first.depth == 1
    assert root.count_nodes() == 3

def test_spawn_children():
    node = RecursionNode([Point(1, -3), Point(5, -8), Point(9, -3)],
                         (Point(0, 0), Point(10, 0)))
    assert node.is_leaf
    node.spawn_children(Point(5, -8))
    assert node.furthest == Point(5, -8)
    assert node.first_child.boundary == (Point(0, 0), Point(5, -8))
    assert node.first_child.points == [Point(1, -3)]
    assert node.second_child.boundary == (Point(5, -8), Point(10, 0))
    assert node.second_child.points == [Point(9, -3)]
    assert node.first_child.parent is node
    assert not node.is_leaf

    with pytest.raises(RuntimeError):
        node.spawn_children(Point(5, -8))

def test_children_sorted():
    A, B = Point(0, 0), Point(20, 0)
    node = RecursionNode([Point(7, -9), Point(2, -3), Point(10, -10)],
                         (A, B))
    node.spawn_children(Point(10, -10))
    assert node.first_child.points == [Point(2, -3), Point(7, -9)]
    assert node.second_child.points == []

def test_release_children(square):
    root = RecursionNode.seed_root(sort_points(as_points(square)))
    child = root.first_child
    root.release_children()
    assert root.is_leaf
    assert root.count_nodes() == 1
    # the back-reference does not keep the parent alive
    del root
    assert child.parent is None

def test_repr():
    node = RecursionNode([], (Point(0, 0), Point(1, 1)))
    node.progress = COMPLETE
    assert repr(node) == 'RecursionNode((0,0)->(1,1), 0 points, complete)'
    assert progress_name(NOT_STARTED) == 'not started'
