# -*- coding: utf-8 -*-
'''
This file is part of the Stepwise QuickHull package, a steppable
implementation of the QuickHull convex hull algorithm.

Copyright 2026 by the Stepwise QuickHull authors.

Stepwise QuickHull is distributed under the GPLv3 license.
'''
'''
Explicit recursion tree for the stepwise QuickHull algorithm.

Each node stands for one activation of the recursive procedure "find the
hull points outside the segment A->B". Children are owned by their parent
only. The back-reference to the parent is a weak reference, used to resume
the traversal when a subtree is finished.
'''
import weakref

from quickhull.geometry import sort_points, partition_outside

__all__ = ['RecursionNode', 'NOT_STARTED', 'AFTER_FIRST_BRANCH',
           'AFTER_SECOND_BRANCH', 'COMPLETE', 'progress_name']

# Progress markers
NOT_STARTED = 0
AFTER_FIRST_BRANCH = 1
AFTER_SECOND_BRANCH = 2
COMPLETE = 3

_progress_names = {
    NOT_STARTED: 'not started',
    AFTER_FIRST_BRANCH: 'after first branch',
    AFTER_SECOND_BRANCH: 'after second branch',
    COMPLETE: 'complete',
    }

def progress_name(progress):
    return _progress_names[progress]

class RecursionNode:
    '''
    One pending or completed sub-problem.

    @ivar points: candidate points strictly outside of L{boundary}, sorted
    by x, then y. The boundary endpoints are never contained.
    @ivar boundary: directed segment (A, B)
    @ivar progress: one of the progress markers of this module
    @ivar furthest: the point selected when the children were built, or
    None
    '''
    def __init__(self, points, boundary, parent=None):
        A, B = boundary
        assert A not in points and B not in points
        self.points = points
        self.boundary = (A, B)
        self.progress = NOT_STARTED
        self.furthest = None
        self.first_child = None
        self.second_child = None
        self._parent = None if parent is None else weakref.ref(parent)

    @classmethod
    def seed_root(cls, points):
        '''
        Root node for a whole point set.

        The boundary is the segment between the leftmost and the rightmost
        point. Unlike all other nodes, the children of the root are built
        right away, one for each side of the boundary, and the root does
        not contribute a hull point of its own.

        @param points: sorted points with at least two distinct elements
        '''
        A = points[0]
        B = points[-1]
        assert A != B
        root = cls([p for p in points if p != A and p != B], (A, B))
        root.first_child = cls(sort_points(partition_outside(A, B, points)),
                               (A, B), parent=root)
        root.second_child = cls(sort_points(partition_outside(B, A, points)),
                                (B, A), parent=root)
        return root

    @property
    def parent(self):
        if self._parent is None:
            return None
        return self._parent()

    @property
    def is_root(self):
        return self._parent is None

    @property
    def is_leaf(self):
        return self.first_child is None and self.second_child is None

    @property
    def has_children(self):
        return self.first_child is not None

    @property
    def depth(self):
        d = 0
        node = self.parent
        while node is not None:
            d += 1
            node = node.parent
        return d

    def spawn_children(self, furthest):
        '''
        Split the point set at the furthest point into the parts outside
        of A->furthest and furthest->B.
        '''
        if self.first_child is not None:
            raise RuntimeError('The children of a recursion node must only '
                               'be created once.')
        A, B = self.boundary
        self.furthest = furthest
        self.first_child = RecursionNode(
            sort_points(partition_outside(A, furthest, self.points)),
            (A, furthest), parent=self)
        self.second_child = RecursionNode(
            sort_points(partition_outside(furthest, B, self.points)),
            (furthest, B), parent=self)

    def release_children(self):
        self.first_child = None
        self.second_child = None

    def count_nodes(self):
        '''Number of nodes in the live subtree, including this one.'''
        count = 0
        stack = [self]
        while stack:
            node = stack.pop()
            count += 1
            for child in (node.first_child, node.second_child):
                if child is not None:
                    stack.append(child)
        return count

    def __repr__(self):
        A, B = self.boundary
        return 'RecursionNode(({0},{1})->({2},{3}), {4} points, {5})'.format(
            A.x, A.y, B.x, B.y, len(self.points),
            progress_name(self.progress))
