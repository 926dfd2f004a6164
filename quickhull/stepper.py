# -*- coding: utf-8 -*-
'''
This file is part of the Stepwise QuickHull package, a steppable
implementation of the QuickHull convex hull algorithm.

Copyright 2026 by the Stepwise QuickHull authors.

Stepwise QuickHull is distributed under the GPLv3 license.
'''
'''
Stepwise QuickHull.

The recursive QuickHull procedure is emulated by an explicit tree of
L{RecursionNode}s and a cursor pointing to the node where the recursion
currently is. Each call to L{QuickHull.step} advances the computation by
one node, so the hull can be watched while it forms.

Example::

    qh = QuickHull([(0, 0), (10, 0), (10, 10), (0, 10), (5, 5)],
                   center=(5, 5))
    while qh.step():
        pass
    print(qh.hull())
'''
from quickhull.geometry import as_points, sort_points, select_furthest
from quickhull.recursion_node import RecursionNode, NOT_STARTED, \
    AFTER_FIRST_BRANCH, AFTER_SECOND_BRANCH, COMPLETE
from quickhull.finalize import sort_counterclockwise, nominal_center, \
    centroid
from quickhull.output import write_hull_points
from quickhull.tools import progressreporter
from quickhull import settings

__all__ = ['QuickHull', 'convex_hull']

class QuickHull:
    '''
    One hull computation: the recursion tree, the cursor and the hull
    points found so far.

    The state is only consistent between calls to L{step}; anything that
    displays it must read it there.

    @param points: input points; if given, L{begin} is called right away
    @param center: reference point for ordering the hull. None means the
    midpoint of the display area from L{settings}, 'centroid' means the
    mean of the hull points.
    @param verbose: print progress messages?
    @type verbose: bool
    @param callback: called with the number of steps done
    @param report_every: call I{callback} only every this many steps
    '''
    def __init__(self, points=None, center=None, verbose=False,
                 callback=None, report_every=1):
        if isinstance(center, str) and center != 'centroid':
            raise ValueError('Unknown reference point "{0}".'.format(center))
        self.center = center
        self.verbose = verbose
        self.callback = callback
        self.report_every = report_every
        self._reset()
        if points is not None:
            self.begin(points)

    def _reset(self):
        self.progress = progressreporter(self.callback, self.report_every)
        self._input_points = ()
        self._sorted_points = ()
        self._root = None
        self._cursor = None
        self._hull_points = []
        self._furthest = None
        self._finished = False
        self._step_count = 0

    def begin(self, points):
        '''
        Start a new computation and discard the old one.

        @param points: sequence of at least two distinct points with
        integer coordinates
        '''
        points = as_points(points)
        sorted_points = sort_points(points)
        if len(sorted_points) < 2 or sorted_points[0] == sorted_points[-1]:
            raise ValueError('The convex hull needs at least two distinct '
                             'points.')
        root = RecursionNode.seed_root(sorted_points)

        self._reset()
        self._input_points = tuple(points)
        self._sorted_points = tuple(sorted_points)
        self._root = root
        self._cursor = root
        self._hull_points = list(root.boundary)
        if self.verbose:
            print('QuickHull: {0} points, extreme points {1} and {2}.'.
                  format(len(points), *root.boundary))

    def step(self):
        '''
        Advance the computation by one node of the recursion tree.

        @return: True if there is more work to do, False when the hull is
        complete.
        @rtype: bool
        '''
        node = self._cursor
        if node is None:
            raise RuntimeError('No computation has been started. Call '
                               'begin() first.')

        if not node.points:
            node.progress = COMPLETE

        # Return from finished recursions.
        while node.progress in (AFTER_SECOND_BRANCH, COMPLETE):
            node.progress = COMPLETE
            node.release_children()
            parent = node.parent
            if parent is None:
                self._cursor = node
                if not self._finished:
                    self._finished = True
                    if self.verbose:
                        print('QuickHull: done after {0} steps, {1} hull '
                              'points.'.format(self._step_count,
                                               len(self._hull_points)))
                return False
            node = parent

        if node.progress == NOT_STARTED:
            # The root comes with its children already built.
            if not node.has_children:
                A, B = node.boundary
                furthest = select_furthest(A, B, node.points)
                node.spawn_children(furthest)
                self._hull_points.append(furthest)
                self._furthest = furthest
            node.progress = AFTER_FIRST_BRANCH
            self._cursor = node.first_child
        else:
            assert node.progress == AFTER_FIRST_BRANCH
            node.progress = AFTER_SECOND_BRANCH
            self._cursor = node.second_child

        self._step_count += 1
        self.progress(self._step_count)
        return True

    def run(self, max_steps=None):
        '''
        Step until the hull is complete.

        @param max_steps: stop early after this many steps
        @return: number of steps done in this call
        '''
        n = 0
        while max_steps is None or n < max_steps:
            if not self.step():
                break
            n += 1
        return n

    def reference_point(self, center=None):
        if center is None:
            center = self.center
        if center is None:
            return nominal_center()
        if isinstance(center, str):
            if center == 'centroid':
                return centroid(self._hull_points)
            raise ValueError('Unknown reference point "{0}". Use a pair of '
                             'coordinates or "centroid".'.format(center))
        if len(center) != 2:
            raise ValueError('The reference point must have two '
                             'coordinates: {0}.'.format(center))
        return center

    def hull(self, center=None):
        '''
        The hull points found so far, in counterclockwise order around the
        reference point.

        @param center: overrides the reference point given to the
        constructor
        '''
        return sort_counterclockwise(self._hull_points,
                                     self.reference_point(center))

    def write(self, filename=settings.OUTPUT_FILENAME, center=None):
        '''
        Write the finished hull to a text file.

        @return: False if the file could not be written
        @rtype: bool
        '''
        if not self._finished:
            raise RuntimeError('The hull is not complete yet.')
        return write_hull_points(self.hull(center), filename)

    # Read-only state for displaying the computation

    @property
    def input_points(self):
        return self._input_points

    @property
    def sorted_points(self):
        return self._sorted_points

    @property
    def hull_points(self):
        '''Hull points in the order they were found.'''
        return tuple(self._hull_points)

    @property
    def root(self):
        return self._root

    @property
    def cursor(self):
        return self._cursor

    @property
    def current_boundary(self):
        if self._cursor is None:
            return None
        return self._cursor.boundary

    @property
    def current_extremes(self):
        '''Leftmost and rightmost candidate point of the current node.'''
        if self._cursor is None or not self._cursor.points:
            return None
        return self._cursor.points[0], self._cursor.points[-1]

    @property
    def furthest_point(self):
        '''The hull point found by the last step that found one.'''
        return self._furthest

    @property
    def finished(self):
        return self._finished

    @property
    def step_count(self):
        return self._step_count

def convex_hull(points, center='centroid'):
    '''
    Convex hull of a point set, computed in one go.
    '''
    qh = QuickHull(points, center=center)
    qh.run()
    return qh.hull()
