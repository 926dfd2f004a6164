# -*- coding: utf-8 -*-
'''
This file is part of the Stepwise QuickHull package, a steppable
implementation of the QuickHull convex hull algorithm.

Copyright 2026 by the Stepwise QuickHull authors.

Stepwise QuickHull is distributed under the GPLv3 license.
'''
'''
Geometric predicates for the QuickHull algorithm.

All coordinates are integers and all predicates use exact integer
arithmetic. Python integers have arbitrary precision, so the orientation
test cannot overflow, whatever the coordinate range.

Coordinates are screen coordinates: +x to the right, +y downward. A point
C is "outside" the directed segment A->B if orientation_sign(A, B, C) is
negative.
'''
from collections import namedtuple
import numpy as np

__all__ = ['Point', 'orientation_sign', 'extremal_distance', 'sort_points',
           'partition_outside', 'select_furthest', 'as_points']

Point = namedtuple('Point', ('x', 'y'))

def orientation_sign(A, B, C):
    '''
    Twice the signed area of the triangle A, B, C. The points may be any
    pairs of integers, not only L{Point}s.

    @return: negative if C is outside of A->B, zero if the three points are
    collinear, positive if C is inside.
    @rtype: int
    '''
    ax, ay = A[0], A[1]
    bx, by = B[0], B[1]
    cx, cy = C[0], C[1]
    return (ax * by) + (cx * ay) + (bx * cy) \
        - (cx * by) - (bx * ay) - (ax * cy)

def extremal_distance(A, B, C):
    '''
    Proxy for the distance of C from the line through A and B. Only good
    for comparisons.
    '''
    return abs(orientation_sign(A, B, C))

def sort_points(points):
    '''Sort left-to-right, top-to-bottom.'''
    return sorted(points, key=lambda p: (p[0], p[1]))

def partition_outside(A, B, points):
    '''
    All points strictly outside of the directed segment A->B.

    The endpoints themselves and collinear points are dropped. The order of
    the input is kept.
    '''
    return [p for p in points
            if p != A and p != B and orientation_sign(A, B, p) < 0]

def select_furthest(A, B, points):
    '''
    The point with the largest distance from the line A-B. Ties go to the
    point which comes first in I{points}.

    @param points: nonempty sequence of points
    @rtype: Point
    '''
    if not points:
        raise ValueError('No furthest point in an empty point set.')
    furthest = points[0]
    prev_max = -1
    for p in points:
        d = extremal_distance(A, B, p)
        if d > prev_max:
            prev_max = d
            furthest = p
    return furthest

def as_points(data):
    '''
    Convert input data to a list of L{Point}s.

    @param data: sequence of coordinate pairs or NumPy array of shape (n,2)
    with integral entries.
    '''
    if isinstance(data, np.ndarray):
        if data.size == 0:
            return []
        if data.ndim != 2 or data.shape[1] != 2:
            raise ValueError('Point data must have shape (n, 2), not {0}.'.
                             format(data.shape))
        if not np.issubdtype(data.dtype, np.integer):
            if not np.issubdtype(data.dtype, np.number) \
                    or not np.all(np.isfinite(data)) \
                    or np.any(data != np.round(data)):
                raise ValueError('Point coordinates must be integers.')
        return [Point(int(x), int(y)) for x, y in data.tolist()]
    points = []
    for item in data:
        if len(item) != 2:
            raise ValueError('Points must have two coordinates: {0}.'.
                             format(item))
        x, y = item
        try:
            integral = int(x) == x and int(y) == y
        except OverflowError:
            integral = False
        if not integral:
            raise ValueError('Point coordinates must be integers: {0}.'.
                             format(item))
        points.append(Point(int(x), int(y)))
    return points
