# -*- coding: utf-8 -*-
'''
This file is part of the Stepwise QuickHull package, a steppable
implementation of the QuickHull convex hull algorithm.

Copyright 2026 by the Stepwise QuickHull authors.

Stepwise QuickHull is distributed under the GPLv3 license.
'''
'''
Test point sets for QuickHull
'''
import numpy as np

from quickhull.geometry import Point
from quickhull import settings

__all__ = ['random_points', 'circle_points', 'square_with_center']

def random_points(count=settings.POINT_COUNT, seed=settings.RAND_SEED,
                  width=settings.WINDOW_WIDTH, height=settings.WINDOW_HEIGHT,
                  margin=settings.WINDOW_MARGIN):
    '''
    Uniformly distributed integer points in the display area, keeping a
    margin from the border.

    @param seed: seed for the random generator, or None
    '''
    rs = np.random.RandomState(seed)
    x = rs.randint(0, width - 2 * margin, size=count) + margin
    y = rs.randint(0, height - 2 * margin, size=count) + margin
    return [Point(int(a), int(b)) for a, b in zip(x, y)]

def circle_points(samples=200, radius=300,
                  center=(settings.WINDOW_WIDTH // 2,
                          settings.WINDOW_HEIGHT // 2)):
    '''
    Evenly spaced points on a circle, rounded to integers

    Almost every point is a hull point, so the recursion tree gets very
    deep. Rounding may produce duplicates for small radii; these are removed.
    '''
    phi = np.linspace(0, 2*np.pi, samples, endpoint=False)
    X = np.rint(np.column_stack((center[0] + radius*np.cos(phi),
                                 center[1] + radius*np.sin(phi)))).astype(int)
    seen = set()
    points = []
    for x, y in X.tolist():
        p = Point(x, y)
        if p not in seen:
            seen.add(p)
            points.append(p)
    return points

def square_with_center(size=10):
    '''
    The corners of a square and its center point
    '''
    h = size // 2
    return [Point(0, 0), Point(size, 0), Point(size, size), Point(0, size),
            Point(h, h)]
