# -*- coding: utf-8 -*-
'''
This file is part of the Stepwise QuickHull package, a steppable
implementation of the QuickHull convex hull algorithm.

Copyright 2026 by the Stepwise QuickHull authors.

Stepwise QuickHull is distributed under the GPLv3 license.
'''
'''
Order the hull points into a closed polygon.

The points are sorted by their polar angle around a reference point. By
default this is a fixed, configured point (the midpoint of the display
area), not a point computed from the data. The sorting is only correct if
the reference point lies inside the hull. The centroid of the hull points
is available as an alternative reference.
'''
import numpy as np

from quickhull.geometry import Point
from quickhull import settings

__all__ = ['angle_from_points', 'sort_counterclockwise', 'nominal_center',
           'centroid']

def angle_from_points(center, point):
    '''Polar angle of I{point} as seen from I{center}, in degrees.'''
    return float(np.degrees(np.arctan2(point[1] - center[1],
                                       point[0] - center[0])))

def sort_counterclockwise(points, center):
    '''
    Sort points by ascending polar angle around I{center}.

    In screen coordinates (+y downward) this is counterclockwise in the
    mathematical sense. The last point connects to the first one.
    Duplicate points are kept. Points with equal angles keep their order.

    @param points: sequence of points
    @param center: reference point, a pair of numbers
    @rtype: list of Point
    '''
    points = list(points)
    if not points:
        return []
    P = np.array(points, dtype=float)
    angles = np.degrees(np.arctan2(P[:,1] - center[1], P[:,0] - center[0]))
    order = np.argsort(angles, kind='stable')
    return [points[i] for i in order]

def nominal_center(width=settings.WINDOW_WIDTH,
                   height=settings.WINDOW_HEIGHT):
    return Point(width // 2, height // 2)

def centroid(points):
    '''Mean of the points, as a pair of floats.'''
    if not len(points):
        raise ValueError('The centroid of an empty point set is undefined.')
    m = np.mean(np.array(points, dtype=float), axis=0)
    return (float(m[0]), float(m[1]))
