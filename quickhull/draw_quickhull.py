# -*- coding: utf-8 -*-
'''
This file is part of the Stepwise QuickHull package, a steppable
implementation of the QuickHull convex hull algorithm.

Copyright 2026 by the Stepwise QuickHull authors.

Stepwise QuickHull is distributed under the GPLv3 license.
'''
'''
Drawing routines for the state of a stepwise QuickHull computation.

The drawing shows:
  - all input points in grey,
  - the hull polygon found so far in black, its closing edge in blue,
  - the boundary segment of the current recursion node in red,
  - the leftmost and rightmost candidate of the current node in red,
  - the last furthest point in green.
'''
import numpy as np
import matplotlib as mpl
import matplotlib.collections

from quickhull import settings

__all__ = ['draw_state', 'save_snapshot']

MARKER_SIZE = 36

def draw_state(qh, ax=None, width=settings.WINDOW_WIDTH,
               height=settings.WINDOW_HEIGHT):
    '''
    Draw the current state of a computation.

    Only call this between two steps.

    @param qh: the computation
    @type qh: L{QuickHull}
    @param ax: matplotlib axes to draw into; a new figure is created if None
    @param width, height: size of the display area. The y axis points
    downward as in screen coordinates.
    @return: the axes
    '''
    if ax is None:
        from matplotlib.pyplot import figure
        fig = figure(facecolor='w')
        # full window, no coordinate axes
        ax = fig.add_axes((0, 0, 1, 1), aspect='equal')
    else:
        ax.cla()
    ax.set_axis_off()
    ax.set_autoscale_on(False)
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)

    points = np.array(qh.input_points, dtype=float).reshape(-1, 2)
    if points.size:
        ax.scatter(points[:,0], points[:,1], s=MARKER_SIZE, c='#3F3F3F',
                   edgecolor='none', zorder=2)

    hull = qh.hull()
    if len(hull) > 1:
        segments = [(hull[i], hull[i+1]) for i in range(len(hull) - 1)]
        ax.add_collection(mpl.collections.LineCollection(
                segments, colors='k', linewidths=2, zorder=1))
        ax.plot((hull[-1][0], hull[0][0]), (hull[-1][1], hull[0][1]),
                color='b', linewidth=2, zorder=1)

    boundary = qh.current_boundary
    if boundary is not None:
        A, B = boundary
        ax.plot((A.x, B.x), (A.y, B.y), color='r', linewidth=1, zorder=1)

    extremes = qh.current_extremes
    if extremes is not None:
        ax.scatter([p.x for p in extremes], [p.y for p in extremes],
                   s=MARKER_SIZE * 2, c='r', edgecolor='none', zorder=3)

    furthest = qh.furthest_point
    if furthest is not None:
        ax.scatter((furthest.x,), (furthest.y,), s=MARKER_SIZE * 2, c='#00FF00',
                   edgecolor='none', zorder=4)
    return ax

def save_snapshot(qh, filename=settings.SCREENSHOT_FILENAME, **kwargs):
    '''
    Draw the state into a new figure and save it as an image file.
    '''
    ax = draw_state(qh, **kwargs)
    fig = ax.get_figure()
    fig.savefig(filename, facecolor='w')
    if 'ax' not in kwargs:
        from matplotlib.pyplot import close
        close(fig)
    return filename
