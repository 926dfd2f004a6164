# -*- coding: utf-8 -*-
'''
This file is part of the Stepwise QuickHull package, a steppable
implementation of the QuickHull convex hull algorithm.

Copyright 2026 by the Stepwise QuickHull authors.

Stepwise QuickHull is distributed under the GPLv3 license.
'''
'''
Plain text point files: one point per line, "<x>,<y>".
'''
import sys

from quickhull.geometry import Point
from quickhull import settings

__all__ = ['format_hull', 'write_hull_points', 'read_points']

def format_hull(points):
    return ''.join('{0},{1}\n'.format(p[0], p[1]) for p in points)

def write_hull_points(points, filename=settings.OUTPUT_FILENAME):
    '''
    Write the points to a file.

    A file which cannot be created is not a fatal error: a message is
    printed to stderr and the function returns False.

    @rtype: bool
    '''
    try:
        with open(filename, 'w') as outfile:
            outfile.write(format_hull(points))
    except (IOError, OSError) as e:
        sys.stderr.write('Error: Unable to create output file! Is the '
                         'current folder write-protected?\n'
                         '({0})\n'.format(e))
        return False
    return True

def read_points(filename):
    '''
    Read points from a file in the same format. Blank lines are skipped.
    '''
    points = []
    with open(filename) as infile:
        for lineno, line in enumerate(infile, 1):
            line = line.strip()
            if not line:
                continue
            fields = line.split(',')
            if len(fields) != 2:
                raise ValueError('{0}, line {1}: expected "<x>,<y>", got '
                                 '"{2}".'.format(filename, lineno, line))
            try:
                points.append(Point(int(fields[0]), int(fields[1])))
            except ValueError:
                raise ValueError('{0}, line {1}: coordinates must be '
                                 'integers, got "{2}".'.
                                 format(filename, lineno, line))
    return points
