#!/usr/bin/env python3
# -*- coding: utf-8 -*-
'''
This file is part of the Stepwise QuickHull package, a steppable
implementation of the QuickHull convex hull algorithm.

Copyright 2026 by the Stepwise QuickHull authors.

Stepwise QuickHull is distributed under the GPLv3 license.
'''

'''
Watch the convex hull form, step by step.

Usage:

    QuickHullDemo.py [pointcount | pointfile] [--seed N | none] [--animate]
                     [--screenshot [FILE]] [--output FILE]

Without --animate, the hull is computed without drawing. With
--screenshot, the final state is saved as an image.
'''
import argparse
import sys

from quickhull import QuickHull, read_points, settings
from quickhull.shapes import random_points

def seed_value(value):
    if value == 'none':
        return None
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            'seed must be an integer or "none", not "{0}"'.format(value))

def make_parser():
    parser = argparse.ArgumentParser(
        prog='QuickHullDemo.py',
        description='Watch the convex hull form, step by step.')
    parser.add_argument(
        'source', nargs='?', default=str(settings.POINT_COUNT),
        help='number of random points, or a file with one "<x>,<y>" point '
        'per line (default: {0})'.format(settings.POINT_COUNT))
    parser.add_argument(
        '--seed', type=seed_value, default=settings.RAND_SEED,
        help='seed for the random points, "none" for fresh randomness '
        '(default: {0})'.format(settings.RAND_SEED))
    parser.add_argument(
        '--animate', action='store_true',
        help='draw every step with matplotlib')
    parser.add_argument(
        '--step-time', type=int, default=settings.STEP_TIME_MS,
        help='pause between two animated steps in milliseconds '
        '(default: {0})'.format(settings.STEP_TIME_MS))
    parser.add_argument(
        '--screenshot', nargs='?', const=settings.SCREENSHOT_FILENAME,
        default=None, metavar='FILE',
        help='save an image of the final state (default file: {0})'.
        format(settings.SCREENSHOT_FILENAME))
    parser.add_argument(
        '--output', default=settings.OUTPUT_FILENAME, metavar='FILE',
        help='file for the hull points (default: {0})'.
        format(settings.OUTPUT_FILENAME))
    return parser

def parse_args(args):
    '''
    Parse the command line. A purely numeric source is a point count, any
    other source is a point file.
    '''
    options = make_parser().parse_args(args)
    if options.source.isdigit():
        options.count = int(options.source)
        options.pointfile = None
    else:
        options.count = None
        options.pointfile = options.source
    return options

def main(args):
    options = parse_args(args)
    if options.pointfile:
        try:
            points = read_points(options.pointfile)
        except (IOError, OSError) as e:
            sys.stderr.write('Error: Cannot read the point file: {0}\n'.
                             format(e))
            return 1
    else:
        points = random_points(options.count, seed=options.seed)

    qh = QuickHull(points, verbose=True)

    if options.animate:
        import matplotlib.pyplot as plt
        from quickhull.draw_quickhull import draw_state
        ax = draw_state(qh)
        plt.ion()
        plt.show()
        while qh.step():
            draw_state(qh, ax=ax)
            plt.pause(options.step_time / 1000.)
        draw_state(qh, ax=ax)
        plt.pause(options.step_time / 1000.)
    else:
        qh.run()

    status = 0
    if qh.write(options.output):
        print('Hull with {0} points written to {1}.'.
              format(len(qh.hull_points), options.output))
    else:
        status = 1
    if options.screenshot:
        from quickhull.draw_quickhull import save_snapshot
        print('Screenshot saved as {0}.'.
              format(save_snapshot(qh, options.screenshot)))
    return status

if __name__=='__main__':
    sys.exit(main(sys.argv[1:]))
