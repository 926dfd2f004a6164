# -*- coding: utf-8 -*-
'''
This file is part of the Stepwise QuickHull package, a steppable
implementation of the QuickHull convex hull algorithm.

Copyright 2026 by the Stepwise QuickHull authors.

Stepwise QuickHull is distributed under the GPLv3 license.
'''
'''
Default parameters.

RAND_SEED: seed for the random input. None gives different points on
every run.

STEP_TIME_MS: pause between two steps in the animated demo, in
milliseconds.

POINT_COUNT: number of random input points.

WINDOW_WIDTH, WINDOW_HEIGHT: size of the display area. The random points
lie inside this area with a margin of WINDOW_MARGIN on each side, and the
midpoint of the area is the reference point for ordering the hull.
'''
RAND_SEED = 1

STEP_TIME_MS = 300

POINT_COUNT = 1000
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
WINDOW_MARGIN = 10

OUTPUT_FILENAME = 'points.txt'
SCREENSHOT_FILENAME = 'result.png'
