# -*- coding: utf-8 -*-
'''
This file is part of the Stepwise QuickHull package, a steppable
implementation of the QuickHull convex hull algorithm.

Copyright 2026 by the Stepwise QuickHull authors.

Stepwise QuickHull is distributed under the GPLv3 license.
'''
__version__ = '0.1.0'
__date__ = 'October 18, 2026'

from quickhull.geometry import *
from quickhull.recursion_node import *
from quickhull.finalize import *
from quickhull.output import *
from quickhull.stepper import *

from quickhull import tools
from quickhull import shapes
from quickhull import settings
