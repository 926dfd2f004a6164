# -*- coding: utf-8 -*-
'''
This file is part of the Stepwise QuickHull package, a steppable
implementation of the QuickHull convex hull algorithm.

Copyright 2026 by the Stepwise QuickHull authors.

Stepwise QuickHull is distributed under the GPLv3 license.
'''

'''
Progress reports for step counts.

A computation calls the reporter with its step count after every step. The
reporter passes the count on to the user's callback, but only every
I{every} steps and only if the count has grown since the last report.
'''

__all__ = ['progressreporter']

class step_reporter:
    def __init__(self, callback, every=1):
        if every < 1:
            raise ValueError('The report interval must be at least one step, '
                             'not {0}.'.format(every))
        self.callback = callback
        self.every = every
        self.last = 0

    def __call__(self, steps):
        if steps >= self.last + self.every:
            self.last = steps
            self.callback(steps)

def noop(*args):
    pass

def progressreporter(callback=None, every=1):
    '''
    @param callback: function of one argument, the step count, or None
    @param every: report interval in steps
    @type every: int S{>=}1
    '''
    if callback:
        return step_reporter(callback, every)
    else:
        return noop
