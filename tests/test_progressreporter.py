# -*- coding: utf-8 -*-
import pytest

from quickhull.tools import progressreporter

def test_progressreporter():
    calls = []
    progress = progressreporter(calls.append)
    for p in (1, 1, 3, 2, 4):
        progress(p)
    assert calls == [1, 3, 4]

def test_progressreporter_every():
    calls = []
    progress = progressreporter(calls.append, every=5)
    for p in range(1, 18):
        progress(p)
    assert calls == [5, 10, 15]

def test_progressreporter_invalid_interval():
    with pytest.raises(ValueError):
        progressreporter(print, every=0)

def test_progressreporter_noop():
    progress = progressreporter()
    assert progress(5) is None
