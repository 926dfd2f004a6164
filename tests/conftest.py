# -*- coding: utf-8 -*-
import pytest

@pytest.fixture
def square():
    return [(0, 0), (10, 0), (10, 10), (0, 10), (5, 5)]
