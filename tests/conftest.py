import random

import pytest

from snake_engine.grid import Grid


@pytest.fixture
def grid():
    return Grid(10, 10)


@pytest.fixture
def rng():
    return random.Random(1234)
