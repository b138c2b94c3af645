import random

import pytest

from tests.helpers import FakeTicker, RecordingSave


@pytest.fixture
def ticker():
    return FakeTicker()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def saves():
    return RecordingSave()
