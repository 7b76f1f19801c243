import itertools
import random

import pytest

from kdindex import Coords, LatLng


def random_latlng(rng):
    return LatLng(rng.random() + rng.randrange(90),
                  rng.random() + rng.randrange(90))


def random_latlngs(rng, n):
    return [random_latlng(rng) for _ in range(n)]


@pytest.fixture
def rng():
    return random.Random(20180611)


@pytest.fixture
def locs(rng):
    return random_latlngs(rng, 50)


@pytest.fixture
def grid(rng):
    """5x5 integer grid, each point three times, shuffled."""
    points = [Coords(x, y)
              for x, y in itertools.product(range(5), repeat=2)] * 3
    rng.shuffle(points)
    return points
