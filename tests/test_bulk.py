import pytest

from conftest import random_latlngs
from kdindex import InvalidInputError, build_kdtree
from kdindex import bulk


@pytest.fixture
def tree(locs):
    return build_kdtree(locs)


@pytest.fixture
def origins(rng):
    return random_latlngs(rng, 25)


def test_nearest_all(tree, origins):
    assert bulk.nearest_all(tree, origins) == [
        tree.nearest(o) for o in origins]


def test_k_nearest_all(tree, origins):
    assert bulk.k_nearest_all(tree, origins, 4, chunk_size=7) == [
        tree.k_nearest(o, 4) for o in origins]


def test_within_radius_all(tree, origins):
    assert bulk.within_radius_all(tree, iter(origins), 15.) == [
        tree.within_radius(o, 15.) for o in origins]


def test_parallel(tree, origins):
    expected = [tree.k_nearest(o, 3) for o in origins]
    assert bulk.k_nearest_all(tree, origins, 3, n_jobs=2,
                              chunk_size=10) == expected


def test_invalid_arguments(tree, origins):
    with pytest.raises(InvalidInputError):
        bulk.nearest_all(tree, origins, n_jobs=0)
    with pytest.raises(InvalidInputError):
        bulk.nearest_all(tree, origins, chunk_size=0)
    with pytest.raises(InvalidInputError):
        bulk.k_nearest_all(tree, origins, 0)
