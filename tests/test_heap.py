import pytest

from kdindex import BoundedHeap, Coords, EmptyTreeError, InvalidInputError


def test_partial_fill():
    heap = BoundedHeap(Coords(0, 0), 3)
    assert len(heap) == 0
    assert not heap.is_full
    assert heap.push(Coords(2, 0))
    assert heap.push(Coords(1, 0))
    assert len(heap) == 2
    assert not heap.is_full
    assert heap.best() == Coords(1, 0)
    assert heap.worst() == Coords(2, 0)
    assert heap.worst_distance() == 2.


def test_eviction_of_worst():
    heap = BoundedHeap(Coords(0, 0), 2)
    for x in (5, 3, 4):
        heap.push(Coords(x, 0))
    assert heap.is_full
    assert heap.sorted_points() == [Coords(3, 0), Coords(4, 0)]
    assert heap.push(Coords(1, 0))
    assert not heap.push(Coords(6, 0))
    assert heap.sorted_points() == [Coords(1, 0), Coords(3, 0)]
    assert heap.best() == Coords(1, 0)
    assert heap.worst() == Coords(3, 0)


def test_ties_keep_first_pushed():
    heap = BoundedHeap(Coords(0, 0), 2)
    assert heap.push(Coords(1, 0))
    assert heap.push(Coords(0, 1))
    assert not heap.push(Coords(-1, 0))
    assert heap.sorted_points() == [Coords(1, 0), Coords(0, 1)]
    assert heap.best() == Coords(1, 0)
    assert heap.worst() == Coords(0, 1)


def test_capacity_one():
    heap = BoundedHeap(Coords(0, 0), 1)
    heap.push(Coords(3, 0))
    assert heap.push(Coords(2, 0))
    assert heap.best() == heap.worst() == Coords(2, 0)
    assert not heap.push(Coords(0, 2))
    assert heap.sorted_points() == [Coords(2, 0)]


def test_invalid_and_empty():
    with pytest.raises(InvalidInputError):
        BoundedHeap(Coords(0, 0), 0)
    heap = BoundedHeap(Coords(0, 0), 4)
    assert heap.sorted_points() == []
    with pytest.raises(EmptyTreeError):
        heap.best()
    with pytest.raises(EmptyTreeError):
        heap.worst()
