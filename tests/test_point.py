import numpy
import pytest

from kdindex import (Coords, DimensionError, InvalidInputError, KDPoint,
                     coords_from_array)


class Foo(KDPoint):
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def location_data(self):
        return (self.x, self.y)


def test_location_data_is_the_only_abstract_method():
    with pytest.raises(TypeError):
        KDPoint()
    foo = Foo(3., 4.)
    assert foo.dimensions() == 2
    assert foo.component_at(0) == 3.
    assert foo.component_at(1) == 4.


def test_component_out_of_range():
    point = Coords(1, 2, 3)
    assert point.component_at(2) == 3.
    with pytest.raises(DimensionError):
        point.component_at(3)
    with pytest.raises(DimensionError):
        point.component_at(-1)


def test_distance():
    assert Coords(0, 0).distance_to(Coords(3, 4)) == 5.
    assert Coords(1, 2, 3).distance_to(Coords(1, 2, 3)) == 0.
    assert Foo(0., 0.).distance_to(Coords(3, 4)) == 5.
    assert Coords(3, 4).distance_to(Foo(0., 0.)) == 5.


def test_distance_dimension_mismatch():
    with pytest.raises(DimensionError):
        Coords(0, 0).distance_to(Coords(0, 0, 0))
    with pytest.raises(ValueError):
        Coords(0, 0, 0).distance_to(Foo(0., 0.))


def test_coords_equality_and_hash():
    assert Coords(1, 2) == Coords(1., 2.)
    assert hash(Coords(1, 2)) == hash(Coords(1., 2.))
    assert Coords(1, 2) != Coords(2, 1)
    assert Coords(1, 2) != (1., 2.)
    assert len({Coords(1, 2), Coords(1, 2), Coords(0, 0)}) == 2
    assert repr(Coords(1, 2)) == "Coords(1.0, 2.0)"


def test_coords_from_array():
    points = coords_from_array(numpy.arange(6).reshape(3, 2))
    assert points == [Coords(0, 1), Coords(2, 3), Coords(4, 5)]
    assert coords_from_array([[1.5, 2., 3.]]) == [Coords(1.5, 2, 3)]
    with pytest.raises(InvalidInputError):
        coords_from_array([1., 2.])
