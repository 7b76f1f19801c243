# Copyright (C) 2018 DataStorm
#
# This file is part of KDIndex.
#
# KDIndex is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# KDIndex is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# A copy of the GNU General Public License is available in the LICENSE
# file or at <http://www.gnu.org/licenses/>.
'''
Point capability required from every element stored in a k-d tree.

A point only has to give its location as a sequence of coordinates. Its
dimensionality, single components and the euclidean distance to another
point are all derived from that one accessor, so that differently typed
points of same dimensionality can be compared with each other (e.g.
querying a tree of :class:`kdindex.geo.LatLng` with a :class:`Coords`).
'''
import abc

import numpy

from .exceptions import DimensionError, InvalidInputError


class KDPoint(abc.ABC):
    """
    Abstract interface for points stored in a :class:`kdindex.tree.KDTree`.

    Subclasses must implement :meth:`location_data`. The returned coordinates
    must not change during the life of the point: the tree relies on them for
    its structure.
    """
    __slots__ = ()

    @abc.abstractmethod
    def location_data(self):
        """
        Returns:
            tuple of float: the coordinates of the point, e.g. ``(3, 4, 2)``
            for x = 3, y = 4, z = 2.
        """
        pass

    def dimensions(self):
        """Number of coordinates, same as ``len(self.location_data())``."""
        return len(self.location_data())

    def component_at(self, dim):
        """
        Coordinate of the point along axis `dim`.

        Args:
            dim (int): axis index, 0 for x, 1 for y and so on.

        Raises:
            DimensionError: if `dim` is negative or not lower than
                :meth:`dimensions`.
        """
        ndims = self.dimensions()
        if dim < 0 or dim >= ndims:
            raise DimensionError(
                "Axis {} is out of range for a point of {} dimensions."
                .format(dim, ndims)
            )
        return self.location_data()[dim]

    def distance_to(self, other):
        """
        Euclidean distance between `self` and `other`.

        The distance is the square root of the sum of the squared differences
        of each component.

        Raises:
            DimensionError: if both points do not have the same number of
                dimensions.
        """
        if self.dimensions() != other.dimensions():
            raise DimensionError(
                "Incompatible number of dimensions {} and {} in {}."
                .format(self.dimensions(), other.dimensions(),
                        self.__class__.__name__ + ".distance_to")
            )
        diff = numpy.subtract(self.location_data(), other.location_data())
        return float(numpy.sqrt(numpy.dot(diff, diff)))


class Coords(KDPoint):
    """Generic immutable point made of its coordinates only."""
    __slots__ = ('_coords',)

    def __init__(self, *coords):
        self._coords = tuple(float(c) for c in coords)

    def location_data(self):
        return self._coords

    def __eq__(self, other):
        if not isinstance(other, Coords):
            return NotImplemented
        return self._coords == other._coords

    def __hash__(self):
        return hash((self.__class__.__name__, self._coords))

    def __repr__(self):
        return "Coords({})".format(", ".join(map(repr, self._coords)))


def coords_from_array(array):
    """
    Converts an array of coordinates to points.

    Args:
        array (array-like): NxD array, one row per point.

    Returns:
        list of Coords: the N points, in row order.
    """
    arr = numpy.asarray(array, dtype=float)
    if arr.ndim != 2:
        raise InvalidInputError(
            "Expected a 2d array of coordinates, got {} dimensions."
            .format(arr.ndim)
        )
    return [Coords(*row) for row in arr.tolist()]
