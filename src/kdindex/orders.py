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
Orderings on points.

:class:`AxisOrder` sorts points on a single coordinate and cycles through the
axes as a k-d tree is built level after level. :class:`ProximityOrder` ranks
points by their distance to a fixed origin and is used to sort query results.
'''
import collections

from .exceptions import DimensionError, InvalidInputError


def _cmp(x, y):
    return (x > y) - (x < y)


class AxisOrder(collections.namedtuple('AxisOrder', 'ndims axis')):
    """
    Ascending order of points on coordinate `axis`.

    Attributes:
        ndims (int): number of dimensions of the compared points.
        axis (int): the coordinate compared, in ``[0, ndims)``.
    """
    __slots__ = ()

    def __new__(cls, ndims, axis=0):
        if ndims < 1:
            raise InvalidInputError(
                "Number of dimensions must be positive, got {}".format(ndims))
        if not 0 <= axis < ndims:
            raise InvalidInputError(
                "Axis {} not in [0, {})".format(axis, ndims))
        return super().__new__(cls, ndims, axis)

    def key(self, point):
        return point.component_at(self.axis)

    def compare(self, a, b):
        """Returns -1, 0 or 1 as `a` is below, level with or above `b`."""
        return _cmp(self.key(a), self.key(b))

    def advance(self):
        """Order on the next axis, wrapping around after the last one."""
        return self.__class__(self.ndims, (self.axis + 1) % self.ndims)


class ProximityOrder:
    """Ascending order of points by distance to `origin`."""
    __slots__ = ('origin',)

    def __init__(self, origin):
        self.origin = origin

    def key(self, point):
        return point.distance_to(self.origin)

    def compare(self, a, b):
        ndims = self.origin.dimensions()
        if a.dimensions() != ndims or b.dimensions() != ndims:
            raise DimensionError(
                "Origin and both compared points must have the same number "
                "of dimensions, got {}, {} and {}"
                .format(ndims, a.dimensions(), b.dimensions())
            )
        return _cmp(self.key(a), self.key(b))

    def __repr__(self):
        return "ProximityOrder(origin={!r})".format(self.origin)
