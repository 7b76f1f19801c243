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
"""
Exhaustive proximity queries.

Linear scans over a collection of points answering the same queries as
:class:`kdindex.tree.KDTree`. They are the reference the tree is checked
against and are good enough for a handful of points.
"""
import numbers

import toolz

from .exceptions import EmptyTreeError, InvalidInputError
from .orders import ProximityOrder


def nearest(points, origin):
    """Point of `points` closest to `origin`, the first one on ties."""
    points = list(points)
    if not points:
        raise EmptyTreeError("No points to search")
    return min(points, key=ProximityOrder(origin).key)


def k_nearest(points, origin, k):
    """The `k` points closest to `origin`, by increasing distance."""
    if (not isinstance(k, numbers.Integral) or isinstance(k, bool)
            or k <= 0):
        raise InvalidInputError(
            "k must be an integer greater than zero, got {!r}".format(k))
    return list(toolz.take(k, sorted(points, key=ProximityOrder(origin).key)))


def within_radius(points, origin, radius):
    """Points strictly closer than `radius` to `origin`, closest first."""
    if not radius >= 0:
        raise InvalidInputError(
            "Radius must be 0 or greater, got {!r}".format(radius))
    order = ProximityOrder(origin)
    return sorted((p for p in points if order.key(p) < radius),
                  key=order.key)
