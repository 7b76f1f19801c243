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
Balanced k-d tree construction.

Median split building is simple: points are sorted on the current axis, the
median point becomes the node and the points before and after it are built
recursively into the left and right subtrees, on the next axis. Taking the
exact median at each level keeps the tree balanced.
"""
import collections.abc
import logging

from . import tree
from .exceptions import InvalidInputError
from .orders import AxisOrder
from .point import KDPoint


logger = logging.getLogger(__name__)


def build_kdtree(points):
    """
    Builds a balanced k-d tree.

    Parameters:
        points (iterable of KDPoint): the points to index, all with the same
            positive number of dimensions. The iterable is copied and never
            reordered.

    Returns:
        KDTree: a tree over `points`, empty if `points` is empty.

    Raises:
        InvalidInputError: if `points` is None or not iterable, contains
            something else than points, or points of different (or zero)
            dimensions.
    """
    if points is None:
        raise InvalidInputError("points cannot be None")
    if not isinstance(points, collections.abc.Iterable):
        raise InvalidInputError(
            "points must be an iterable, got {}".format(type(points).__name__))
    # Copy so that sorting never affects the caller's collection.
    data = list(points)
    if not data:
        return tree.KDTree()

    bad = [p for p in data if not isinstance(p, KDPoint)]
    if bad:
        raise InvalidInputError(
            "All points must be KDPoint instances, got {}"
            .format(type(bad[0]).__name__)
        )
    ndims = data[0].dimensions()
    if any(p.dimensions() != ndims for p in data):
        raise InvalidInputError(
            "All points must have same number of dimensions")
    if ndims == 0:
        raise InvalidInputError("Points cannot have 0 dimensions")

    result = tree.KDTree(_build(data, AxisOrder(ndims)), ndims)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Built k-d tree of %d points in %d dimensions, depth %d",
                     len(data), ndims, result.depth)
    return result


def _build(data, order):
    """Builds `data` into a subtree splitting on `order.axis`."""
    if not data:
        return None
    if len(data) == 1:
        return tree.KDNode(data[0], order.axis, None, None)
    # Stable sort: points level on the axis keep their relative order.
    data = sorted(data, key=order.key)
    mid = len(data) // 2
    child_order = order.advance()
    return tree.KDNode(
        datum=data[mid],
        axis=order.axis,
        left=_build(data[:mid], child_order),
        right=_build(data[mid+1:], child_order),
    )
