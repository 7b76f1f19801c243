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
Fixed capacity collection of the points closest to an origin.

The points are kept on a max heap by distance (``heapq`` is a min heap, so
distances are negated), which gives the worst retained point in constant time
and insertion with eviction in logarithmic time.
'''
import heapq
import itertools

from .exceptions import EmptyTreeError, InvalidInputError


class BoundedHeap:
    """
    The at most `capacity` points closest to `origin` seen so far.

    Among points at equal distance, the one pushed first is considered
    closer: it is returned first and evicted last.

    Args:
        origin (KDPoint): reference point of the distances.
        capacity (int): maximum number of retained points, at least 1.
    """
    __slots__ = ('origin', 'capacity', '_heap', '_best', '_counter')

    def __init__(self, origin, capacity):
        if capacity < 1:
            raise InvalidInputError(
                "capacity must be at least 1, got {}".format(capacity))
        self.origin = origin
        self.capacity = capacity
        # Entries are (-distance, -rank, point) so that the top of the heap
        # is the farthest point, latest pushed on ties.
        self._heap = []
        self._best = None
        self._counter = itertools.count()

    def __len__(self):
        return len(self._heap)

    @property
    def is_full(self):
        return len(self._heap) >= self.capacity

    def push(self, point):
        """
        Offers `point` to the collection.

        Returns:
            bool: False if the collection is full and `point` is not strictly
            closer than its worst point, True otherwise.
        """
        dist = point.distance_to(self.origin)
        entry = (-dist, -next(self._counter), point)
        if not self.is_full:
            heapq.heappush(self._heap, entry)
        elif dist < -self._heap[0][0]:
            heapq.heapreplace(self._heap, entry)
        else:
            return False
        # With a capacity of 1 the best entry is the one just replaced.
        if (self._best is None or dist < -self._best[0]
                or self.capacity == 1):
            self._best = entry
        return True

    def _check_nonempty(self):
        if not self._heap:
            raise EmptyTreeError("BoundedHeap is empty")

    def worst(self):
        self._check_nonempty()
        return self._heap[0][2]

    def worst_distance(self):
        self._check_nonempty()
        return -self._heap[0][0]

    def best(self):
        self._check_nonempty()
        return self._best[2]

    def sorted_points(self):
        """Retained points by increasing distance, ties in push order."""
        return [point for _, _, point in sorted(self._heap, reverse=True)]
