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
Batch queries of a k-d tree for many origins.

Queries only read the tree, so a batch can be split in chunks and mapped over
a pool of processes. Each worker receives its own pickled copy of the tree,
hence the tree's points must be picklable when `n_jobs` is more than 1.
"""
import functools
import logging
import multiprocessing

import toolz

from .exceptions import InvalidInputError


logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1000


def nearest_all(tree, origins, n_jobs=1, chunk_size=DEFAULT_CHUNK_SIZE):
    """List of the nearest neighbour in `tree` of each of `origins`."""
    return _pmap(tree.nearest, origins, n_jobs, chunk_size)


def k_nearest_all(tree, origins, k, n_jobs=1, chunk_size=DEFAULT_CHUNK_SIZE):
    """List of the `k` nearest neighbours in `tree` of each of `origins`."""
    task = functools.partial(tree.k_nearest, k=k)
    return _pmap(task, origins, n_jobs, chunk_size)


def within_radius_all(tree, origins, radius,
                      n_jobs=1, chunk_size=DEFAULT_CHUNK_SIZE):
    """List of the points of `tree` within `radius` of each of `origins`."""
    task = functools.partial(tree.within_radius, radius=radius)
    return _pmap(task, origins, n_jobs, chunk_size)


def _pmap(task, origins, n_jobs, chunk_size):
    if n_jobs < 1:
        raise InvalidInputError(
            "n_jobs must be at least 1, got {}".format(n_jobs))
    if chunk_size < 1:
        raise InvalidInputError(
            "chunk_size must be at least 1, got {}".format(chunk_size))
    if n_jobs == 1:
        return [task(origin) for origin in origins]
    chunks = list(toolz.partition_all(chunk_size, origins))
    logger.debug("Dispatching %d chunks of queries over %d processes",
                 len(chunks), n_jobs)
    with multiprocessing.Pool(n_jobs) as pool:
        res = pool.map(functools.partial(_chunk_task, task), chunks)
    return list(toolz.concat(res))


def _chunk_task(task, chunk):
    return [task(origin) for origin in chunk]
