"""
Exact proximity queries over static point sets.

A k-d tree is a binary tree where every node splits space in two along one
coordinate axis, cycling through the axes as the depth increases. Built once
from a collection of points by median splits, the tree is balanced and
immutable: nearest neighbour, k-nearest neighbours and radius queries are
answered by branch-and-bound traversals that prune the subtrees which cannot
hold a better answer.

Any object implementing :class:`KDPoint` can be indexed. Only its coordinates
need to be given; dimensionality and euclidean distance are derived from them.
"""
from .exceptions import (KDTreeError, InvalidInputError,  # noqa: F401
                         DimensionError, EmptyTreeError)
from .point import KDPoint, Coords, coords_from_array  # noqa: F401
from .orders import AxisOrder, ProximityOrder  # noqa: F401
from .heap import BoundedHeap  # noqa: F401
from .tree import KDTree, KDNode  # noqa: F401
from .build import build_kdtree  # noqa: F401
from .geo import LatLng  # noqa: F401

__version__ = "0.1.0"
