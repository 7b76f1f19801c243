"""
K-d tree data structure and exact proximity queries.

The data model for the tree is as follows:
  1. A node holds one point (its datum), the axis it splits its subtree on,
     and at most a left and a right child node.
  1. Every point in the left subtree of a node is lower than its datum on the
     node's axis, every point in the right subtree is higher.
  1. Children split on the next axis, wrapping around after the last one.
  1. Nodes are immutable. A :class:`KDTree` wraps a root node; subtrees are
     wrappers around the children, sharing the nodes without copy.

Building a balanced tree from a collection of points is the job of
:func:`kdindex.build.build_kdtree`.
"""
import collections
import numbers

import toolz

from .exceptions import (DimensionError, EmptyTreeError, InvalidInputError)
from .heap import BoundedHeap
from .orders import ProximityOrder
from .point import KDPoint


KDNode = collections.namedtuple('KDNode', 'datum axis left right')

_EMPTY_MESSAGE = "Tree is empty"


class KDTree():
    """
    Immutable k-d tree for nearest neighbours and radius queries.

    Two trees are equal if they contain the same points, counted with
    multiplicity, regardless of how they are structured.

    Args:
        root (KDNode, optional): root node, None for an empty tree.
        ndims (int, optional): number of dimensions of the points. Deduced
            from the root datum when not given.

    Attributes:
        node (KDNode): the root node, None if the tree is empty.
    """
    __slots__ = ('node', '_ndims', '_size', '_depth')

    def __init__(self, root=None, ndims=None):
        self.node = root
        if root is not None and ndims is None:
            ndims = root.datum.dimensions()
        self._ndims = ndims
        # Computed on first access.
        self._size = None
        self._depth = None

    @property
    def is_empty(self):
        """Boolean: Is the tree empty?"""
        return self.node is None

    @property
    def size(self):
        """Number of points in the tree."""
        if self._size is None:
            self._size = _node_size(self.node)
        return self._size

    def __len__(self):
        return self.size

    @property
    def depth(self):
        """Number of nodes on the longest path from the root to a leaf."""
        if self._depth is None:
            self._depth = _node_depth(self.node)
        return self._depth

    @property
    def root(self):
        """The point at the root of the tree, None if the tree is empty."""
        if self.is_empty:
            return None
        return self.node.datum

    @property
    def ndims(self):
        """Number of dimensions of the points in the tree."""
        self._check_nonempty()
        return self._ndims

    @property
    def axis(self):
        """
        Axis the root splits the tree on.

        Points of the left subtree have a lower value on this axis than the
        root, points of the right subtree a higher one.
        """
        self._check_nonempty()
        return self.node.axis

    @property
    def left(self):
        """Subtree of points below the root on :attr:`axis`, or None."""
        self._check_nonempty()
        return self._subtree(self.node.left)

    @property
    def right(self):
        """Subtree of points above the root on :attr:`axis`, or None."""
        self._check_nonempty()
        return self._subtree(self.node.right)

    def _subtree(self, node):
        if node is None:
            return None
        return self.__class__(node, self._ndims)

    def _check_nonempty(self):
        if self.is_empty:
            raise EmptyTreeError(_EMPTY_MESSAGE)

    def __iter__(self):
        """Iterates over the points in pre-order."""
        stack = [self.node]
        while stack:
            node = stack.pop()
            if node is None:
                continue
            yield node.datum
            stack.append(node.right)
            stack.append(node.left)

    def to_list(self):
        """Unordered list of all the points in the tree."""
        return list(self)

    def __eq__(self, other):
        if not isinstance(other, KDTree):
            return NotImplemented
        if self is other:
            return True
        return toolz.frequencies(self) == toolz.frequencies(other)

    def __hash__(self):
        return hash(frozenset(toolz.frequencies(self).items()))

    def __repr__(self):
        if self.is_empty:
            return "<{} empty>".format(self.__class__.__name__)
        return "<{} size={} ndims={} depth={}>".format(
            self.__class__.__name__, self.size, self._ndims, self.depth)

    # ========================  Queries  =====================================

    def _check_origin(self, origin):
        if not isinstance(origin, KDPoint):
            raise InvalidInputError(
                "Query origin must be a KDPoint, got {}"
                .format(type(origin).__name__)
            )

    def _check_dims(self, origin):
        if origin.dimensions() != self._ndims:
            raise DimensionError(
                "Given point has {} dimensions, the tree has {}"
                .format(origin.dimensions(), self._ndims)
            )

    def nearest(self, origin):
        """
        Nearest neighbour of `origin` in the tree.

        Args:
            origin (KDPoint): the query point. It can be of a different type
                than the points in the tree if it has as many dimensions.

        Returns:
            The point of the tree closest to `origin`. Among equidistant
            points, the first one met while searching is kept.

        Raises:
            EmptyTreeError: if the tree is empty.
            DimensionError: if `origin` does not have :attr:`ndims` dimensions.
        """
        self._check_origin(origin)
        self._check_nonempty()
        self._check_dims(origin)
        best = self.node.datum
        return _nearest(origin, self.node, best, best.distance_to(origin))[0]

    def k_nearest(self, origin, k):
        """
        The `k` nearest neighbours of `origin` in the tree.

        Args:
            origin (KDPoint): the query point.
            k (int): number of neighbours to return, at least 1. If the tree
                has less than `k` points, all its points are returned.

        Returns:
            list: the nearest points sorted by increasing distance to
            `origin`. Empty list if the tree is empty.
        """
        self._check_origin(origin)
        if (not isinstance(k, numbers.Integral) or isinstance(k, bool)
                or k <= 0):
            raise InvalidInputError(
                "k must be an integer greater than zero, got {!r}".format(k))
        if self.is_empty:
            return []
        self._check_dims(origin)
        heap = BoundedHeap(origin, int(k))
        _k_nearest(origin, self.node, heap)
        return heap.sorted_points()

    def within_radius(self, origin, radius):
        """
        Points strictly closer than `radius` to `origin`.

        Args:
            origin (KDPoint): the query point.
            radius (float): non-negative euclidean distance.

        Returns:
            list: the matching points sorted by increasing distance to
            `origin`. Empty list if the tree is empty.
        """
        self._check_origin(origin)
        if not radius >= 0:
            raise InvalidInputError(
                "Radius must be 0 or greater, got {!r}".format(radius))
        if self.is_empty:
            return []
        self._check_dims(origin)
        found = []
        _within_radius(origin, radius, self.node, found)
        return sorted(found, key=ProximityOrder(origin).key)


def _node_size(node):
    if node is None:
        return 0
    return 1 + _node_size(node.left) + _node_size(node.right)


def _node_depth(node):
    if node is None:
        return 0
    return 1 + max(_node_depth(node.left), _node_depth(node.right))


def _split(origin, node):
    """Near and far children of `node` for `origin`, and the axis offset."""
    axis = node.axis
    delta = origin.component_at(axis) - node.datum.component_at(axis)
    if delta < 0:
        return node.left, node.right, delta
    return node.right, node.left, delta


# The searches below are branch-and-bound traversals: the near side of a
# node is searched first, and the far side only if the hyperplane splitting
# them is closer to the origin than the current bound.

def _nearest(origin, node, best, best_dist):
    if node is None:
        return best, best_dist
    dist = node.datum.distance_to(origin)
    if dist < best_dist:
        best, best_dist = node.datum, dist
    near, far, delta = _split(origin, node)
    best, best_dist = _nearest(origin, near, best, best_dist)
    if abs(delta) < best_dist:
        best, best_dist = _nearest(origin, far, best, best_dist)
    return best, best_dist


def _k_nearest(origin, node, heap):
    if node is None:
        return
    heap.push(node.datum)
    near, far, delta = _split(origin, node)
    _k_nearest(origin, near, heap)
    if not heap.is_full or abs(delta) < heap.worst_distance():
        _k_nearest(origin, far, heap)


def _within_radius(origin, radius, node, found):
    if node is None:
        return
    if node.datum.distance_to(origin) < radius:
        found.append(node.datum)
    near, far, delta = _split(origin, node)
    _within_radius(origin, radius, near, found)
    if abs(delta) < radius:
        _within_radius(origin, radius, far, found)
