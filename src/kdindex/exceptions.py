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
"""Errors raised by the k-d tree and its collaborators."""


class KDTreeError(Exception):
    """Base exception for all kdindex errors."""

    pass


class InvalidInputError(KDTreeError, ValueError):
    """Malformed construction or query argument."""

    pass


class DimensionError(KDTreeError, ValueError):
    """Points of different dimensionality, or an axis out of range."""

    pass


class EmptyTreeError(KDTreeError, LookupError):
    """Positional access or nearest neighbour search on an empty tree."""

    pass
