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
Latitude and longitude points.

:class:`LatLng` stores geographic coordinates in degrees and can be indexed
in a k-d tree directly: its location data is ``(lat, lng)``, so tree queries
use the euclidean distance on degrees. The great-circle distance in miles is
available separately via :meth:`LatLng.distance_from`.
'''
import numpy

from .point import KDPoint


EARTH_RADIUS_IN_MILES = 3959.0


class LatLng(KDPoint):
    """A point on earth, `lat` and `lng` in degrees."""
    __slots__ = ('lat', 'lng')

    def __init__(self, lat, lng):
        self.lat = float(lat)
        self.lng = float(lng)

    def location_data(self):
        return (self.lat, self.lng)

    def move_north(self, miles):
        dlat = numpy.degrees(miles / EARTH_RADIUS_IN_MILES)
        return LatLng(self.lat + dlat, self.lng)

    def move_south(self, miles):
        return self.move_north(-miles)

    def move_west(self, miles):
        # Radius of the parallel at the current latitude.
        radius = EARTH_RADIUS_IN_MILES * numpy.cos(numpy.radians(self.lat))
        dlng = numpy.degrees(miles / radius)
        return LatLng(self.lat, self.lng - dlng)

    def move_east(self, miles):
        return self.move_west(-miles)

    def distance_from(self, other):
        """Great-circle distance in miles to `other`."""
        if self == other:
            return 0.
        lat1, lng1, lat2, lng2 = numpy.radians(
            [self.lat, self.lng, other.lat, other.lng])
        cos_angle = (numpy.sin(lat1) * numpy.sin(lat2)
                     + numpy.cos(lat1) * numpy.cos(lat2)
                     * numpy.cos(lng2 - lng1))
        # Rounding can push the cosine slightly out of [-1, 1].
        return float(EARTH_RADIUS_IN_MILES
                     * numpy.arccos(numpy.clip(cos_angle, -1., 1.)))

    def __eq__(self, other):
        if not isinstance(other, LatLng):
            return NotImplemented
        return self.lat == other.lat and self.lng == other.lng

    def __hash__(self):
        return hash((self.__class__.__name__, self.lat, self.lng))

    def __repr__(self):
        return "LatLng(lat={}, lng={})".format(self.lat, self.lng)
