"""Geodesic calculations on Earth's surface.

Provides geographic helper functions for route analysis:
- Distance calculation (Haversine formula)

All calculations use WGS84 spherical Earth approximation (R = 6,371 km),
accurate to well under 0.5% at pedestrian and vehicle route scales.
"""

from math import atan2, cos, radians, sin, sqrt

# Earth's radius in meters (WGS84 spherical approximation)
EARTH_RADIUS_M = 6_371_000


class GeoCalculator:
    """Static methods for geodesic calculations on Earth's surface.

    Coordinates are in decimal degrees (WGS84).
    Distances are in meters.
    """

    EARTH_RADIUS_M = EARTH_RADIUS_M

    @staticmethod
    def haversine_distance_m(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
        """Calculate great-circle distance between two points using Haversine formula.

        Args:
            lat1: Latitude of first point (decimal degrees)
            lng1: Longitude of first point (decimal degrees)
            lat2: Latitude of second point (decimal degrees)
            lng2: Longitude of second point (decimal degrees)

        Returns:
            Distance in meters.
        """
        dlat = radians(lat2 - lat1)
        dlng = radians(lng2 - lng1)
        a = sin(dlat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlng / 2) ** 2
        return EARTH_RADIUS_M * 2 * atan2(sqrt(a), sqrt(1 - a))
