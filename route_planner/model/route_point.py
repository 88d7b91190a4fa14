"""RoutePoint - A sampled route coordinate enriched with elevation.

A RoutePoint is produced by the elevation enricher and never modified
afterwards. Within a route, point 0 has distance 0 and distances never
decrease.
"""

from dataclasses import dataclass

import numpy as np

from route_planner.model.coordinate import Coordinate


@dataclass(frozen=True)
class RoutePoint:
    """A point on a route with GPS coordinates, elevation and distance.

    Attributes:
        lat: Latitude in decimal degrees (WGS84)
        lng: Longitude in decimal degrees (WGS84)
        elevation: Terrain height in meters above sea level
        distance: Along-route distance in meters, cumulative from the route start

    Example:
        point = RoutePoint(lat=46.985, lng=10.295, elevation=2400.0, distance=0.0)
    """

    lat: float
    lng: float
    elevation: float
    distance: float

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if np.isnan(self.elevation):
            raise ValueError(f"RoutePoint cannot have NaN elevation at ({self.lat}, {self.lng})")
        if self.distance < 0:
            raise ValueError(f"RoutePoint distance must be non-negative, got {self.distance}")

    @property
    def coordinate(self) -> Coordinate:
        """The point's location without elevation."""
        return Coordinate(lat=self.lat, lng=self.lng)

    def __repr__(self) -> str:
        return (
            f"RoutePoint(lat={self.lat:.5f}, lng={self.lng:.5f}, "
            f"elev={self.elevation:.1f}m, dist={self.distance:.0f}m)"
        )
