"""Coordinate and TravelMode - the inputs of every route request.

A Coordinate is an opaque (lat, lng) value. Paths returned by a directions
provider are tuples of Coordinates.
"""

from dataclasses import dataclass
from enum import Enum


class TravelMode(str, Enum):
    """Closed set of travel modes understood by the directions provider."""

    WALKING = "WALKING"
    BICYCLING = "BICYCLING"
    DRIVING = "DRIVING"


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 geographic coordinate.

    Attributes:
        lat: Latitude in decimal degrees (-90 to 90)
        lng: Longitude in decimal degrees (-180 to 180)

    Example:
        start = Coordinate(lat=46.985, lng=10.295)
    """

    lat: float
    lng: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude {self.lat} outside [-90, 90]")
        if not -180.0 <= self.lng <= 180.0:
            raise ValueError(f"Longitude {self.lng} outside [-180, 180]")

    @property
    def lat_lng(self) -> tuple[float, float]:
        """Return (lat, lng) tuple - standard geographic order."""
        return (self.lat, self.lng)

    @property
    def lng_lat(self) -> tuple[float, float]:
        """Return (lng, lat) tuple - GeoJSON/raster order."""
        return (self.lng, self.lat)

    def __repr__(self) -> str:
        return f"Coordinate(lat={self.lat:.5f}, lng={self.lng:.5f})"


Path = tuple[Coordinate, ...]
