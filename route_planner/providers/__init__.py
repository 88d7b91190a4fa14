"""External capabilities: directions, elevation and places providers."""

from route_planner.providers.base import (
    DirectionsProvider,
    ElevationProvider,
    PlacesProvider,
    call_with_timeout,
)
from route_planner.providers.google_maps import GoogleMapsClient, decode_polyline
from route_planner.providers.raster_elevation import RasterElevationProvider

__all__ = [
    "DirectionsProvider",
    "ElevationProvider",
    "PlacesProvider",
    "call_with_timeout",
    "GoogleMapsClient",
    "decode_polyline",
    "RasterElevationProvider",
]
