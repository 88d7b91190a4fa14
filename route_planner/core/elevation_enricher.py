"""Elevation enrichment - attach elevation and cumulative distance to points.

One batched provider call per route (never per point). Results are paired
positionally with the input, then great-circle distances are accumulated
along the sequence.
"""

import logging
from typing import Sequence

import numpy as np

from route_planner.constants import ProviderConfig
from route_planner.core.geo_calculator import GeoCalculator
from route_planner.exceptions import ProviderError
from route_planner.model.coordinate import Coordinate
from route_planner.model.route_point import RoutePoint
from route_planner.providers.base import ElevationProvider, call_with_timeout

logger = logging.getLogger(__name__)


def build_route_points(coordinates: Sequence[Coordinate], elevations: Sequence[float]) -> tuple[RoutePoint, ...]:
    """Pair coordinates with elevations and accumulate along-route distance.

    Point 0 has distance 0; point i carries the running total after adding
    the segment ending at i.

    Args:
        coordinates: Ordered sampled coordinates
        elevations: One elevation (m) per coordinate, same order

    Returns:
        Tuple of RoutePoints with non-decreasing distance.

    Raises:
        ValueError: If the two sequences differ in length.
    """
    if len(coordinates) != len(elevations):
        raise ValueError(f"Got {len(elevations)} elevations for {len(coordinates)} coordinates")

    points: list[RoutePoint] = []
    total_distance = 0.0
    for index, (coord, elevation) in enumerate(zip(coordinates, elevations)):
        if index > 0:
            prev = coordinates[index - 1]
            total_distance += GeoCalculator.haversine_distance_m(
                lat1=prev.lat,
                lng1=prev.lng,
                lat2=coord.lat,
                lng2=coord.lng,
            )
        points.append(RoutePoint(lat=coord.lat, lng=coord.lng, elevation=float(elevation), distance=total_distance))
    return tuple(points)


class ElevationEnricher:
    """Turns sampled coordinates into RoutePoints using an elevation provider.

    Example:
        enricher = ElevationEnricher(provider=GoogleMapsClient(api_key=key))
        points = await enricher.enrich(sample_path(path))
    """

    def __init__(self, provider: ElevationProvider, timeout_s: float = ProviderConfig.REQUEST_TIMEOUT_S) -> None:
        self._provider = provider
        self._timeout_s = timeout_s

    @property
    def provider(self) -> ElevationProvider:
        """Access the elevation provider."""
        return self._provider

    async def enrich(self, coordinates: Sequence[Coordinate]) -> tuple[RoutePoint, ...]:
        """Fetch elevations in one batch and build RoutePoints.

        Failures are fatal for the current route request and are not retried.

        Raises:
            ProviderError: If the batch call fails, times out, returns a
                result of the wrong length, or contains non-finite values.
        """
        if not coordinates:
            return ()

        elevations = await call_with_timeout(
            self._provider.get_elevations(list(coordinates)),
            provider="elevation",
            timeout_s=self._timeout_s,
        )

        if len(elevations) != len(coordinates):
            raise ProviderError(
                f"expected {len(coordinates)} elevations, got {len(elevations)}",
                provider="elevation",
                status="LENGTH_MISMATCH",
            )

        values = np.asarray(elevations, dtype=float)
        if not np.all(np.isfinite(values)):
            bad = int(np.count_nonzero(~np.isfinite(values)))
            raise ProviderError(f"{bad} non-finite elevation values", provider="elevation", status="INVALID_DATA")

        points = build_route_points(coordinates=coordinates, elevations=values.tolist())
        logger.debug(f"Enriched {len(points)} points, route length {points[-1].distance:.0f}m")
        return points
