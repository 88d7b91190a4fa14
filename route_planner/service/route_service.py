"""Route service - orchestrates providers and the analytics pipeline.

RouteService is the application-facing entry point:

    directions -> sample_path -> ElevationEnricher -> compute_route_stats
               -> classify_difficulty / derivers

plus nearby-place lookups around a computed route (photo spots, hiking,
travel comfort, emergency services).

Error policy:
- Route calculation and alternatives: any ProviderError propagates, the
  request fails as a whole.
- Place lookups that only decorate a route: a failed lookup is logged at
  WARNING and contributes no places; the other lookups still populate.
"""

import asyncio
import logging
from typing import Optional, Sequence

from route_planner.constants import AlternativesConfig, AmenityConfig, ProviderConfig, SamplingConfig
from route_planner.core.derivers import safety_alerts, terrain_tags
from route_planner.core.difficulty import classify_difficulty, classify_hiking_difficulty
from route_planner.core.elevation_enricher import ElevationEnricher
from route_planner.core.path_sampler import sample_path
from route_planner.core.stats_aggregator import compute_route_stats
from route_planner.exceptions import DegenerateInputError, ProviderError, RoutePlannerError
from route_planner.model.alert import SafetyAlert
from route_planner.model.coordinate import Coordinate, Path, TravelMode
from route_planner.model.place import Place
from route_planner.model.route_data import RouteData
from route_planner.model.route_info import EmergencyInfo, HikingTrailInfo, RouteAlternative, TravelComfortInfo
from route_planner.model.route_point import RoutePoint
from route_planner.providers.base import (
    DirectionsProvider,
    ElevationProvider,
    PlacesProvider,
    call_with_timeout,
)

logger = logging.getLogger(__name__)


class RouteService:
    """Computes routes and route-related information from injected providers.

    Example:
        client = GoogleMapsClient.from_env()
        service = RouteService(directions=client, elevation=client, places=client)
        route = await service.calculate_route(start, end, TravelMode.WALKING)
        level = classify_difficulty(route.stats)
    """

    def __init__(
        self,
        directions: DirectionsProvider,
        elevation: ElevationProvider,
        places: Optional[PlacesProvider] = None,
        sample_count: int = SamplingConfig.ELEVATION_SAMPLE_POINTS,
        timeout_s: float = ProviderConfig.REQUEST_TIMEOUT_S,
    ) -> None:
        """Initialize service.

        Args:
            directions: Directions capability
            elevation: Elevation capability
            places: Places capability (required only for place lookups)
            sample_count: Points kept per route before elevation lookup
            timeout_s: Upper bound for every provider call
        """
        if sample_count < SamplingConfig.MIN_SAMPLE_POINTS:
            raise ValueError(f"sample_count must be at least {SamplingConfig.MIN_SAMPLE_POINTS}, got {sample_count}")
        self._directions = directions
        self._places = places
        self._sample_count = sample_count
        self._timeout_s = timeout_s
        self._enricher = ElevationEnricher(provider=elevation, timeout_s=timeout_s)

    # =========================================================================
    # Route calculation
    # =========================================================================

    async def _get_paths(
        self,
        start: Coordinate,
        end: Coordinate,
        mode: TravelMode,
        waypoints: Optional[Sequence[Coordinate]] = None,
        alternatives: bool = False,
        avoid_highways: bool = False,
    ) -> list[Path]:
        paths = await call_with_timeout(
            self._directions.get_paths(
                start,
                end,
                mode,
                waypoints=waypoints,
                alternatives=alternatives,
                avoid_highways=avoid_highways,
            ),
            provider="directions",
            timeout_s=self._timeout_s,
        )
        if not paths:
            raise ProviderError("no paths returned", provider="directions", status="ZERO_RESULTS")
        return paths

    async def build_route(self, path: Path, waypoints: Optional[Sequence[Coordinate]] = None) -> RouteData:
        """Run the pipeline on one provider path: sample, enrich, aggregate."""
        sampled = sample_path(path, self._sample_count)
        points = await self._enricher.enrich(sampled)
        return RouteData(
            points=points,
            stats=compute_route_stats(points),
            waypoints=tuple(waypoints) if waypoints else None,
        )

    async def calculate_route(
        self,
        start: Coordinate,
        end: Coordinate,
        mode: TravelMode,
        waypoints: Optional[Sequence[Coordinate]] = None,
    ) -> RouteData:
        """Compute the provider's preferred route with statistics.

        Raises:
            ProviderError: If directions or elevation lookup fails.
        """
        paths = await self._get_paths(start, end, mode, waypoints=waypoints)
        route = await self.build_route(paths[0], waypoints=waypoints)
        logger.info(f"Route calculated ({TravelMode(mode).value}): {route!r}")
        return route

    async def _build_alternatives(self, paths: Sequence[Path]) -> list[RouteAlternative]:
        alternatives: list[RouteAlternative] = []
        for index, path in enumerate(paths[: AlternativesConfig.MAX_ALTERNATIVES], start=1):
            route = await self.build_route(path)
            alternatives.append(
                RouteAlternative(
                    id=f"alt-{index}",
                    name=f"{AlternativesConfig.NAME_PREFIX} {index}",
                    route=route,
                    difficulty=classify_difficulty(route.stats),
                )
            )
        return alternatives

    async def get_route_alternatives(
        self,
        start: Coordinate,
        end: Coordinate,
        mode: TravelMode,
    ) -> list[RouteAlternative]:
        """Compute up to MAX_ALTERNATIVES independent routes, enriched one after another.

        Raises:
            ProviderError: If directions or any elevation lookup fails.
        """
        paths = await self._get_paths(start, end, mode, alternatives=True)
        alternatives = await self._build_alternatives(paths)
        logger.info(f"Computed {len(alternatives)} alternatives ({TravelMode(mode).value}) of {len(paths)} paths")
        return alternatives

    async def get_accessible_routes(
        self,
        start: Coordinate,
        end: Coordinate,
        needs: Sequence[str],
    ) -> list[RouteAlternative]:
        """Walking alternatives; highways are avoided when wheelchair access is needed."""
        avoid_highways = AlternativesConfig.WHEELCHAIR_NEED in needs
        paths = await self._get_paths(
            start,
            end,
            TravelMode.WALKING,
            alternatives=True,
            avoid_highways=avoid_highways,
        )
        alternatives = await self._build_alternatives(paths)
        logger.info(f"Computed {len(alternatives)} accessible routes (needs={list(needs)})")
        return alternatives

    @staticmethod
    def compare_alternatives(alternatives: Sequence[RouteAlternative]) -> list[RouteAlternative]:
        """Order alternatives easiest first, then fastest first."""
        return sorted(alternatives, key=lambda alt: (alt.difficulty.rank, alt.duration_min))

    # =========================================================================
    # Places
    # =========================================================================

    def _require_places(self) -> PlacesProvider:
        if self._places is None:
            raise RoutePlannerError("No places provider configured")
        return self._places

    @staticmethod
    def midpoint(route: RouteData) -> RoutePoint:
        """Anchor point for place lookups around a route.

        Raises:
            DegenerateInputError: If the route has no points.
        """
        point = route.midpoint
        if point is None:
            raise DegenerateInputError("Route has no points")
        return point

    async def find_nearby_places(
        self,
        point: Coordinate,
        category: str,
        radius_m: float = AmenityConfig.DEFAULT_RADIUS_M,
    ) -> list[Place]:
        """Places of one category around a point.

        Raises:
            ProviderError: If the lookup fails or times out.
        """
        places = self._require_places()
        return await call_with_timeout(
            places.find_nearby(point, category, radius_m),
            provider="places",
            timeout_s=self._timeout_s,
        )

    async def _lookup(self, point: Coordinate, category: str, radius_m: float) -> list[Place]:
        """find_nearby_places that degrades to no places on provider failure."""
        try:
            return await self.find_nearby_places(point, category, radius_m)
        except ProviderError as e:
            logger.warning(f"Place lookup '{category}' near ({point.lat:.5f}, {point.lng:.5f}) failed: {e}")
            return []

    async def get_photo_spots(self, points: Sequence[RoutePoint]) -> list[Place]:
        """Well-rated attractions with photos along the route.

        Searches around every PHOTO_SPOT_POINT_STRIDE-th point, first
        PHOTO_SPOT_MAX_SEARCHES samples only.
        """
        self._require_places()
        samples = list(points[:: AmenityConfig.PHOTO_SPOT_POINT_STRIDE])[: AmenityConfig.PHOTO_SPOT_MAX_SEARCHES]

        spots: list[Place] = []
        for point in samples:
            places = await self._lookup(point.coordinate, AmenityConfig.PHOTO_SPOT_TYPE, AmenityConfig.PHOTO_SPOT_RADIUS_M)
            good = [
                place
                for place in places
                if place.has_photos and place.rating is not None and place.rating >= AmenityConfig.PHOTO_SPOT_MIN_RATING
            ]
            spots.extend(good[: AmenityConfig.PHOTO_SPOT_MAX_PER_SEARCH])

        return spots[: AmenityConfig.PHOTO_SPOT_MAX_TOTAL]

    async def get_hiking_trail_info(self, route: RouteData) -> Optional[HikingTrailInfo]:
        """Trailheads and water sources near the route midpoint, plus hiking difficulty.

        Returns:
            HikingTrailInfo, or None for an empty route.
        """
        self._require_places()
        if route.is_empty:
            return None
        center = self.midpoint(route).coordinate

        trailhead_type, trailhead_radius, trailhead_max = AmenityConfig.HIKING_CATEGORIES["trailheads"]
        water_type, water_radius, water_max = AmenityConfig.HIKING_CATEGORIES["water_sources"]
        trailheads, water_sources = await asyncio.gather(
            self._lookup(center, trailhead_type, trailhead_radius),
            self._lookup(center, water_type, water_radius),
        )

        return HikingTrailInfo(
            trailheads=tuple(trailheads[:trailhead_max]),
            water_sources=tuple(water_sources[:water_max]),
            difficulty=classify_hiking_difficulty(route.stats),
            terrain=tuple(terrain_tags(route.stats)),
        )

    async def get_travel_comfort_info(self, route: RouteData) -> Optional[TravelComfortInfo]:
        """Amenities near the route midpoint, all categories fetched concurrently.

        A failed category yields no places; the others still populate.

        Returns:
            TravelComfortInfo, or None for an empty route.
        """
        places = self._require_places()
        if route.is_empty:
            return None
        center = self.midpoint(route).coordinate

        categories = AmenityConfig.COMFORT_CATEGORIES
        results = await asyncio.gather(
            *(
                call_with_timeout(places.find_nearby(center, place_type, radius_m), "places", self._timeout_s)
                for place_type, radius_m, _ in categories.values()
            ),
            return_exceptions=True,
        )

        found: dict[str, tuple[Place, ...]] = {}
        for (name, (_, _, max_results)), result in zip(categories.items(), results):
            if isinstance(result, ProviderError):
                logger.warning(f"Comfort lookup '{name}' failed: {result}")
                found[name] = ()
            elif isinstance(result, BaseException):
                raise result
            else:
                found[name] = tuple(result[:max_results])

        return TravelComfortInfo(**found)

    async def get_emergency_info(self, route: RouteData) -> EmergencyInfo:
        """Nearest hospital and police stations around the route midpoint.

        Raises:
            DegenerateInputError: If the route has no points.
        """
        self._require_places()
        center = self.midpoint(route).coordinate

        hospital_type, hospital_radius, _ = AmenityConfig.EMERGENCY_HOSPITAL
        police_type, police_radius, police_max = AmenityConfig.EMERGENCY_POLICE
        hospitals, police = await asyncio.gather(
            self._lookup(center, hospital_type, hospital_radius),
            self._lookup(center, police_type, police_radius),
        )

        return EmergencyInfo(
            nearest_hospital=hospitals[0] if hospitals else None,
            police_stations=tuple(police[:police_max]),
            emergency_contacts=tuple(AmenityConfig.EMERGENCY_CONTACTS),
        )

    # =========================================================================
    # Alerts
    # =========================================================================

    def get_safety_alerts(self, route: RouteData) -> list[SafetyAlert]:
        """Traffic, terrain and weather alerts for a route (empty route -> [])."""
        return safety_alerts(route)
