"""Shared pytest fixtures for route_planner tests.

Provides fake providers (directions, elevation, places) and reusable route data.
All fixtures use explicit values with documented rationale.

COORDINATE SYSTEM:
    Tests use coordinates near the equator (lat~0) and prime meridian (lng~0)
    where the math is simple: 1 degree ≈ 111,320 meters in both directions
    (the haversine sphere used by GeoCalculator gives 111,195 m, so distance
    assertions allow a small tolerance).
"""

import asyncio
from typing import Callable, Optional, Sequence

import pytest

from route_planner.core.stats_aggregator import compute_route_stats
from route_planner.model.coordinate import Coordinate, Path, TravelMode
from route_planner.model.place import Place
from route_planner.model.route_data import RouteData
from route_planner.model.route_point import RoutePoint
from route_planner.model.route_stats import RouteStats

# =============================================================================
# FAKE PROVIDERS
# =============================================================================


class FakeDirections:
    """DirectionsProvider returning canned paths and recording every call.

    Args:
        paths: Paths returned on every call
        error: Exception raised instead of returning paths
        delay_s: Simulated network latency
    """

    def __init__(
        self,
        paths: Sequence[Path] = (),
        error: Optional[Exception] = None,
        delay_s: float = 0.0,
    ) -> None:
        self.paths = list(paths)
        self.error = error
        self.delay_s = delay_s
        self.calls: list[dict] = []

    async def get_paths(
        self,
        start: Coordinate,
        end: Coordinate,
        mode: TravelMode,
        waypoints: Optional[Sequence[Coordinate]] = None,
        alternatives: bool = False,
        avoid_highways: bool = False,
    ) -> list[Path]:
        self.calls.append(
            {
                "start": start,
                "end": end,
                "mode": mode,
                "waypoints": waypoints,
                "alternatives": alternatives,
                "avoid_highways": avoid_highways,
            }
        )
        if self.delay_s:
            await asyncio.sleep(self.delay_s)
        if self.error is not None:
            raise self.error
        return list(self.paths)


class FakeElevation:
    """ElevationProvider computing elevation from a formula of (lat, lng).

    Default formula: 100 m at the equator, rising 5 m per 0.001° north
    (≈ 4.5 % grade going north).
    """

    def __init__(
        self,
        formula: Callable[[float, float], float] = lambda lat, lng: 100.0 + lat * 5000.0,
        error: Optional[Exception] = None,
        delay_s: float = 0.0,
        override: Optional[list[float]] = None,
    ) -> None:
        self.formula = formula
        self.error = error
        self.delay_s = delay_s
        self.override = override
        self.calls: list[list[Coordinate]] = []

    async def get_elevations(self, points: Sequence[Coordinate]) -> list[float]:
        self.calls.append(list(points))
        if self.delay_s:
            await asyncio.sleep(self.delay_s)
        if self.error is not None:
            raise self.error
        if self.override is not None:
            return list(self.override)
        return [self.formula(p.lat, p.lng) for p in points]


class FakePlaces:
    """PlacesProvider returning canned places per category.

    A category mapped to an Exception raises it.
    """

    def __init__(self, results: Optional[dict] = None) -> None:
        self.results = results or {}
        self.calls: list[tuple[Coordinate, str, float]] = []

    async def find_nearby(self, point: Coordinate, category: str, radius_m: float) -> list[Place]:
        self.calls.append((point, category, radius_m))
        result = self.results.get(category, [])
        if isinstance(result, Exception):
            raise result
        return list(result)


def make_place(name: str, rating: Optional[float] = None, has_photos: bool = False) -> Place:
    return Place(name=name, coordinate=Coordinate(lat=0.001, lng=0.001), rating=rating, has_photos=has_photos)


# =============================================================================
# PATHS AND ROUTES
# =============================================================================


@pytest.fixture
def northbound_path() -> Path:
    """201 coordinates going north from the equator to lat 0.02 (≈ 2.2 km)."""
    return tuple(Coordinate(lat=i * 0.0001, lng=0.0) for i in range(201))


@pytest.fixture
def start() -> Coordinate:
    return Coordinate(lat=0.0, lng=0.0)


@pytest.fixture
def end() -> Coordinate:
    return Coordinate(lat=0.02, lng=0.0)


@pytest.fixture
def three_points() -> tuple[RoutePoint, ...]:
    """Up 50 m over 1 km, then down 50 m over 1 km (grades +5 % and -5 %)."""
    return (
        RoutePoint(lat=0.0, lng=0.0, elevation=100.0, distance=0.0),
        RoutePoint(lat=0.009, lng=0.0, elevation=150.0, distance=1000.0),
        RoutePoint(lat=0.018, lng=0.0, elevation=100.0, distance=2000.0),
    )


@pytest.fixture
def three_point_route(three_points: tuple[RoutePoint, ...]) -> RouteData:
    return RouteData(points=three_points, stats=compute_route_stats(three_points))


@pytest.fixture
def empty_route() -> RouteData:
    return RouteData(points=(), stats=RouteStats.empty())


@pytest.fixture
def make_stats() -> Callable[..., RouteStats]:
    """Factory for RouteStats with only the classifier inputs set."""

    def _make(
        distance_m: float = 0.0,
        elevation_gain_m: float = 0.0,
        max_grade: float = 0.0,
        max_elevation: float = 0.0,
    ) -> RouteStats:
        return RouteStats(
            total_distance=distance_m,
            total_elevation_gain=elevation_gain_m,
            total_elevation_loss=0.0,
            max_elevation=max_elevation,
            min_elevation=0.0,
            max_grade=max_grade,
            min_grade=0.0,
            average_grade=0.0,
            estimated_time=0.0,
        )

    return _make
