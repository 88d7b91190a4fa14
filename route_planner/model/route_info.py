"""Derived route information bundles returned by RouteService.

These group a route with its classification or with places found around it.
All are immutable snapshots; a new route produces new bundles.
"""

from dataclasses import dataclass
from typing import Optional

from route_planner.model.difficulty import Difficulty, HikingDifficulty
from route_planner.model.place import Place
from route_planner.model.route_data import RouteData


@dataclass(frozen=True)
class RouteAlternative:
    """One of several independently computed routes for the same request.

    Attributes:
        id: Stable identifier within one alternatives response (e.g. "alt-1")
        name: Display name (e.g. "Route 1")
        route: The computed route
        difficulty: General difficulty of the route
    """

    id: str
    name: str
    route: RouteData
    difficulty: Difficulty

    @property
    def distance_m(self) -> float:
        return self.route.stats.total_distance

    @property
    def duration_min(self) -> float:
        return self.route.stats.estimated_time

    @property
    def elevation_gain_m(self) -> float:
        return self.route.stats.total_elevation_gain


@dataclass(frozen=True)
class HikingTrailInfo:
    """Hiking details for a route."""

    trailheads: tuple[Place, ...]
    water_sources: tuple[Place, ...]
    difficulty: HikingDifficulty
    terrain: tuple[str, ...]


@dataclass(frozen=True)
class TravelComfortInfo:
    """Amenities near the route midpoint. A failed category is empty."""

    rest_stops: tuple[Place, ...]
    fuel_stations: tuple[Place, ...]
    restaurants: tuple[Place, ...]
    hotels: tuple[Place, ...]
    medical_facilities: tuple[Place, ...]


@dataclass(frozen=True)
class EmergencyInfo:
    """Emergency services near the route midpoint."""

    nearest_hospital: Optional[Place]
    police_stations: tuple[Place, ...]
    emergency_contacts: tuple[str, ...]
