"""Data model classes for route analysis.

Data flows strictly forward through immutable structures:
- Coordinate: Geometry input (lat, lng); a Path is a tuple of Coordinates
- RoutePoint: Sampled coordinate with elevation and cumulative distance
- RouteStats: Aggregate statistics over a RoutePoint sequence
- RouteData: Points + stats, the unit exchanged with the application
- Difficulty / HikingDifficulty: Ordered classification levels
- Place: Nearby point of interest
- SafetyAlert: Traffic, terrain and weather alerts
- RouteAlternative, HikingTrailInfo, TravelComfortInfo, EmergencyInfo: Derived bundles
"""

from route_planner.model.alert import (
    AlertCategory,
    AlertSeverity,
    HeavyTrafficAlert,
    HighAltitudeWeatherAlert,
    HighElevationGainAlert,
    LongDistanceAlert,
    SafetyAlert,
    SteepSectionsAlert,
    SteepTerrainAlert,
)
from route_planner.model.coordinate import Coordinate, Path, TravelMode
from route_planner.model.difficulty import Difficulty, HikingDifficulty
from route_planner.model.place import Place
from route_planner.model.route_data import RouteData
from route_planner.model.route_info import (
    EmergencyInfo,
    HikingTrailInfo,
    RouteAlternative,
    TravelComfortInfo,
)
from route_planner.model.route_point import RoutePoint
from route_planner.model.route_stats import RouteStats

__all__ = [
    "Coordinate",
    "Path",
    "TravelMode",
    "RoutePoint",
    "RouteStats",
    "RouteData",
    "Difficulty",
    "HikingDifficulty",
    "Place",
    "SafetyAlert",
    "AlertCategory",
    "AlertSeverity",
    "HeavyTrafficAlert",
    "SteepSectionsAlert",
    "SteepTerrainAlert",
    "HighElevationGainAlert",
    "LongDistanceAlert",
    "HighAltitudeWeatherAlert",
    "RouteAlternative",
    "HikingTrailInfo",
    "TravelComfortInfo",
    "EmergencyInfo",
]
