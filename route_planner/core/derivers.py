"""Alert and comfort heuristics derived from route statistics.

Small independent rule sets consuming the same RouteStats / RoutePoints:
- Safety score: 100 minus compounding penalties, clamped at 0
- Steep-section counting and traffic-likelihood alerts
- Terrain, weather and safety alerts
- Terrain tags (labels, not a classification - several may apply)

None of these carry state between calls.
"""

import logging
from typing import Sequence

from route_planner.constants import AlertConfig, SafetyConfig, TerrainConfig
from route_planner.core.difficulty import tier_value
from route_planner.core.stats_aggregator import segment_grades
from route_planner.model.alert import (
    HeavyTrafficAlert,
    HighAltitudeWeatherAlert,
    HighElevationGainAlert,
    LongDistanceAlert,
    SafetyAlert,
    SteepSectionsAlert,
    SteepTerrainAlert,
)
from route_planner.model.route_data import RouteData
from route_planner.model.route_point import RoutePoint
from route_planner.model.route_stats import RouteStats

logger = logging.getLogger(__name__)


def safety_score(stats: RouteStats) -> int:
    """Safety score from 0 (dangerous) to 100 (safe).

    Penalties for grade, elevation gain and distance are added up so that
    several risk factors compound.
    """
    score = SafetyConfig.BASE_SCORE
    score -= tier_value(stats.max_grade, SafetyConfig.MAX_GRADE_PCT_PENALTIES)
    score -= tier_value(stats.total_elevation_gain, SafetyConfig.ELEVATION_GAIN_M_PENALTIES)
    score -= tier_value(stats.total_distance_km, SafetyConfig.DISTANCE_KM_PENALTIES)
    return max(score, SafetyConfig.MIN_SCORE)


def safety_band(score: int) -> str:
    """Display band for a safety score: good, fair, caution or poor."""
    for min_score, band in SafetyConfig.SCORE_BANDS:
        if score >= min_score:
            return band
    return SafetyConfig.DEFAULT_BAND


def count_steep_sections(points: Sequence[RoutePoint], threshold_pct: float = AlertConfig.STEEP_GRADE_PCT) -> int:
    """Count consecutive-pair segments steeper than threshold_pct (absolute grade).

    Stationary segments have no grade and are never counted.
    """
    return sum(1 for grade in segment_grades(points) if abs(grade) > threshold_pct)


def traffic_alerts(points: Sequence[RoutePoint]) -> list[SafetyAlert]:
    """Simulated traffic alerts from route length and steepness."""
    alerts: list[SafetyAlert] = []

    if len(points) > AlertConfig.HEAVY_TRAFFIC_POINT_COUNT:
        alerts.append(HeavyTrafficAlert(point_count=len(points)))

    steep_sections = count_steep_sections(points)
    if steep_sections > AlertConfig.STEEP_SECTION_ALERT_COUNT:
        alerts.append(SteepSectionsAlert(steep_section_count=steep_sections))

    return alerts


def terrain_alerts(stats: RouteStats) -> list[SafetyAlert]:
    """Alerts for steep grades, large elevation gain and long distance."""
    alerts: list[SafetyAlert] = []

    if stats.max_grade > AlertConfig.VERY_STEEP_GRADE_PCT:
        alerts.append(SteepTerrainAlert(max_grade_pct=stats.max_grade))

    if stats.total_elevation_gain > AlertConfig.HIGH_ELEVATION_GAIN_M:
        alerts.append(HighElevationGainAlert(elevation_gain_m=stats.total_elevation_gain))

    if stats.total_distance > AlertConfig.LONG_DISTANCE_M:
        alerts.append(LongDistanceAlert(distance_m=stats.total_distance))

    return alerts


def weather_alerts(stats: RouteStats) -> list[SafetyAlert]:
    """Simulated weather alerts (no live weather data)."""
    if stats.max_elevation > AlertConfig.HIGH_ALTITUDE_WEATHER_M:
        return [HighAltitudeWeatherAlert(max_elevation_m=stats.max_elevation)]
    return []


def safety_alerts(route: RouteData) -> list[SafetyAlert]:
    """All alerts for a route: traffic, then terrain, then weather."""
    if route.is_empty:
        return []
    alerts = traffic_alerts(route.points) + terrain_alerts(route.stats) + weather_alerts(route.stats)
    if alerts:
        logger.info(f"{len(alerts)} safety alerts for {route!r}")
    return alerts


def terrain_tags(stats: RouteStats) -> list[str]:
    """Human-readable terrain labels; "Moderate terrain" when none apply."""
    tags: list[str] = []

    if stats.max_elevation > TerrainConfig.HIGH_ALTITUDE_M:
        tags.append("High altitude")
    if stats.max_grade > TerrainConfig.STEEP_CLIMB_GRADE_PCT:
        tags.append("Steep climbs")
    if stats.total_distance > TerrainConfig.LONG_DISTANCE_M:
        tags.append("Long distance")
    if stats.total_elevation_gain > TerrainConfig.SIGNIFICANT_GAIN_M:
        tags.append("Significant elevation gain")

    return tags if tags else [TerrainConfig.DEFAULT_TAG]
