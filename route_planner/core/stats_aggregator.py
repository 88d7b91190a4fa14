"""Route statistics - single-pass aggregation over enriched points.

Computes distance, elevation gain/loss, elevation extrema, grade extrema,
average grade and a Naismith-style time estimate.

Grade policy: segments whose distance does not increase (stationary or
duplicate samples) are skipped from all grade statistics. This avoids
division by zero, and it means average_grade is a mean over moving segments
only (not distance-weighted). Routes with many stationary samples can
therefore show a higher average grade than their distance profile suggests.
"""

import logging
from typing import Iterator, Sequence

from route_planner.constants import PaceConfig
from route_planner.model.route_point import RoutePoint
from route_planner.model.route_stats import RouteStats

logger = logging.getLogger(__name__)


def segment_grades(points: Sequence[RoutePoint]) -> Iterator[float]:
    """Yield the signed grade (%) of every moving segment, in route order."""
    for previous, current in zip(points, points[1:]):
        distance_change = current.distance - previous.distance
        if distance_change > 0:
            yield (current.elevation - previous.elevation) / distance_change * 100


def estimate_time_min(total_distance_m: float, elevation_gain_m: float) -> float:
    """Traversal time: flat pace per km plus a penalty per 100 m of climb."""
    base_time = total_distance_m / 1000 * PaceConfig.MINUTES_PER_KM
    elevation_time = elevation_gain_m / 100 * PaceConfig.MINUTES_PER_100M_CLIMB
    return base_time + elevation_time


def compute_route_stats(points: Sequence[RoutePoint]) -> RouteStats:
    """Aggregate statistics over a route in one O(n) pass.

    Args:
        points: Enriched route points (distance non-decreasing)

    Returns:
        RouteStats. The all-zero value for an empty sequence, which is a
        valid "no route yet" state rather than an error.
    """
    if not points:
        return RouteStats.empty()

    elevation_gain = 0.0
    elevation_loss = 0.0
    max_elevation = points[0].elevation
    min_elevation = points[0].elevation
    max_grade = 0.0
    min_grade = 0.0
    grade_sum = 0.0
    grade_count = 0

    for i in range(1, len(points)):
        current = points[i]
        previous = points[i - 1]

        max_elevation = max(max_elevation, current.elevation)
        min_elevation = min(min_elevation, current.elevation)

        elevation_change = current.elevation - previous.elevation
        if elevation_change > 0:
            elevation_gain += elevation_change
        else:
            elevation_loss += abs(elevation_change)

        distance_change = current.distance - previous.distance
        if distance_change > 0:
            grade = elevation_change / distance_change * 100
            max_grade = max(max_grade, grade)
            min_grade = min(min_grade, grade)
            grade_sum += abs(grade)
            grade_count += 1

    total_distance = points[-1].distance
    average_grade = grade_sum / grade_count if grade_count > 0 else 0.0

    stats = RouteStats(
        total_distance=total_distance,
        total_elevation_gain=elevation_gain,
        total_elevation_loss=elevation_loss,
        max_elevation=max_elevation,
        min_elevation=min_elevation,
        max_grade=max_grade,
        min_grade=min_grade,
        average_grade=average_grade,
        estimated_time=estimate_time_min(total_distance_m=total_distance, elevation_gain_m=elevation_gain),
    )
    logger.debug(
        f"Route stats: {total_distance:.0f}m, +{elevation_gain:.0f}m/-{elevation_loss:.0f}m, "
        f"grade {min_grade:.1f}%..{max_grade:.1f}% over {grade_count} moving segments"
    )
    return stats
