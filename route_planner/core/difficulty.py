"""Difficulty classification of routes.

Two classifiers over the same three quantities (distance, elevation gain,
steepest climb):

- General (route comparison): additive point scoring, so several moderate
  factors combine into a higher level than any single factor alone.
- Hiking: direct thresholds, the most severe level where any factor exceeds
  its cutoff wins.

Both are pure, deterministic and monotonic: raising any one input never
lowers the resulting level.
"""

from typing import Sequence

from route_planner.constants import DifficultyConfig, HikingConfig
from route_planner.model.difficulty import Difficulty, HikingDifficulty
from route_planner.model.route_stats import RouteStats


def tier_value(value: float, tiers: Sequence[tuple[float, int]]) -> int:
    """Return the amount of the first tier whose threshold value exceeds, else 0.

    Args:
        value: Measured quantity
        tiers: (threshold, amount) pairs ordered most to least severe
    """
    for threshold, amount in tiers:
        if value > threshold:
            return amount
    return 0


def difficulty_score(stats: RouteStats) -> int:
    """Additive difficulty score (0-9) of a route."""
    return (
        tier_value(stats.total_distance_km, DifficultyConfig.DISTANCE_KM_TIERS)
        + tier_value(stats.total_elevation_gain, DifficultyConfig.ELEVATION_GAIN_M_TIERS)
        + tier_value(stats.steepest_grade, DifficultyConfig.MAX_GRADE_PCT_TIERS)
    )


def classify_difficulty(stats: RouteStats) -> Difficulty:
    """Classify a route as easy, moderate, hard or extreme.

    Example:
        25 km, +1200 m, 22 % max grade scores 3 + 3 + 3 = 9 -> extreme
    """
    score = difficulty_score(stats)
    for min_score, level in DifficultyConfig.SCORE_LEVELS:
        if score >= min_score:
            return Difficulty(level)
    return Difficulty(DifficultyConfig.DEFAULT_LEVEL)


def classify_hiking_difficulty(stats: RouteStats) -> HikingDifficulty:
    """Classify a route as beginner, intermediate, advanced or expert hike."""
    distance_km = stats.total_distance_km
    elevation_gain = stats.total_elevation_gain
    max_grade = stats.steepest_grade

    for level, (max_distance_km, max_gain_m, max_grade_pct) in HikingConfig.LEVEL_THRESHOLDS.items():
        if distance_km > max_distance_km or elevation_gain > max_gain_m or max_grade > max_grade_pct:
            return HikingDifficulty(level)
    return HikingDifficulty(HikingConfig.DEFAULT_LEVEL)
