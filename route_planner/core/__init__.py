"""Core route analytics pipeline.

raw path -> sample_path -> ElevationEnricher -> compute_route_stats
         -> classify_difficulty / derivers

- GeoCalculator: Great-circle distances
- sample_path: Index-uniform path down-sampling
- ElevationEnricher: Batched elevation lookup + cumulative distance
- compute_route_stats: Single-pass statistics aggregation
- classify_difficulty / classify_hiking_difficulty: Difficulty levels
- derivers: Safety score, steep sections, alerts, terrain tags
"""

from route_planner.core.derivers import (
    count_steep_sections,
    safety_alerts,
    safety_band,
    safety_score,
    terrain_alerts,
    terrain_tags,
    traffic_alerts,
    weather_alerts,
)
from route_planner.core.difficulty import (
    classify_difficulty,
    classify_hiking_difficulty,
    difficulty_score,
)
from route_planner.core.elevation_enricher import ElevationEnricher, build_route_points
from route_planner.core.geo_calculator import GeoCalculator
from route_planner.core.path_sampler import sample_path
from route_planner.core.stats_aggregator import compute_route_stats, estimate_time_min, segment_grades

__all__ = [
    # Geo calculator
    "GeoCalculator",
    # Pipeline stages
    "sample_path",
    "ElevationEnricher",
    "build_route_points",
    "compute_route_stats",
    "segment_grades",
    "estimate_time_min",
    # Classification
    "classify_difficulty",
    "classify_hiking_difficulty",
    "difficulty_score",
    # Derivers
    "safety_score",
    "safety_band",
    "count_steep_sections",
    "traffic_alerts",
    "terrain_alerts",
    "weather_alerts",
    "safety_alerts",
    "terrain_tags",
]
