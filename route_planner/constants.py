"""Configuration constants for Route Planner.

All tunable parameters of the route analytics engine are centralized here.

Classes:
    SamplingConfig: Path down-sampling before the elevation batch call
    PaceConfig: Naismith-style traversal time estimate
    DifficultyConfig: Additive difficulty scoring tiers
    HikingConfig: First-match hiking difficulty tiers
    SafetyConfig: Safety score penalties and display bands
    AlertConfig: Steep-section, traffic and terrain alert thresholds
    TerrainConfig: Terrain tag thresholds
    AmenityConfig: Nearby-place lookups (comfort, hiking, emergency, photos)
    AlternativesConfig: Route alternative limits
    ProviderConfig: External provider endpoints and timeouts
"""

from pathlib import Path

# Package root directory (where route_planner/ lives)
PACKAGE_DIR = Path(__file__).parent

# Project root directory (parent of route_planner/)
PROJECT_ROOT = PACKAGE_DIR.parent

# Data directory outside package (DEM files are not shipped with the package)
DATA_DIR = PROJECT_ROOT / "data"


class SamplingConfig:
    """Path sampling parameters."""

    # Points sent to the elevation provider per route (one batch call)
    ELEVATION_SAMPLE_POINTS = 100
    # interval = (L - 1) / (N - 1) needs at least two samples
    MIN_SAMPLE_POINTS = 2


class PaceConfig:
    """Traversal time estimate: flat walking pace plus a climbing penalty."""

    MINUTES_PER_KM = 15
    MINUTES_PER_100M_CLIMB = 10


class DifficultyConfig:
    """Additive difficulty scoring for route comparison.

    Each factor contributes the points of the first tier it exceeds
    (tiers ordered most to least severe). The total score maps to a level.
    """

    # (threshold, points) - value must be strictly greater than threshold
    DISTANCE_KM_TIERS = [(20, 3), (10, 2), (5, 1)]
    ELEVATION_GAIN_M_TIERS = [(1000, 3), (500, 2), (200, 1)]
    MAX_GRADE_PCT_TIERS = [(20, 3), (15, 2), (10, 1)]

    # (minimum score, level) - first match wins
    SCORE_LEVELS = [(7, "extreme"), (5, "hard"), (3, "moderate")]
    DEFAULT_LEVEL = "easy"
    LEVELS = ["easy", "moderate", "hard", "extreme"]


class HikingConfig:
    """Hiking difficulty thresholds (direct, non-additive).

    A route is classified at the most severe level where ANY factor
    exceeds that level's threshold.
    """

    # level -> (distance_km, elevation_gain_m, max_grade_pct)
    LEVEL_THRESHOLDS = {
        "expert": (15, 800, 25),
        "advanced": (10, 500, 20),
        "intermediate": (5, 300, 15),
    }
    DEFAULT_LEVEL = "beginner"
    LEVELS = ["beginner", "intermediate", "advanced", "expert"]


class SafetyConfig:
    """Safety score (0-100) penalties and display bands."""

    BASE_SCORE = 100
    MIN_SCORE = 0

    # (threshold, penalty) - first tier exceeded applies
    MAX_GRADE_PCT_PENALTIES = [(20, 20), (15, 15), (10, 10)]
    ELEVATION_GAIN_M_PENALTIES = [(1000, 15), (500, 10)]
    DISTANCE_KM_PENALTIES = [(20, 10), (10, 5)]

    # (minimum score, band) - first match wins
    SCORE_BANDS = [(80, "good"), (60, "fair"), (40, "caution")]
    DEFAULT_BAND = "poor"


class AlertConfig:
    """Thresholds for traffic, terrain and weather alerts."""

    # Segments steeper than this (absolute grade) count as steep sections
    STEEP_GRADE_PCT = 15.0
    # More steep sections than this trigger an "allow extra time" alert
    STEEP_SECTION_ALERT_COUNT = 5
    # More sampled points than this suggests a long, congested road route
    HEAVY_TRAFFIC_POINT_COUNT = 50

    EXTREME_GRADE_PCT = 20.0
    VERY_STEEP_GRADE_PCT = 15.0
    HIGH_ELEVATION_GAIN_M = 1000.0
    LONG_DISTANCE_M = 20_000.0
    # Mountain weather changes quickly above this elevation
    HIGH_ALTITUDE_WEATHER_M = 1500.0


class TerrainConfig:
    """Terrain tag thresholds."""

    HIGH_ALTITUDE_M = 2000.0
    STEEP_CLIMB_GRADE_PCT = 20.0
    LONG_DISTANCE_M = 10_000.0
    SIGNIFICANT_GAIN_M = 500.0
    DEFAULT_TAG = "Moderate terrain"


class AmenityConfig:
    """Nearby-place lookups around the route.

    Each entry: name -> (place type, search radius in meters, max results kept).
    """

    COMFORT_CATEGORIES = {
        "rest_stops": ("rest_stop", 10_000, 3),
        "fuel_stations": ("gas_station", 15_000, 5),
        "restaurants": ("restaurant", 5_000, 8),
        "hotels": ("lodging", 20_000, 4),
        "medical_facilities": ("hospital", 25_000, 2),
    }

    HIKING_CATEGORIES = {
        "trailheads": ("park", 5_000, 3),
        "water_sources": ("natural_feature", 2_000, 5),
    }

    EMERGENCY_HOSPITAL = ("hospital", 50_000, 1)
    EMERGENCY_POLICE = ("police", 25_000, 2)
    EMERGENCY_CONTACTS = ["911", "Local Emergency Services"]

    DEFAULT_RADIUS_M = 1000

    # Photo spots: search every Nth route point, first K samples only
    PHOTO_SPOT_TYPE = "tourist_attraction"
    PHOTO_SPOT_RADIUS_M = 1500
    PHOTO_SPOT_POINT_STRIDE = 10
    PHOTO_SPOT_MAX_SEARCHES = 5
    PHOTO_SPOT_MIN_RATING = 4.0
    PHOTO_SPOT_MAX_PER_SEARCH = 2
    PHOTO_SPOT_MAX_TOTAL = 8


class AlternativesConfig:
    """Route alternative parameters."""

    MAX_ALTERNATIVES = 3
    NAME_PREFIX = "Route"
    WHEELCHAIR_NEED = "wheelchair"


class ProviderConfig:
    """External provider endpoints and timeouts."""

    GOOGLE_DIRECTIONS_URL = "https://maps.googleapis.com/maps/api/directions/json"
    GOOGLE_ELEVATION_URL = "https://maps.googleapis.com/maps/api/elevation/json"
    GOOGLE_PLACES_NEARBY_URL = "https://maps.googleapis.com/maps/api/place/nearbysearch/json"

    # Environment variables read by the factory helpers
    API_KEY_ENV = "ROUTE_PLANNER_GOOGLE_API_KEY"
    DEM_PATH_ENV = "ROUTE_PLANNER_DEM_PATH"
    DEFAULT_DEM_PATH = DATA_DIR / "dem.tif"

    # Every provider call is bounded; a timeout is a provider failure
    REQUEST_TIMEOUT_S = 15.0

    # Google Elevation API accepts at most 512 locations per request
    MAX_ELEVATION_LOCATIONS = 512


# Validate tier ordering (module-level assertions)
for _tiers in (
    DifficultyConfig.DISTANCE_KM_TIERS,
    DifficultyConfig.ELEVATION_GAIN_M_TIERS,
    DifficultyConfig.MAX_GRADE_PCT_TIERS,
    SafetyConfig.MAX_GRADE_PCT_PENALTIES,
    SafetyConfig.ELEVATION_GAIN_M_PENALTIES,
    SafetyConfig.DISTANCE_KM_PENALTIES,
):
    assert all(a[0] > b[0] for a, b in zip(_tiers, _tiers[1:])), "Tiers must be ordered most to least severe"

assert [level for _, level in DifficultyConfig.SCORE_LEVELS][::-1] == DifficultyConfig.LEVELS[1:]
assert list(HikingConfig.LEVEL_THRESHOLDS.keys())[::-1] == HikingConfig.LEVELS[1:]
assert SamplingConfig.ELEVATION_SAMPLE_POINTS >= SamplingConfig.MIN_SAMPLE_POINTS
assert SamplingConfig.ELEVATION_SAMPLE_POINTS <= ProviderConfig.MAX_ELEVATION_LOCATIONS
