"""SafetyAlert - Route alerts shown alongside the safety score.

Alerts indicate situations a traveller should prepare for:
- Traffic: long congested routes, repeated steep sections slowing traffic
- Terrain: extreme grades, large elevation gain, long distance
- Weather: high-altitude routes where conditions change quickly
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from route_planner.constants import AlertConfig


class AlertCategory:
    """Alert categories."""

    TRAFFIC = "traffic"
    TERRAIN = "terrain"
    WEATHER = "weather"


class AlertSeverity:
    """Alert severities, least to most severe."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class SafetyAlert(ABC):
    """Abstract base class for route alerts.

    Subclasses store the triggering values and compute the message as a property.
    Use isinstance() to check alert type.
    Each subclass has an alert_type field for serialization.
    """

    @property
    @abstractmethod
    def category(self) -> str:
        """One of AlertCategory."""

    @property
    @abstractmethod
    def severity(self) -> str:
        """One of AlertSeverity."""

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable alert message."""

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class HeavyTrafficAlert(SafetyAlert):
    """Long road routes are likely to hit peak-hour congestion.

    Attributes:
        point_count: Number of sampled route points
    """

    point_count: int
    alert_type: str = "HeavyTrafficAlert"

    @property
    def category(self) -> str:
        return AlertCategory.TRAFFIC

    @property
    def severity(self) -> str:
        return AlertSeverity.MEDIUM

    @property
    def message(self) -> str:
        return "Heavy traffic expected during peak hours"


@dataclass(frozen=True)
class SteepSectionsAlert(SafetyAlert):
    """Many steep segments slow down travel.

    Attributes:
        steep_section_count: Segments steeper than AlertConfig.STEEP_GRADE_PCT
    """

    steep_section_count: int
    alert_type: str = "SteepSectionsAlert"

    @property
    def category(self) -> str:
        return AlertCategory.TRAFFIC

    @property
    def severity(self) -> str:
        return AlertSeverity.MEDIUM

    @property
    def message(self) -> str:
        return "Multiple steep sections - allow extra time"


@dataclass(frozen=True)
class SteepTerrainAlert(SafetyAlert):
    """Route contains a very steep or extremely steep climb.

    Attributes:
        max_grade_pct: Steepest climb grade of the route
    """

    max_grade_pct: float
    alert_type: str = "SteepTerrainAlert"

    @property
    def category(self) -> str:
        return AlertCategory.TERRAIN

    @property
    def is_extreme(self) -> bool:
        return self.max_grade_pct > AlertConfig.EXTREME_GRADE_PCT

    @property
    def severity(self) -> str:
        return AlertSeverity.HIGH if self.is_extreme else AlertSeverity.MEDIUM

    @property
    def message(self) -> str:
        if self.is_extreme:
            return "Extremely steep sections detected - use caution"
        return "Very steep sections ahead - prepare for challenging terrain"


@dataclass(frozen=True)
class HighElevationGainAlert(SafetyAlert):
    """Total climbing demands a good fitness level.

    Attributes:
        elevation_gain_m: Total elevation gain of the route
    """

    elevation_gain_m: float
    alert_type: str = "HighElevationGainAlert"

    @property
    def category(self) -> str:
        return AlertCategory.TERRAIN

    @property
    def severity(self) -> str:
        return AlertSeverity.MEDIUM

    @property
    def message(self) -> str:
        return "High elevation gain - ensure adequate fitness level"


@dataclass(frozen=True)
class LongDistanceAlert(SafetyAlert):
    """Route is long enough to require rest stops and supplies.

    Attributes:
        distance_m: Total route distance
    """

    distance_m: float
    alert_type: str = "LongDistanceAlert"

    @property
    def category(self) -> str:
        return AlertCategory.TERRAIN

    @property
    def severity(self) -> str:
        return AlertSeverity.LOW

    @property
    def message(self) -> str:
        return "Long distance route - plan for rest stops and supplies"


@dataclass(frozen=True)
class HighAltitudeWeatherAlert(SafetyAlert):
    """Route climbs high enough for rapid weather changes.

    Attributes:
        max_elevation_m: Highest elevation of the route
    """

    max_elevation_m: float
    alert_type: str = "HighAltitudeWeatherAlert"

    @property
    def category(self) -> str:
        return AlertCategory.WEATHER

    @property
    def severity(self) -> str:
        return AlertSeverity.MEDIUM

    @property
    def message(self) -> str:
        return "High altitude route - weather conditions may change rapidly"
