"""RouteStats - Aggregate statistics over a full RoutePoint sequence."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class RouteStats:
    """Derived statistics of a route. Recomputed, never patched.

    Attributes:
        total_distance: Route length in meters
        total_elevation_gain: Sum of positive elevation changes (m)
        total_elevation_loss: Sum of absolute negative elevation changes (m)
        max_elevation: Highest sampled elevation (m)
        min_elevation: Lowest sampled elevation (m)
        max_grade: Steepest signed climb grade (%), never below 0
        min_grade: Steepest signed descent grade (%), never above 0
        average_grade: Mean absolute grade over moving segments (%)
        estimated_time: Traversal time estimate (minutes)
    """

    total_distance: float
    total_elevation_gain: float
    total_elevation_loss: float
    max_elevation: float
    min_elevation: float
    max_grade: float
    min_grade: float
    average_grade: float
    estimated_time: float

    @classmethod
    def empty(cls) -> "RouteStats":
        """All-zero statistics for a route with no points."""
        return cls(
            total_distance=0.0,
            total_elevation_gain=0.0,
            total_elevation_loss=0.0,
            max_elevation=0.0,
            min_elevation=0.0,
            max_grade=0.0,
            min_grade=0.0,
            average_grade=0.0,
            estimated_time=0.0,
        )

    @property
    def total_distance_km(self) -> float:
        return self.total_distance / 1000

    @property
    def steepest_grade(self) -> float:
        """Absolute value of the steepest climb, as used by the classifiers."""
        return abs(self.max_grade)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
