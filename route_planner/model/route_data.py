"""RouteData - The unit exchanged between the engine and the application.

One RouteData exists per computed route alternative. It is created by the
pipeline on each request and replaced wholesale on the next one.
"""

from dataclasses import asdict, dataclass
from typing import Any, Optional

from route_planner.model.coordinate import Coordinate
from route_planner.model.route_point import RoutePoint
from route_planner.model.route_stats import RouteStats


@dataclass(frozen=True)
class RouteData:
    """Enriched route points with their statistics.

    Attributes:
        points: Sampled, elevation-enriched points (owned by this route)
        stats: Statistics computed from points
        waypoints: Intermediate stops requested by the user, if any
    """

    points: tuple[RoutePoint, ...]
    stats: RouteStats
    waypoints: Optional[tuple[Coordinate, ...]] = None

    @property
    def is_empty(self) -> bool:
        return len(self.points) == 0

    @property
    def midpoint(self) -> Optional[RoutePoint]:
        """Point at index len // 2 - the anchor for nearby-place lookups."""
        if not self.points:
            return None
        return self.points[len(self.points) // 2]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "points": [asdict(p) for p in self.points],
            "stats": self.stats.to_dict(),
            "waypoints": [asdict(w) for w in self.waypoints] if self.waypoints is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RouteData":
        """Create RouteData from dictionary."""
        waypoints = data.get("waypoints")
        return cls(
            points=tuple(RoutePoint(**p) for p in data["points"]),
            stats=RouteStats(**data["stats"]),
            waypoints=tuple(Coordinate(**w) for w in waypoints) if waypoints is not None else None,
        )

    def __repr__(self) -> str:
        return (
            f"RouteData({len(self.points)} points, {self.stats.total_distance:.0f}m, "
            f"+{self.stats.total_elevation_gain:.0f}m)"
        )
