"""Place - A point of interest returned by a places provider."""

from dataclasses import dataclass, field
from typing import Optional

from route_planner.model.coordinate import Coordinate


@dataclass(frozen=True)
class Place:
    """A nearby place (restaurant, hospital, trailhead, ...).

    Attributes:
        name: Display name
        coordinate: Location of the place
        rating: Average user rating (0-5), if known
        vicinity: Short address, if known
        open_now: Whether the place is currently open, if known
        has_photos: Whether the provider holds photos for the place
        types: Provider place types (e.g. ["park", "point_of_interest"])
    """

    name: str
    coordinate: Coordinate
    rating: Optional[float] = None
    vicinity: Optional[str] = None
    open_now: Optional[bool] = None
    has_photos: bool = False
    types: tuple[str, ...] = field(default_factory=tuple)

    def __repr__(self) -> str:
        rating = f", rating={self.rating:.1f}" if self.rating is not None else ""
        return f"Place({self.name!r}{rating})"
