"""Provider capabilities consumed by the route analytics engine.

The engine depends only on these protocols; concrete providers (Google Maps
web services, local DEM rasters, test fakes) are injected by the caller.
"""

import asyncio
import logging
from typing import Awaitable, Optional, Protocol, Sequence, TypeVar

from route_planner.constants import ProviderConfig
from route_planner.exceptions import ProviderError
from route_planner.model.coordinate import Coordinate, Path, TravelMode
from route_planner.model.place import Place

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DirectionsProvider(Protocol):
    """Given two endpoints and a travel mode, return one or more paths."""

    async def get_paths(
        self,
        start: Coordinate,
        end: Coordinate,
        mode: TravelMode,
        waypoints: Optional[Sequence[Coordinate]] = None,
        alternatives: bool = False,
        avoid_highways: bool = False,
    ) -> list[Path]:
        """Return paths ordered by provider preference (best first).

        Waypoints may be reordered by the provider for efficiency. At least
        one path is returned on success; failures raise ProviderError.
        """
        ...


class ElevationProvider(Protocol):
    """Given a batch of coordinates, return one elevation per coordinate."""

    async def get_elevations(self, points: Sequence[Coordinate]) -> list[float]:
        ...


class PlacesProvider(Protocol):
    """Given a point, a category and a radius, return nearby places."""

    async def find_nearby(self, point: Coordinate, category: str, radius_m: float) -> list[Place]:
        ...


async def call_with_timeout(
    call: Awaitable[T],
    provider: str,
    timeout_s: float = ProviderConfig.REQUEST_TIMEOUT_S,
) -> T:
    """Await a provider call, converting a timeout into ProviderError.

    Args:
        call: Awaitable provider call
        provider: Capability name for error reporting
        timeout_s: Upper bound in seconds

    Raises:
        ProviderError: If the call does not finish within timeout_s.
    """
    try:
        return await asyncio.wait_for(call, timeout=timeout_s)
    except asyncio.TimeoutError as e:
        logger.warning(f"{provider} provider timed out after {timeout_s:.1f}s")
        raise ProviderError(f"no response within {timeout_s:.1f}s", provider=provider, status="TIMEOUT") from e
