"""Google Maps web service client (Directions, Elevation, Places Nearby).

Implements DirectionsProvider, ElevationProvider and PlacesProvider on top of
the public JSON endpoints. HTTP calls are blocking (requests) and run in a
worker thread so they never stall the event loop.

Every non-OK status is surfaced as ProviderError carrying the status string;
nothing is retried here.
"""

import asyncio
import logging
import os
from typing import Any, Optional, Sequence

import requests

from route_planner.constants import ProviderConfig
from route_planner.exceptions import ProviderError
from route_planner.model.coordinate import Coordinate, Path, TravelMode
from route_planner.model.place import Place

logger = logging.getLogger(__name__)


def decode_polyline(encoded: str) -> list[tuple[float, float]]:
    """Decode a Google encoded polyline into (lat, lng) pairs.

    Each coordinate is stored as a zig-zag encoded delta from the previous
    one, in 5-bit chunks offset by 63, at 1e-5 degree precision.

    Args:
        encoded: Encoded polyline string

    Returns:
        List of (latitude, longitude) tuples.
    """
    coordinates: list[tuple[float, float]] = []
    index = 0
    lat = 0
    lng = 0

    def next_delta() -> int:
        nonlocal index
        shift = 0
        result = 0
        while True:
            chunk = ord(encoded[index]) - 63
            index += 1
            result |= (chunk & 0x1F) << shift
            shift += 5
            if chunk < 0x20:
                break
        return ~(result >> 1) if result & 1 else result >> 1

    while index < len(encoded):
        lat += next_delta()
        lng += next_delta()
        coordinates.append((lat / 1e5, lng / 1e5))

    return coordinates


def _format_latlng(coord: Coordinate) -> str:
    lat, lng = coord.lat_lng
    return f"{lat:.6f},{lng:.6f}"


def _parse_place(result: dict[str, Any]) -> Place:
    location = result["geometry"]["location"]
    return Place(
        name=result.get("name", ""),
        coordinate=Coordinate(lat=location["lat"], lng=location["lng"]),
        rating=result.get("rating"),
        vicinity=result.get("vicinity"),
        open_now=result.get("opening_hours", {}).get("open_now"),
        has_photos=bool(result.get("photos")),
        types=tuple(result.get("types", [])),
    )


class GoogleMapsClient:
    """Directions, elevation and places provider backed by Google Maps.

    Example:
        client = GoogleMapsClient(api_key="...")
        paths = await client.get_paths(start, end, TravelMode.WALKING)
        elevations = await client.get_elevations(sample_path(paths[0]))
    """

    def __init__(
        self,
        api_key: str,
        session: Optional[requests.Session] = None,
        timeout_s: float = ProviderConfig.REQUEST_TIMEOUT_S,
    ) -> None:
        """Initialize client.

        Args:
            api_key: Google Maps Platform API key
            session: Optional requests session (created if not provided)
            timeout_s: Per-request HTTP timeout in seconds
        """
        if not api_key:
            raise ValueError("Google Maps API key is not configured.")
        self._api_key = api_key
        self._session = session or requests.Session()
        self._timeout_s = timeout_s

    @classmethod
    def from_env(cls) -> "GoogleMapsClient":
        """Create a client from the ROUTE_PLANNER_GOOGLE_API_KEY environment variable."""
        return cls(api_key=os.environ.get(ProviderConfig.API_KEY_ENV, ""))

    def close(self) -> None:
        self._session.close()

    # =========================================================================
    # HTTP
    # =========================================================================

    def _get_json(self, url: str, params: dict[str, Any], provider: str) -> dict[str, Any]:
        """GET a JSON endpoint, mapping transport and decoding errors to ProviderError."""
        try:
            response = self._session.get(url, params={**params, "key": self._api_key}, timeout=self._timeout_s)
            response.raise_for_status()
            data = response.json()
        except requests.Timeout as e:
            raise ProviderError(str(e), provider=provider, status="TIMEOUT") from e
        except requests.RequestException as e:
            raise ProviderError(str(e), provider=provider, status="HTTP_ERROR") from e
        except ValueError as e:
            raise ProviderError(f"invalid JSON response: {e}", provider=provider, status="INVALID_RESPONSE") from e

        if not isinstance(data, dict) or "status" not in data:
            raise ProviderError("response without status", provider=provider, status="INVALID_RESPONSE")
        return data

    # =========================================================================
    # Blocking API
    # =========================================================================

    def directions(
        self,
        start: Coordinate,
        end: Coordinate,
        mode: TravelMode,
        waypoints: Optional[Sequence[Coordinate]] = None,
        alternatives: bool = False,
        avoid_highways: bool = False,
    ) -> list[Path]:
        """Fetch route paths (decoded overview polylines), best first."""
        mode = TravelMode(mode)
        params: dict[str, Any] = {
            "origin": _format_latlng(start),
            "destination": _format_latlng(end),
            "mode": mode.value.lower(),
        }
        if waypoints:
            params["waypoints"] = "optimize:true|" + "|".join(_format_latlng(w) for w in waypoints)
        if alternatives:
            params["alternatives"] = "true"
        if avoid_highways:
            params["avoid"] = "highways"

        data = self._get_json(ProviderConfig.GOOGLE_DIRECTIONS_URL, params, provider="directions")
        status = data["status"]
        if status != "OK":
            raise ProviderError(
                data.get("error_message", "Directions request failed"), provider="directions", status=status
            )

        paths: list[Path] = []
        for route in data.get("routes", []):
            try:
                encoded = route["overview_polyline"]["points"]
                paths.append(tuple(Coordinate(lat=lat, lng=lng) for lat, lng in decode_polyline(encoded)))
            except (KeyError, TypeError, IndexError, ValueError) as e:
                raise ProviderError(
                    f"malformed overview polyline: {e}", provider="directions", status="INVALID_RESPONSE"
                ) from e

        if not paths:
            raise ProviderError("no routes in response", provider="directions", status="ZERO_RESULTS")

        logger.info(f"Directions {mode.value} returned {len(paths)} path(s), {len(paths[0])} points in best")
        return paths

    def elevations(self, points: Sequence[Coordinate]) -> list[float]:
        """Fetch elevation for every point in a single request."""
        if not points:
            return []
        if len(points) > ProviderConfig.MAX_ELEVATION_LOCATIONS:
            raise ProviderError(
                f"At most {ProviderConfig.MAX_ELEVATION_LOCATIONS} locations per elevation request, got {len(points)}",
                provider="elevation",
                status="MAX_ELEMENTS_EXCEEDED",
            )

        params = {"locations": "|".join(_format_latlng(p) for p in points)}
        data = self._get_json(ProviderConfig.GOOGLE_ELEVATION_URL, params, provider="elevation")
        status = data["status"]
        if status != "OK":
            raise ProviderError(data.get("error_message", "Elevation request failed"), provider="elevation", status=status)

        try:
            return [float(result["elevation"]) for result in data.get("results", [])]
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError("malformed elevation result", provider="elevation", status="INVALID_RESPONSE") from e

    def nearby(self, point: Coordinate, category: str, radius_m: float) -> list[Place]:
        """Fetch places of one category within radius_m of point."""
        params = {
            "location": _format_latlng(point),
            "radius": int(radius_m),
            "type": category,
        }
        data = self._get_json(ProviderConfig.GOOGLE_PLACES_NEARBY_URL, params, provider="places")
        status = data["status"]
        if status == "ZERO_RESULTS":
            return []
        if status != "OK":
            raise ProviderError(data.get("error_message", "Places search failed"), provider="places", status=status)

        try:
            return [_parse_place(result) for result in data.get("results", [])]
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError("malformed place result", provider="places", status="INVALID_RESPONSE") from e

    # =========================================================================
    # Async capabilities
    # =========================================================================

    async def get_paths(
        self,
        start: Coordinate,
        end: Coordinate,
        mode: TravelMode,
        waypoints: Optional[Sequence[Coordinate]] = None,
        alternatives: bool = False,
        avoid_highways: bool = False,
    ) -> list[Path]:
        return await asyncio.to_thread(self.directions, start, end, mode, waypoints, alternatives, avoid_highways)

    async def get_elevations(self, points: Sequence[Coordinate]) -> list[float]:
        return await asyncio.to_thread(self.elevations, points)

    async def find_nearby(self, point: Coordinate, category: str, radius_m: float) -> list[Place]:
        return await asyncio.to_thread(self.nearby, point, category, radius_m)
