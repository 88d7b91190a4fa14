"""Exception types raised by the route analytics engine.

ProviderError covers every failure of an external capability (directions,
elevation, places). DegenerateInputError is reserved for operations that need
a non-empty route; statistics never raise for empty input.
"""

from typing import Optional


class RoutePlannerError(Exception):
    """Base class for all route planner errors."""


class ProviderError(RoutePlannerError):
    """An external provider returned a non-success status or malformed data.

    Attributes:
        provider: Capability that failed ("directions", "elevation", "places")
        status: Provider status string (e.g. "ZERO_RESULTS", "TIMEOUT"), if known
    """

    def __init__(self, message: str, provider: str, status: Optional[str] = None) -> None:
        super().__init__(message)
        self.provider = provider
        self.status = status

    def __str__(self) -> str:
        base = super().__str__()
        if self.status:
            return f"{self.provider} provider failed ({self.status}): {base}"
        return f"{self.provider} provider failed: {base}"


class DegenerateInputError(RoutePlannerError):
    """Operation requires a route with points but received an empty one."""
