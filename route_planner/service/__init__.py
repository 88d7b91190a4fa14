"""Application-facing services: route orchestration and selection state."""

from route_planner.service.planner_state import (
    PlannerContext,
    RoutePlanner,
    RoutePlannerStateMachine,
    RouteRequestTracker,
)
from route_planner.service.route_service import RouteService

__all__ = [
    "RouteService",
    "RoutePlanner",
    "RoutePlannerStateMachine",
    "PlannerContext",
    "RouteRequestTracker",
]
