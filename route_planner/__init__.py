"""Route Planner - Elevation-aware route analytics.

Plans a route between two points (optionally via waypoints) and derives its
elevation profile, distance, grades, estimated travel time, difficulty and
safety alerts.

Modules:
    core: Analytics pipeline (sampling, elevation enrichment, statistics, classification, derivers)
    model: Immutable data structures (Coordinate, RoutePoint, RouteStats, RouteData, alerts)
    providers: Directions, elevation and places capabilities (Google Maps, local DEM)
    service: RouteService orchestration and the route selection state machine

Example:
    from route_planner.providers import GoogleMapsClient
    from route_planner.service import RouteService

    client = GoogleMapsClient.from_env()
    service = RouteService(directions=client, elevation=client, places=client)
    route = await service.calculate_route(start, end, TravelMode.WALKING)
"""

import logging


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging for applications using the planner."""
    logging.basicConfig(level=level)
