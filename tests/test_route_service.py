"""Tests for RouteService orchestration.

Tests: calculate_route, alternatives, accessible routes, place lookups
(photo spots, hiking, travel comfort, emergency), safety alerts
Focus: Provider interaction and partial-failure policy, using fake providers
from conftest.py driven with asyncio.run.
"""

import asyncio

import pytest

from conftest import FakeDirections, FakeElevation, FakePlaces, make_place
from route_planner.exceptions import DegenerateInputError, ProviderError, RoutePlannerError
from route_planner.model.coordinate import Coordinate, Path, TravelMode
from route_planner.model.difficulty import Difficulty, HikingDifficulty
from route_planner.model.route_data import RouteData
from route_planner.model.route_info import RouteAlternative
from route_planner.model.route_point import RoutePoint
from route_planner.model.route_stats import RouteStats
from route_planner.service.route_service import RouteService


def alternative(name: str, difficulty: Difficulty, minutes: float) -> RouteAlternative:
    stats = RouteStats(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, minutes)
    return RouteAlternative(id=name, name=name, route=RouteData(points=(), stats=stats), difficulty=difficulty)


class TestCalculateRoute:
    """calculate_route - directions -> sampling -> enrichment -> stats."""

    def test_pipeline(self, northbound_path: Path, start: Coordinate, end: Coordinate) -> None:
        directions = FakeDirections(paths=[northbound_path])
        elevation = FakeElevation()
        service = RouteService(directions=directions, elevation=elevation)

        route = asyncio.run(service.calculate_route(start, end, TravelMode.WALKING))

        assert len(elevation.calls) == 1
        assert len(elevation.calls[0]) == 100
        assert len(route.points) == 100
        assert route.points[0].distance == 0.0
        assert 2200 < route.stats.total_distance < 2250  # 0.02° ≈ 2224m
        assert route.stats.total_elevation_gain == pytest.approx(100.0)
        assert route.stats.total_elevation_loss == pytest.approx(0.0)
        assert route.waypoints is None
        assert directions.calls[0]["mode"] == TravelMode.WALKING
        assert directions.calls[0]["alternatives"] is False

    def test_custom_sample_count(self, northbound_path: Path, start: Coordinate, end: Coordinate) -> None:
        service = RouteService(directions=FakeDirections(paths=[northbound_path]), elevation=FakeElevation(), sample_count=10)
        route = asyncio.run(service.calculate_route(start, end, TravelMode.DRIVING))
        assert len(route.points) == 10

    def test_invalid_sample_count(self) -> None:
        with pytest.raises(ValueError):
            RouteService(directions=FakeDirections(), elevation=FakeElevation(), sample_count=1)

    def test_waypoints_forwarded_and_kept(self, northbound_path: Path, start: Coordinate, end: Coordinate) -> None:
        directions = FakeDirections(paths=[northbound_path])
        service = RouteService(directions=directions, elevation=FakeElevation())
        waypoints = [Coordinate(lat=0.01, lng=0.0)]

        route = asyncio.run(service.calculate_route(start, end, TravelMode.BICYCLING, waypoints=waypoints))

        assert directions.calls[0]["waypoints"] == waypoints
        assert route.waypoints == tuple(waypoints)

    def test_directions_failure_propagates(self, start: Coordinate, end: Coordinate) -> None:
        error = ProviderError("no route", provider="directions", status="ZERO_RESULTS")
        elevation = FakeElevation()
        service = RouteService(directions=FakeDirections(error=error), elevation=elevation)

        with pytest.raises(ProviderError) as exc_info:
            asyncio.run(service.calculate_route(start, end, TravelMode.WALKING))
        assert exc_info.value.status == "ZERO_RESULTS"
        assert elevation.calls == []

    def test_no_paths_is_zero_results(self, start: Coordinate, end: Coordinate) -> None:
        service = RouteService(directions=FakeDirections(paths=[]), elevation=FakeElevation())
        with pytest.raises(ProviderError) as exc_info:
            asyncio.run(service.calculate_route(start, end, TravelMode.WALKING))
        assert exc_info.value.status == "ZERO_RESULTS"

    def test_directions_timeout(self, northbound_path: Path, start: Coordinate, end: Coordinate) -> None:
        service = RouteService(
            directions=FakeDirections(paths=[northbound_path], delay_s=1.0),
            elevation=FakeElevation(),
            timeout_s=0.01,
        )
        with pytest.raises(ProviderError) as exc_info:
            asyncio.run(service.calculate_route(start, end, TravelMode.WALKING))
        assert exc_info.value.status == "TIMEOUT"


class TestAlternatives:
    """get_route_alternatives / get_accessible_routes / compare_alternatives."""

    def test_at_most_three_alternatives(self, northbound_path: Path, start: Coordinate, end: Coordinate) -> None:
        directions = FakeDirections(paths=[northbound_path] * 4)
        elevation = FakeElevation()
        service = RouteService(directions=directions, elevation=elevation)

        alternatives = asyncio.run(service.get_route_alternatives(start, end, TravelMode.DRIVING))

        assert [a.id for a in alternatives] == ["alt-1", "alt-2", "alt-3"]
        assert [a.name for a in alternatives] == ["Route 1", "Route 2", "Route 3"]
        assert len(elevation.calls) == 3
        assert directions.calls[0]["alternatives"] is True
        assert all(a.difficulty == Difficulty.EASY for a in alternatives)

    def test_elevation_failure_propagates(self, northbound_path: Path, start: Coordinate, end: Coordinate) -> None:
        service = RouteService(
            directions=FakeDirections(paths=[northbound_path] * 2),
            elevation=FakeElevation(error=ProviderError("down", provider="elevation", status="UNKNOWN_ERROR")),
        )
        with pytest.raises(ProviderError):
            asyncio.run(service.get_route_alternatives(start, end, TravelMode.WALKING))

    def test_wheelchair_avoids_highways(self, northbound_path: Path, start: Coordinate, end: Coordinate) -> None:
        directions = FakeDirections(paths=[northbound_path])
        service = RouteService(directions=directions, elevation=FakeElevation())

        alternatives = asyncio.run(service.get_accessible_routes(start, end, needs=["wheelchair"]))

        assert len(alternatives) == 1
        call = directions.calls[0]
        assert call["mode"] == TravelMode.WALKING
        assert call["alternatives"] is True
        assert call["avoid_highways"] is True

    def test_other_needs_keep_highways(self, northbound_path: Path, start: Coordinate, end: Coordinate) -> None:
        directions = FakeDirections(paths=[northbound_path])
        service = RouteService(directions=directions, elevation=FakeElevation())

        asyncio.run(service.get_accessible_routes(start, end, needs=["visual"]))

        assert directions.calls[0]["avoid_highways"] is False

    def test_compare_orders_by_difficulty_then_time(self) -> None:
        alternatives = [
            alternative("slow-easy", Difficulty.EASY, 90.0),
            alternative("hard", Difficulty.HARD, 10.0),
            alternative("fast-easy", Difficulty.EASY, 30.0),
        ]
        ordered = RouteService.compare_alternatives(alternatives)
        assert [a.id for a in ordered] == ["fast-easy", "slow-easy", "hard"]


class TestPlaces:
    """Place lookups around a route."""

    def test_find_nearby_default_radius(self) -> None:
        places = FakePlaces({"cafe": [make_place("A")]})
        service = RouteService(directions=FakeDirections(), elevation=FakeElevation(), places=places)

        found = asyncio.run(service.find_nearby_places(Coordinate(lat=0.0, lng=0.0), "cafe"))

        assert [p.name for p in found] == ["A"]
        assert places.calls[0][2] == 1000

    def test_missing_places_provider(self, three_point_route: RouteData) -> None:
        service = RouteService(directions=FakeDirections(), elevation=FakeElevation())
        with pytest.raises(RoutePlannerError):
            asyncio.run(service.get_travel_comfort_info(three_point_route))

    def test_photo_spots(self) -> None:
        """60 points: 5 searches (cap), 2 good spots each, 8 in total."""
        places = FakePlaces(
            {
                "tourist_attraction": [
                    make_place("Viewpoint", rating=4.8, has_photos=True),
                    make_place("Waterfall", rating=4.0, has_photos=True),
                    make_place("Bridge", rating=4.5, has_photos=True),
                    make_place("Car park", rating=3.9, has_photos=True),
                    make_place("Unrated", rating=None, has_photos=True),
                    make_place("No photos", rating=5.0, has_photos=False),
                ]
            }
        )
        service = RouteService(directions=FakeDirections(), elevation=FakeElevation(), places=places)
        points = [RoutePoint(lat=i * 0.001, lng=0.0, elevation=0.0, distance=i * 111.0) for i in range(60)]

        spots = asyncio.run(service.get_photo_spots(points))

        assert len(places.calls) == 5
        assert [call[0].lat for call in places.calls] == pytest.approx([0.0, 0.01, 0.02, 0.03, 0.04])
        assert all(call[2] == 1500 for call in places.calls)
        assert len(spots) == 8
        assert {s.name for s in spots} == {"Viewpoint", "Waterfall"}

    def test_photo_spots_skip_failed_lookup(self) -> None:
        places = FakePlaces({"tourist_attraction": ProviderError("denied", provider="places", status="REQUEST_DENIED")})
        service = RouteService(directions=FakeDirections(), elevation=FakeElevation(), places=places)
        points = [RoutePoint(lat=0.0, lng=0.0, elevation=0.0, distance=0.0)]

        assert asyncio.run(service.get_photo_spots(points)) == []

    def test_travel_comfort_partial_failure(self, three_point_route: RouteData) -> None:
        """A failed category is empty; the others still populate and are truncated."""
        places = FakePlaces(
            {
                "rest_stop": [make_place(f"Rest {i}") for i in range(5)],
                "gas_station": ProviderError("quota", provider="places", status="OVER_QUERY_LIMIT"),
                "restaurant": [make_place(f"Food {i}") for i in range(10)],
                "hospital": [make_place("Clinic")],
            }
        )
        service = RouteService(directions=FakeDirections(), elevation=FakeElevation(), places=places)

        info = asyncio.run(service.get_travel_comfort_info(three_point_route))

        assert info is not None
        assert len(info.rest_stops) == 3
        assert info.fuel_stations == ()
        assert len(info.restaurants) == 8
        assert info.hotels == ()
        assert [p.name for p in info.medical_facilities] == ["Clinic"]
        midpoint = three_point_route.points[1].coordinate
        assert all(call[0] == midpoint for call in places.calls)
        assert {call[1] for call in places.calls} == {"rest_stop", "gas_station", "restaurant", "lodging", "hospital"}

    def test_travel_comfort_empty_route(self, empty_route: RouteData) -> None:
        places = FakePlaces()
        service = RouteService(directions=FakeDirections(), elevation=FakeElevation(), places=places)

        assert asyncio.run(service.get_travel_comfort_info(empty_route)) is None
        assert places.calls == []

    def test_hiking_trail_info(self, three_point_route: RouteData) -> None:
        places = FakePlaces(
            {
                "park": [make_place(f"Trailhead {i}") for i in range(4)],
                "natural_feature": ProviderError("down", provider="places", status="UNKNOWN_ERROR"),
            }
        )
        service = RouteService(directions=FakeDirections(), elevation=FakeElevation(), places=places)

        info = asyncio.run(service.get_hiking_trail_info(three_point_route))

        assert info is not None
        assert len(info.trailheads) == 3
        assert info.water_sources == ()
        assert info.difficulty == HikingDifficulty.BEGINNER
        assert info.terrain == ("Moderate terrain",)

    def test_hiking_trail_info_empty_route(self, empty_route: RouteData) -> None:
        service = RouteService(directions=FakeDirections(), elevation=FakeElevation(), places=FakePlaces())
        assert asyncio.run(service.get_hiking_trail_info(empty_route)) is None

    def test_emergency_info(self, three_point_route: RouteData) -> None:
        places = FakePlaces(
            {
                "hospital": [make_place("General Hospital"), make_place("Clinic")],
                "police": [make_place(f"Station {i}") for i in range(3)],
            }
        )
        service = RouteService(directions=FakeDirections(), elevation=FakeElevation(), places=places)

        info = asyncio.run(service.get_emergency_info(three_point_route))

        assert info.nearest_hospital is not None
        assert info.nearest_hospital.name == "General Hospital"
        assert len(info.police_stations) == 2
        assert info.emergency_contacts == ("911", "Local Emergency Services")
        assert (three_point_route.points[1].coordinate, "hospital", 50_000) in places.calls

    def test_emergency_info_without_hospital(self, three_point_route: RouteData) -> None:
        service = RouteService(directions=FakeDirections(), elevation=FakeElevation(), places=FakePlaces())
        info = asyncio.run(service.get_emergency_info(three_point_route))
        assert info.nearest_hospital is None
        assert info.police_stations == ()

    def test_emergency_info_empty_route(self, empty_route: RouteData) -> None:
        service = RouteService(directions=FakeDirections(), elevation=FakeElevation(), places=FakePlaces())
        with pytest.raises(DegenerateInputError):
            asyncio.run(service.get_emergency_info(empty_route))


class TestSafetyAlerts:
    """get_safety_alerts - delegates to the derivers."""

    def test_gentle_route_has_no_alerts(self, three_point_route: RouteData) -> None:
        service = RouteService(directions=FakeDirections(), elevation=FakeElevation())
        assert service.get_safety_alerts(three_point_route) == []

    def test_empty_route(self, empty_route: RouteData) -> None:
        service = RouteService(directions=FakeDirections(), elevation=FakeElevation())
        assert service.get_safety_alerts(empty_route) == []
