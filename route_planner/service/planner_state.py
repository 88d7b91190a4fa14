"""State machine for the route selection workflow.

Uses python-statemachine with the model pattern: RoutePlannerStateMachine
drives a PlannerContext that holds the selected route and its alternatives.

States:
    IDLE: No route requested (or cleared)
    CALCULATING: A route request is in flight
    READY: A route is selected (optionally with alternatives)
    FAILED: The latest request failed; context.error holds the message

Transitions:
    IDLE | READY | FAILED | CALCULATING -> CALCULATING: request_route
    CALCULATING -> READY: route_ready
    CALCULATING -> FAILED: route_failed
    READY -> READY: select_alternative
    any -> IDLE: clear

Stale results
-------------
Every request_route takes a new generation token from RouteRequestTracker.
A result is applied only if its token is still the latest generation, so a
slow response for an older request can never overwrite a newer selection.
clear() also invalidates outstanding tokens.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from statemachine import State, StateMachine
from statemachine.exceptions import TransitionNotAllowed

from route_planner.exceptions import RoutePlannerError
from route_planner.model.coordinate import Coordinate, TravelMode
from route_planner.model.route_data import RouteData
from route_planner.model.route_info import RouteAlternative
from route_planner.service.route_service import RouteService

logger = logging.getLogger(__name__)


@dataclass
class RouteRequestTracker:
    """Monotonic generation counter for route requests."""

    generation: int = 0

    def next_token(self) -> int:
        """Start a new generation and return its token."""
        self.generation += 1
        return self.generation

    def is_current(self, token: int) -> bool:
        return token == self.generation


@dataclass
class PlannerContext:
    """Shared context/model for the state machine.

    Note: The 'state' field is managed by python-statemachine when this
    object is passed as the model.
    """

    # State managed by python-statemachine (model pattern)
    state: Optional[str] = None

    requests: RouteRequestTracker = field(default_factory=RouteRequestTracker)
    route: Optional[RouteData] = None
    alternatives: tuple[RouteAlternative, ...] = ()
    selected_index: Optional[int] = None
    error: str = ""

    def clear_route(self) -> None:
        self.route = None
        self.alternatives = ()
        self.selected_index = None

    def __repr__(self) -> str:
        return (
            f"PlannerContext(state={self.state}, generation={self.requests.generation}, "
            f"route={self.route!r}, alternatives={len(self.alternatives)}, error={self.error!r})"
        )


class RoutePlannerStateMachine(StateMachine):
    """State machine for the route planning workflow.

    See module docstring for the transition table.
    """

    idle = State("Idle", initial=True)
    calculating = State("Calculating")
    ready = State("Ready")
    failed = State("Failed")

    request_route = (
        idle.to(calculating) | ready.to(calculating) | failed.to(calculating) | calculating.to(calculating)
    )
    route_ready = calculating.to(ready)
    route_failed = calculating.to(failed)
    select_alternative = ready.to(ready)
    clear = idle.to(idle) | calculating.to(idle) | ready.to(idle) | failed.to(idle)

    def __init__(self, context: Optional[PlannerContext] = None, start_value: Optional[str] = None) -> None:
        """Initialize state machine with model pattern.

        Args:
            context: Shared context/model (creates new if None)
            start_value: Optional initial state value (for restoring state)
        """
        model = context or PlannerContext()
        super().__init__(model=model, start_value=start_value)

    @property
    def context(self) -> PlannerContext:
        return self.model

    # ==========================================================================
    # State Check Properties
    # ==========================================================================

    @property
    def is_idle(self) -> bool:
        return self.idle.is_active

    @property
    def is_calculating(self) -> bool:
        return self.calculating.is_active

    @property
    def is_ready(self) -> bool:
        return self.ready.is_active

    @property
    def is_failed(self) -> bool:
        return self.failed.is_active

    # ==========================================================================
    # Transition Actions
    # ==========================================================================

    def before_request_route(self) -> None:
        self.context.error = ""

    def before_route_ready(self, route: RouteData, alternatives: Sequence[RouteAlternative] = ()) -> None:
        """Replace the selection wholesale with the new result."""
        self.context.route = route
        self.context.alternatives = tuple(alternatives)
        self.context.selected_index = 0 if alternatives else None

    def before_route_failed(self, error: str) -> None:
        self.context.clear_route()
        self.context.error = error

    def before_select_alternative(self, index: int) -> None:
        self.context.route = self.context.alternatives[index].route
        self.context.selected_index = index

    def before_clear(self) -> None:
        self.context.requests.next_token()

    def on_enter_idle(self) -> None:
        self.context.clear_route()
        self.context.error = ""

    def after_transition(self, event: str, source: State, target: State) -> None:
        logger.info(f"[STATE] {source.name} --({event})--> {target.name}")

    # ==========================================================================
    # Request lifecycle
    # ==========================================================================

    def start_request(self) -> int:
        """Enter CALCULATING and return the token identifying this request."""
        token = self.context.requests.next_token()
        self.send("request_route")
        return token

    def _is_stale(self, token: int) -> bool:
        if self.context.requests.is_current(token):
            return False
        logger.warning(f"Ignoring stale result for request {token} (latest is {self.context.requests.generation})")
        return True

    def complete_request(
        self,
        token: int,
        route: RouteData,
        alternatives: Sequence[RouteAlternative] = (),
    ) -> bool:
        """Apply a route result if token is still current.

        Returns:
            True if the result was applied, False if it was stale.
        """
        if self._is_stale(token):
            return False
        return self.try_transition("route_ready", route=route, alternatives=alternatives)

    def fail_request(self, token: int, error: str) -> bool:
        """Record a failure if token is still current."""
        if self._is_stale(token):
            return False
        return self.try_transition("route_failed", error=error)

    def choose_alternative(self, index: int) -> bool:
        """Select one of the current alternatives by position."""
        if not 0 <= index < len(self.context.alternatives):
            logger.warning(f"No alternative at index {index} ({len(self.context.alternatives)} available)")
            return False
        return self.try_transition("select_alternative", index=index)

    # ==========================================================================
    # Utility Methods
    # ==========================================================================

    def get_state_name(self) -> str:
        return self.current_state.name

    def try_transition(self, event: str, **kwargs: Any) -> bool:
        """Attempt a transition, returning success/failure."""
        try:
            self.send(event, **kwargs)
            return True
        except TransitionNotAllowed:
            logger.warning(f"Transition '{event}' not allowed from {self.get_state_name()}")
            return False

    def __repr__(self) -> str:
        return f"RoutePlannerStateMachine(state={self.get_state_name()}, model={self.context!r})"

    @staticmethod
    def create() -> tuple["RoutePlannerStateMachine", PlannerContext]:
        """Factory method to create state machine with its context."""
        context = PlannerContext()
        return RoutePlannerStateMachine(context=context), context


class RoutePlanner:
    """Runs RouteService requests through the state machine.

    Example:
        planner = RoutePlanner(service)
        await planner.plan(start, end, TravelMode.WALKING)
        if planner.machine.is_ready:
            show(planner.context.route)
    """

    def __init__(self, service: RouteService, machine: Optional[RoutePlannerStateMachine] = None) -> None:
        self.service = service
        self.machine = machine or RoutePlannerStateMachine()

    @property
    def context(self) -> PlannerContext:
        return self.machine.context

    async def plan(
        self,
        start: Coordinate,
        end: Coordinate,
        mode: TravelMode,
        waypoints: Optional[Sequence[Coordinate]] = None,
    ) -> bool:
        """Calculate a route and select it if no newer request started meanwhile.

        Returns:
            True if this request's outcome (route or failure) was applied.

        Raises:
            Any exception other than RoutePlannerError, after recording it as
            the request's failure.
        """
        token = self.machine.start_request()
        try:
            route = await self.service.calculate_route(start, end, mode, waypoints=waypoints)
        except RoutePlannerError as e:
            logger.warning(f"Route request {token} failed: {e}")
            return self.machine.fail_request(token, error=str(e))
        except Exception as e:
            logger.exception(f"Route request {token} raised unexpectedly")
            self.machine.fail_request(token, error=str(e))
            raise
        return self.machine.complete_request(token, route=route)

    async def plan_alternatives(self, start: Coordinate, end: Coordinate, mode: TravelMode) -> bool:
        """Calculate alternatives and select the first one."""
        token = self.machine.start_request()
        try:
            alternatives = await self.service.get_route_alternatives(start, end, mode)
        except RoutePlannerError as e:
            logger.warning(f"Alternatives request {token} failed: {e}")
            return self.machine.fail_request(token, error=str(e))
        except Exception as e:
            logger.exception(f"Alternatives request {token} raised unexpectedly")
            self.machine.fail_request(token, error=str(e))
            raise
        if not alternatives:
            return self.machine.fail_request(token, error="No route alternatives found")
        return self.machine.complete_request(token, route=alternatives[0].route, alternatives=alternatives)

    def select_alternative(self, index: int) -> bool:
        return self.machine.choose_alternative(index)

    def clear(self) -> None:
        self.machine.send("clear")
