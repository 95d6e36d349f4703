# nav_tracker.py
# State machine that tracks a user's position against the active route.
# Call start() once a route is chosen, then on_location_update() on every fix.

from typing import Optional

from .geo_utils import haversine_distance
from .models import GeoPoint, NavigationState, RouteCandidate, Step


class NavigationTracker:
    """
    Stateful nearest-instruction tracker for a single navigation session.

    Not thread-safe: feed it from one location-update source at a time.

    Usage:
        tracker = NavigationTracker()
        tracker.start(route)

        # Inside GPS loop:
        instruction = tracker.on_location_update(current_point)
    """

    def __init__(self) -> None:
        self._state: NavigationState = NavigationState.IDLE
        self._route: Optional[RouteCandidate] = None
        self._instruction: Optional[str] = None
        self._position: Optional[GeoPoint] = None

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self, route: RouteCandidate) -> None:
        """Begin navigating a route. Replaces any route already active."""
        self._route = route
        self._instruction = None
        self._state = NavigationState.NAVIGATING
        if self._position is not None:
            self._recompute()

    def stop(self) -> None:
        """End navigation. Legal from any state."""
        self._state = NavigationState.IDLE
        self._route = None
        self._instruction = None

    # ------------------------------------------------------------------
    # Read-only properties
    # ------------------------------------------------------------------

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is NavigationState.NAVIGATING

    @property
    def active_route(self) -> Optional[RouteCandidate]:
        return self._route

    @property
    def current_instruction(self) -> Optional[str]:
        return self._instruction

    @property
    def position(self) -> Optional[GeoPoint]:
        return self._position

    # ------------------------------------------------------------------
    # Core method, call on every GPS update
    # ------------------------------------------------------------------

    def on_location_update(self, position: GeoPoint) -> Optional[str]:
        """
        Record the new position and, while navigating, pick the nearest step.

        Args:
            position: Current geographic position.

        Returns:
            The current instruction, or None when idle or the route has no steps.
        """
        self._position = position
        if self._state is NavigationState.NAVIGATING:
            self._recompute()
        return self._instruction

    def _recompute(self) -> None:
        step = nearest_step(self._route, self._position)
        if step is not None:
            self._instruction = step.instruction


def nearest_step(route: RouteCandidate, position: GeoPoint) -> Optional[Step]:
    """Step whose anchor is closest to position; earliest step wins ties."""
    best: Optional[Step] = None
    best_dist = float("inf")
    for step in route.steps:
        dist = haversine_distance(
            position.lat, position.lon,
            step.location.lat, step.location.lon,
        )
        if dist < best_dist:
            best_dist = dist
            best = step
    return best
