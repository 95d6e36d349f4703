# navigator.py
# Public entry point for campus navigation.
# Owns no scoring or tracking logic; composes the specialist modules and
# turns their errors into user-facing messages.

import logging
from typing import Iterable, List, Optional, Tuple

from .directions import DirectionsProvider, SyntheticDirections
from .errors import EmptyCandidateSet, NavigationError
from .geo_region import GeoRegion
from .models import GeoPoint, LocationStatus, NavigationState, Person, ScoredRoute
from .nav_config import NavConfig
from .nav_logger import NavLogger
from .nav_tracker import NavigationTracker
from .route_selector import select_best_scored

logger = logging.getLogger(__name__)


class CampusNavigator:
    """
    High-level navigation facade.

    Typical lifecycle:
        nav = CampusNavigator()
        nav.update(GeoPoint(40.036, -75.349))        # every location fix
        nav.update_people(people)                    # every people-feed refresh
        nav.plan_route_to("Mendel Hall")
        nav.start_navigation()

    Args:
        config:     Optional NavConfig; defaults to NavConfig().
        directions: Callable returning candidate routes between two points.
        nav_logger: Optional NavLogger; one is built from config if omitted.
    """

    def __init__(
        self,
        config: Optional[NavConfig] = None,
        directions: Optional[DirectionsProvider] = None,
        nav_logger: Optional[NavLogger] = None,
    ) -> None:
        self.config = config or NavConfig()
        self.geofence = GeoRegion(
            self.config.geofence_center,
            self.config.geofence_lat_span,
            self.config.geofence_lon_span,
        )

        self._directions = directions or SyntheticDirections()
        self._tracker = NavigationTracker()
        self._logger = nav_logger or NavLogger(self.config)

        self._people: List[Person] = []
        self._planned: Optional[ScoredRoute] = None
        self._destination: Optional[GeoPoint] = None
        self._within_geofence: bool = True

    # ------------------------------------------------------------------
    # Feeds
    # ------------------------------------------------------------------

    def update_people(self, people: Iterable[Person]) -> None:
        """Replace the people snapshot used for route scoring."""
        self._people = list(people)

    def set_geofence(self, region: GeoRegion) -> bool:
        """
        Replace the geofence unless it matches the current one within
        config.region_tolerance_deg.

        Returns:
            True if the geofence changed.
        """
        if self.geofence.approximately_equal(region, self.config.region_tolerance_deg):
            return False
        self.geofence = region
        logger.info(f"Geofence moved to {region.center} (span {region.lat_span}, {region.lon_span}).")
        return True

    def update(self, position: GeoPoint) -> LocationStatus:
        """
        Process a new location fix.

        Args:
            position: Current geographic coordinate.

        Returns:
            LocationStatus with geofence flag, state and current instruction.
        """
        previous = self._tracker.current_instruction
        was_within = self._within_geofence
        self._within_geofence = self.geofence.contains(position)
        if was_within and not self._within_geofence:
            logger.warning(f"Left the campus geofence at {position}.")
        elif not was_within and self._within_geofence:
            logger.info(f"Re-entered the campus geofence at {position}.")

        instruction = self._tracker.on_location_update(position)
        status = LocationStatus(
            position=position,
            within_geofence=self._within_geofence,
            state=self._tracker.state,
            instruction=instruction,
            instruction_changed=instruction is not None and instruction != previous,
        )
        if self.config.log_events:
            self._logger.log_event(status)
        return status

    # ------------------------------------------------------------------
    # Route planning
    # ------------------------------------------------------------------

    def plan_route(self, destination: GeoPoint) -> Tuple[bool, str]:
        """
        Request candidates from the directions provider and keep the safest one.

        Returns:
            (success, message)
        """
        origin = self._tracker.position
        if origin is None:
            return False, "Current location unknown. Cannot plan a route."

        candidates = self._directions(origin, destination)
        try:
            best = select_best_scored(candidates, self._people, self.config)
        except EmptyCandidateSet:
            logger.warning(f"No route found from {origin} to {destination}.")
            return False, "No route found to that destination."
        except NavigationError as e:
            logger.error(f"Route selection failed: {e}")
            return False, f"Route could not be planned: {e}"

        self._planned = best
        self._destination = destination
        self._logger.save_route(best.route, best.score)
        return True, f"Route ready. {len(best.route.steps)} steps, safety score {best.score:.2f}."

    def plan_route_to(self, name: str) -> Tuple[bool, str]:
        """Plan a route to a named campus destination."""
        destination = self.config.destinations.get(name)
        if destination is None:
            return False, f"Unknown destination '{name}'."
        return self.plan_route(destination)

    def list_destinations(self) -> List[str]:
        return sorted(self.config.destinations)

    # ------------------------------------------------------------------
    # Navigation control
    # ------------------------------------------------------------------

    def start_navigation(self) -> Tuple[bool, str]:
        if self._planned is None:
            return False, "No route planned."
        self._tracker.start(self._planned.route)
        logger.info("Navigation started.")
        return True, self._tracker.current_instruction or "Navigation started."

    def stop_navigation(self) -> None:
        """End the current navigation session and forget the planned route."""
        self._tracker.stop()
        self._planned = None
        self._destination = None
        logger.info("Navigation stopped by user.")

    # ------------------------------------------------------------------
    # Convenience read-only properties
    # ------------------------------------------------------------------

    @property
    def state(self) -> NavigationState:
        return self._tracker.state

    @property
    def is_active(self) -> bool:
        return self._tracker.is_active

    @property
    def current_instruction(self) -> Optional[str]:
        return self._tracker.current_instruction

    @property
    def planned_route(self) -> Optional[ScoredRoute]:
        return self._planned

    @property
    def destination(self) -> Optional[GeoPoint]:
        return self._destination

    @property
    def within_geofence(self) -> bool:
        return self._within_geofence

    @property
    def people(self) -> List[Person]:
        return list(self._people)
