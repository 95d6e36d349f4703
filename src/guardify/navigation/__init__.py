from .errors import EmptyCandidateSet, InvalidRoute, MalformedCoordinate, NavigationError
from .geo_region import GeoRegion
from .models import GeoPoint, LocationStatus, NavigationState, Person, RouteCandidate, ScoredRoute, Step
from .nav_config import CAMPUS_DESTINATIONS, NavConfig
from .nav_tracker import NavigationTracker
from .navigator import CampusNavigator
from .route_scorer import score_route
from .route_selector import score_candidates, select_best, select_best_scored

__all__ = [
    "CAMPUS_DESTINATIONS",
    "CampusNavigator",
    "EmptyCandidateSet",
    "GeoPoint",
    "GeoRegion",
    "InvalidRoute",
    "LocationStatus",
    "MalformedCoordinate",
    "NavConfig",
    "NavigationError",
    "NavigationState",
    "NavigationTracker",
    "Person",
    "RouteCandidate",
    "ScoredRoute",
    "Step",
    "score_candidates",
    "score_route",
    "select_best",
    "select_best_scored",
]
