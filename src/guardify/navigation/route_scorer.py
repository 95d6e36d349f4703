# route_scorer.py
# Scores a route by how closely it passes tracked people.
# Pure function of its inputs; O(points x people).
#
# Callers scoring many long routes against a large crowd should bucket the
# people spatially first (grid or tree) and pass only the nearby subset.

import logging
from typing import Iterable, Optional

import numpy as np

from .errors import InvalidRoute
from .geo_utils import haversine_matrix
from .models import Person, RouteCandidate
from .nav_config import NavConfig

logger = logging.getLogger(__name__)


def proximity_weights(distances_m: np.ndarray, full_credit_m: float, zero_credit_m: float) -> np.ndarray:
    """
    Map distances to per-pair contributions.

    <= full_credit_m           -> 1.0
    full_credit_m..zero_credit -> linear falloff from 1.0 to 0.0
    >  zero_credit_m           -> 0.0
    """
    distances_m = np.asarray(distances_m, dtype=float)
    falloff = 1.0 - (distances_m - full_credit_m) / (zero_credit_m - full_credit_m)
    return np.where(
        distances_m <= full_credit_m,
        1.0,
        np.where(distances_m <= zero_credit_m, falloff, 0.0),
    )


def score_route(
    route: RouteCandidate,
    people: Iterable[Person],
    config: Optional[NavConfig] = None,
) -> float:
    """
    Normalised proximity score of a route.

    Every polyline point is compared with every person; contributions are
    summed and divided by the number of polyline points so that densely
    sampled or longer routes do not accumulate higher totals.

    Args:
        route:  Candidate route; its polyline must not be empty.
        people: Tracked people.
        config: NavConfig for the credit radii.

    Returns:
        Score >= 0.0. An empty people set always scores 0.0.

    Raises:
        InvalidRoute: the polyline is empty.
    """
    config = config or NavConfig()
    if not route.polyline:
        raise InvalidRoute("Cannot score a route with an empty polyline.")

    people = list(people)
    if not people:
        return 0.0

    route_lats = np.fromiter((p.lat for p in route.polyline), dtype=float, count=route.point_count)
    route_lons = np.fromiter((p.lon for p in route.polyline), dtype=float, count=route.point_count)
    people_lats = np.fromiter((q.location.lat for q in people), dtype=float, count=len(people))
    people_lons = np.fromiter((q.location.lon for q in people), dtype=float, count=len(people))

    distances = haversine_matrix(route_lats, route_lons, people_lats, people_lons)
    weights = proximity_weights(distances, config.full_credit_radius_m, config.zero_credit_radius_m)

    score = float(weights.sum()) / route.point_count
    logger.debug(f"Scored route {route.name or '<unnamed>'}: {score:.4f} "
                 f"({route.point_count} points, {len(people)} people)")
    return score
