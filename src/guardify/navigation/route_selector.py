# route_selector.py
# Picks the best-scoring route among the candidates a directions provider returned.

import logging
from typing import Iterable, List, Optional, Sequence

from .errors import EmptyCandidateSet
from .models import Person, RouteCandidate, ScoredRoute
from .nav_config import NavConfig
from .route_scorer import score_route

logger = logging.getLogger(__name__)


def score_candidates(
    candidates: Sequence[RouteCandidate],
    people: Iterable[Person],
    config: Optional[NavConfig] = None,
) -> List[ScoredRoute]:
    """Score every candidate, preserving input order."""
    people = list(people)
    return [ScoredRoute(route=c, score=score_route(c, people, config)) for c in candidates]


def select_best_scored(
    candidates: Sequence[RouteCandidate],
    people: Iterable[Person],
    config: Optional[NavConfig] = None,
) -> ScoredRoute:
    """
    Return the highest-scoring candidate together with its score.

    Ties resolve to the earliest candidate in input order.

    Raises:
        EmptyCandidateSet: no candidates were given.
    """
    if not candidates:
        raise EmptyCandidateSet("No route candidates to choose from.")

    scored = score_candidates(candidates, people, config)
    best = scored[0]
    for entry in scored[1:]:
        if entry.score > best.score:
            best = entry

    logger.info(f"Selected route {best.route.name or '<unnamed>'} with score {best.score:.3f} "
                f"out of {len(scored)} candidates")
    return best


def select_best(
    candidates: Sequence[RouteCandidate],
    people: Iterable[Person],
    config: Optional[NavConfig] = None,
) -> RouteCandidate:
    return select_best_scored(candidates, people, config).route
