import math

import pytest

from guardify.navigation.errors import InvalidRoute
from guardify.navigation.geo_utils import EARTH_RADIUS_M
from guardify.navigation.models import GeoPoint, Person, RouteCandidate
from guardify.navigation.nav_config import NavConfig
from guardify.navigation.route_scorer import proximity_weights, score_route

# Metres per degree of latitude along a meridian
M_PER_DEG_LAT = EARTH_RADIUS_M * math.pi / 180

ORIGIN = GeoPoint(40.0367, -75.3496)


def north_of(point: GeoPoint, metres: float) -> GeoPoint:
    return GeoPoint(point.lat + metres / M_PER_DEG_LAT, point.lon)


def test_empty_people_scores_zero():
    route = RouteCandidate(polyline=[ORIGIN, north_of(ORIGIN, 100)])
    assert score_route(route, []) == 0.0


def test_colocated_person_scores_full_credit():
    route = RouteCandidate(polyline=[ORIGIN])
    assert score_route(route, [Person(location=ORIGIN)]) == pytest.approx(1.0)


@pytest.mark.parametrize("metres,expected", [
    (0.0, 1.0),
    (50.0, 1.0),
    (125.0, 0.5),
    (200.0, 0.0),
    (350.0, 0.0),
])
def test_single_point_falloff(metres, expected):
    route = RouteCandidate(polyline=[ORIGIN])
    person = Person(location=north_of(ORIGIN, metres))
    assert score_route(route, [person]) == pytest.approx(expected, abs=1e-6)


def test_score_is_normalised_by_point_count():
    # Person sits on the first point only; the other point is far away
    far = north_of(ORIGIN, 1000)
    route = RouteCandidate(polyline=[ORIGIN, far])
    assert score_route(route, [Person(location=ORIGIN)]) == pytest.approx(0.5)


def test_contributions_sum_across_people():
    route = RouteCandidate(polyline=[ORIGIN])
    people = [Person(location=ORIGIN), Person(location=north_of(ORIGIN, 125))]
    assert score_route(route, people) == pytest.approx(1.5, abs=1e-6)


def test_far_route_scores_zero_regardless_of_length():
    people = [Person(location=ORIGIN)]
    start = north_of(ORIGIN, 500)
    short = RouteCandidate(polyline=[start, north_of(start, 50)])
    long = RouteCandidate(polyline=[north_of(start, 25 * i) for i in range(40)])
    assert score_route(short, people) == 0.0
    assert score_route(long, people) == 0.0


def test_moving_person_away_never_increases_score():
    route = RouteCandidate(polyline=[north_of(ORIGIN, 30 * i) for i in range(6)])
    previous = None
    for metres in range(0, 600, 20):
        score = score_route(route, [Person(location=north_of(ORIGIN, -metres))])
        if previous is not None:
            assert score <= previous + 1e-12
        previous = score


def test_custom_radii():
    config = NavConfig(full_credit_radius_m=10.0, zero_credit_radius_m=20.0)
    route = RouteCandidate(polyline=[ORIGIN])
    person = Person(location=north_of(ORIGIN, 15))
    assert score_route(route, [person], config) == pytest.approx(0.5, abs=1e-6)


def test_proximity_weights_vectorised():
    weights = proximity_weights([0.0, 50.0, 80.0, 200.0, 201.0], 50.0, 200.0)
    assert list(weights) == pytest.approx([1.0, 1.0, 0.8, 0.0, 0.0])


def test_empty_polyline_is_rejected():
    with pytest.raises(InvalidRoute):
        RouteCandidate(polyline=[])
