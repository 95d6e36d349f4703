import pytest

from guardify.navigation.errors import EmptyCandidateSet
from guardify.navigation.models import GeoPoint, Person, RouteCandidate
from guardify.navigation.route_selector import score_candidates, select_best, select_best_scored

SOURCE = GeoPoint(40.0367, -75.3496)
DEST = GeoPoint(40.0400, -75.3496)


@pytest.fixture
def routes():
    direct = RouteCandidate(polyline=[SOURCE, GeoPoint(40.0383, -75.3496), DEST], name="direct")
    east = RouteCandidate(polyline=[SOURCE, GeoPoint(40.0383, -75.3450), DEST], name="east")
    west = RouteCandidate(polyline=[SOURCE, GeoPoint(40.0383, -75.3540), DEST], name="west")
    return [direct, east, west]


def test_empty_candidates_fail():
    with pytest.raises(EmptyCandidateSet):
        select_best([], [])


def test_route_passing_people_wins(routes):
    crowd = [Person(location=GeoPoint(40.0383, -75.3450)) for _ in range(3)]
    assert select_best(routes, crowd).name == "east"


def test_identical_copies_return_first():
    base = RouteCandidate(polyline=[SOURCE, DEST])
    copies = [RouteCandidate(polyline=list(base.polyline)) for _ in range(4)]
    people = [Person(location=SOURCE)]
    assert select_best(copies, people) is copies[0]


def test_no_people_falls_back_to_first(routes):
    best = select_best_scored(routes, [])
    assert best.route is routes[0]
    assert best.score == 0.0


def test_scores_preserve_input_order(routes):
    crowd = [Person(location=GeoPoint(40.0383, -75.3540))]
    scored = score_candidates(routes, crowd)
    assert [s.route.name for s in scored] == ["direct", "east", "west"]
    assert scored[2].score > scored[0].score
    assert scored[1].score == 0.0
