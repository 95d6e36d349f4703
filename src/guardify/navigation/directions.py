# directions.py
# Directions providers. Real route geometry comes from an external mapping
# service; SyntheticDirections builds simple walkable candidates for simulation.

import logging
import math
from typing import Callable, List

from .geo_utils import bearing_to_compass, calculate_bearing, get_turn_instruction, haversine_distance
from .models import GeoPoint, RouteCandidate, Step

logger = logging.getLogger(__name__)

# (source, destination) -> candidate routes, possibly empty
DirectionsProvider = Callable[[GeoPoint, GeoPoint], List[RouteCandidate]]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _interpolate(a: GeoPoint, b: GeoPoint, spacing_m: float) -> List[GeoPoint]:
    """Points from a to b inclusive, roughly spacing_m apart."""
    length = haversine_distance(a.lat, a.lon, b.lat, b.lon)
    segments = max(1, int(math.ceil(length / spacing_m)))
    points = [
        GeoPoint(a.lat + (b.lat - a.lat) * i / segments,
                 a.lon + (b.lon - a.lon) * i / segments)
        for i in range(segments)
    ]
    points.append(b)
    return points


def _leg_length(a: GeoPoint, b: GeoPoint) -> float:
    return haversine_distance(a.lat, a.lon, b.lat, b.lon)


def _build_route(name: str, waypoints: List[GeoPoint], spacing_m: float) -> RouteCandidate:
    """Polyline through the waypoints with one step per leg plus an arrival step."""
    polyline: List[GeoPoint] = []
    for i in range(len(waypoints) - 1):
        leg = _interpolate(waypoints[i], waypoints[i + 1], spacing_m)
        polyline.extend(leg if i == 0 else leg[1:])

    first_bearing = calculate_bearing(waypoints[0].lat, waypoints[0].lon,
                                      waypoints[1].lat, waypoints[1].lon)
    steps = [Step(
        instruction=f"Head {bearing_to_compass(first_bearing)} for {int(_leg_length(waypoints[0], waypoints[1]))} m.",
        location=waypoints[0],
    )]

    for i in range(1, len(waypoints) - 1):
        prev, here, nxt = waypoints[i - 1], waypoints[i], waypoints[i + 1]
        b1 = calculate_bearing(prev.lat, prev.lon, here.lat, here.lon)
        b2 = calculate_bearing(here.lat, here.lon, nxt.lat, nxt.lon)
        steps.append(Step(
            instruction=f"{get_turn_instruction(b2 - b1)}, then walk {int(_leg_length(here, nxt))} m.",
            location=here,
        ))

    steps.append(Step(instruction="You have reached your destination.", location=waypoints[-1]))
    return RouteCandidate(polyline=polyline, steps=steps, name=name)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

class SyntheticDirections:
    """
    Walking directions without a map: a direct leg and the two L-shaped
    alternatives around the source/destination box.

    Args:
        spacing_m:   Distance between sampled polyline points.
        min_route_m: Source and destination closer than this yield no routes.
    """

    def __init__(self, spacing_m: float = 25.0, min_route_m: float = 1.0) -> None:
        self.spacing_m = spacing_m
        self.min_route_m = min_route_m

    def __call__(self, source: GeoPoint, destination: GeoPoint) -> List[RouteCandidate]:
        if _leg_length(source, destination) < self.min_route_m:
            logger.warning("Source and destination coincide; no routes generated.")
            return []

        routes = [_build_route("direct", [source, destination], self.spacing_m)]

        lat_corner = GeoPoint(destination.lat, source.lon)
        lon_corner = GeoPoint(source.lat, destination.lon)
        for name, corner in (("latitude-first", lat_corner), ("longitude-first", lon_corner)):
            # Degenerate when source and destination share an axis
            if _leg_length(source, corner) < self.min_route_m or _leg_length(corner, destination) < self.min_route_m:
                continue
            routes.append(_build_route(name, [source, corner, destination], self.spacing_m))

        logger.info(f"Generated {len(routes)} candidate routes.")
        return routes
