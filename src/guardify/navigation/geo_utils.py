# geo_utils.py
# Pure mathematical / geographic helper functions.
# No side effects, no imports from other project modules.

import math

import numpy as np


EARTH_RADIUS_M = 6_371_000.0


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Great-circle distance between two points in metres.

    Args:
        lat1, lon1: Origin in decimal degrees.
        lat2, lon2: Destination in decimal degrees.

    Returns:
        Distance in metres.
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    # Rounding can push a just past 1 for antipodal pairs
    a = min(1.0, max(0.0, a))
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def haversine_matrix(lats1: np.ndarray, lons1: np.ndarray,
                     lats2: np.ndarray, lons2: np.ndarray) -> np.ndarray:
    """
    Pairwise great-circle distances in metres.

    Args:
        lats1, lons1: 1-D arrays of length N in decimal degrees.
        lats2, lons2: 1-D arrays of length M in decimal degrees.

    Returns:
        (N, M) array where [i, j] is the distance from point i to point j.
    """
    rlat1 = np.radians(np.asarray(lats1, dtype=float))[:, None]
    rlon1 = np.radians(np.asarray(lons1, dtype=float))[:, None]
    rlat2 = np.radians(np.asarray(lats2, dtype=float))[None, :]
    rlon2 = np.radians(np.asarray(lons2, dtype=float))[None, :]

    a = (
        np.sin((rlat2 - rlat1) / 2) ** 2
        + np.cos(rlat1) * np.cos(rlat2) * np.sin((rlon2 - rlon1) / 2) ** 2
    )
    a = np.clip(a, 0.0, 1.0)
    return EARTH_RADIUS_M * 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))


def calculate_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Forward azimuth (bearing) from point 1 to point 2 in degrees [0, 360).
    """
    rlat1, rlon1 = math.radians(lat1), math.radians(lon1)
    rlat2, rlon2 = math.radians(lat2), math.radians(lon2)
    d_lon = rlon2 - rlon1
    y = math.sin(d_lon) * math.cos(rlat2)
    x = math.cos(rlat1) * math.sin(rlat2) - math.sin(rlat1) * math.cos(rlat2) * math.cos(d_lon)
    return (math.degrees(math.atan2(y, x)) + 360) % 360


def bearing_to_compass(bearing: float) -> str:
    directions = ["north", "northeast", "east", "southeast",
                  "south", "southwest", "west", "northwest"]
    return directions[round(bearing / 45) % 8]


def get_turn_instruction(bearing_diff: float) -> str:
    """
    Human-readable turn instruction derived from the change in bearing.

    Args:
        bearing_diff: Difference between consecutive bearings in degrees.

    Returns:
        Turn instruction string.
    """
    diff = (bearing_diff + 180) % 360 - 180
    if diff > 45:
        return "Turn sharp right"
    elif diff > 10:
        return "Turn right"
    elif diff < -45:
        return "Turn sharp left"
    elif diff < -10:
        return "Turn left"
    return "Go straight"
