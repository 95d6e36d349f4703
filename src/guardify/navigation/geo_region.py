# geo_region.py
# Rectangular lat/lon geofence. Degrees are treated as flat, unprojected axes.

import math
from dataclasses import dataclass
from typing import Tuple

from .errors import MalformedCoordinate
from .models import GeoPoint

DEFAULT_TOLERANCE_DEG = 1e-6


@dataclass(frozen=True)
class GeoRegion:
    """
    Axis-aligned box of ``center ± span / 2`` in each axis.

    Usage:
        campus = GeoRegion(GeoPoint(40.0367, -75.3496), 0.02, 0.02)
        campus.contains(GeoPoint(40.03, -75.35))   # True
    """
    center: GeoPoint
    lat_span: float
    lon_span: float

    def __post_init__(self) -> None:
        for name, value in (("lat_span", self.lat_span), ("lon_span", self.lon_span)):
            if math.isnan(value) or value < 0:
                raise MalformedCoordinate(f"{name} must be a non-negative number, got {value}")

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """(min_lat, max_lat, min_lon, max_lon)"""
        half_lat = self.lat_span / 2.0
        half_lon = self.lon_span / 2.0
        return (
            self.center.lat - half_lat,
            self.center.lat + half_lat,
            self.center.lon - half_lon,
            self.center.lon + half_lon,
        )

    def contains(self, point: GeoPoint) -> bool:
        """True iff the point lies in the closed latitude and longitude intervals."""
        min_lat, max_lat, min_lon, max_lon = self.bounds
        return min_lat <= point.lat <= max_lat and min_lon <= point.lon <= max_lon

    def approximately_equal(self, other: "GeoRegion", tolerance: float = DEFAULT_TOLERANCE_DEG) -> bool:
        """Change detection helper; every component must differ by less than tolerance."""
        return (
            abs(self.center.lat - other.center.lat) < tolerance
            and abs(self.center.lon - other.center.lon) < tolerance
            and abs(self.lat_span - other.lat_span) < tolerance
            and abs(self.lon_span - other.lon_span) < tolerance
        )


def contains(region: GeoRegion, point: GeoPoint) -> bool:
    return region.contains(point)


def approximately_equal(region_a: GeoRegion, region_b: GeoRegion,
                        tolerance: float = DEFAULT_TOLERANCE_DEG) -> bool:
    return region_a.approximately_equal(region_b, tolerance)
