# nav_config.py
# All tuneable navigation constants in one place.
# Pass a NavConfig instance to every module that needs settings.

import os
from dataclasses import dataclass, field
from typing import Dict

from .models import GeoPoint


# ---------------------------------------------------------------------------
# Campus constants
# ---------------------------------------------------------------------------

CAMPUS_CENTER: GeoPoint = GeoPoint(40.0367, -75.3496)
CAMPUS_SPAN_DEG: float = 0.02

CAMPUS_DESTINATIONS: Dict[str, GeoPoint] = {
    "Dougherty Hall": GeoPoint(40.03547, -75.34111),
    "Mendel Hall":    GeoPoint(40.0365, -75.3450),
    "Spit":           GeoPoint(40.03799, -75.3431),
    "Rudolph Hall":   GeoPoint(40.04162, -75.34312),
    "Connely Center": GeoPoint(40.03578, -75.34023),
    "Bartley Hall":   GeoPoint(40.03467, -75.33824),
}


# ---------------------------------------------------------------------------
# Main config
# ---------------------------------------------------------------------------

@dataclass
class NavConfig:
    # Geofence
    geofence_center: GeoPoint = CAMPUS_CENTER
    geofence_lat_span: float = CAMPUS_SPAN_DEG
    geofence_lon_span: float = CAMPUS_SPAN_DEG
    region_tolerance_deg: float = 1e-6

    # Route scoring
    full_credit_radius_m: float = 50.0     # person counts fully within this distance
    zero_credit_radius_m: float = 200.0    # contribution falls linearly to zero here

    # Logging
    log_dir: str = "."                     # directory for saved JSON files
    route_filename: str = "active_route.json"
    session_filename: str = "nav_session.jsonl"
    log_events: bool = True

    destinations: Dict[str, GeoPoint] = field(default_factory=lambda: dict(CAMPUS_DESTINATIONS))

    def __post_init__(self) -> None:
        if self.zero_credit_radius_m <= self.full_credit_radius_m:
            raise ValueError("zero_credit_radius_m must be greater than full_credit_radius_m")

    @property
    def route_filepath(self) -> str:
        return os.path.join(self.log_dir, self.route_filename)

    @property
    def session_filepath(self) -> str:
        return os.path.join(self.log_dir, self.session_filename)
