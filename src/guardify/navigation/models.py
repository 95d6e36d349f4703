# models.py
# Shared data structures and enums used across the navigation modules.

import math
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .errors import InvalidRoute, MalformedCoordinate


# ---------------------------------------------------------------------------
# Coordinate
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GeoPoint:
    """Immutable geographic coordinate in decimal degrees."""
    lat: float
    lon: float

    def __post_init__(self) -> None:
        for name in ("lat", "lon"):
            value = getattr(self, name)
            if isinstance(value, (bool, str, bytes)):
                raise MalformedCoordinate(f"Coordinate must be numeric, got {name}={value!r}")
            try:
                value = float(value)
            except (TypeError, ValueError):
                raise MalformedCoordinate(f"Coordinate must be numeric, got {name}={value!r}") from None
            # Frozen dataclass: store the plain float
            object.__setattr__(self, name, value)
        if math.isnan(self.lat) or math.isnan(self.lon):
            raise MalformedCoordinate(f"Coordinate contains NaN: ({self.lat}, {self.lon})")
        if not -90.0 <= self.lat <= 90.0:
            raise MalformedCoordinate(f"Latitude out of range: {self.lat}")
        if not -180.0 <= self.lon <= 180.0:
            raise MalformedCoordinate(f"Longitude out of range: {self.lon}")

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lon": self.lon}

    @staticmethod
    def from_dict(d: dict) -> "GeoPoint":
        return GeoPoint(d["lat"], d["lon"])


# ---------------------------------------------------------------------------
# Tracked person
# ---------------------------------------------------------------------------

@dataclass
class Person:
    """A tracked person. The id is generated once and survives position updates."""
    location: GeoPoint
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def move_to(self, location: GeoPoint) -> None:
        self.location = location


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@dataclass
class Step:
    """A single navigation instruction anchored at the point where it begins."""
    instruction: str
    location: GeoPoint

    def to_dict(self) -> dict:
        return {"instruction": self.instruction, "location": self.location.to_dict()}

    @staticmethod
    def from_dict(d: dict) -> "Step":
        return Step(
            instruction=d["instruction"],
            location=GeoPoint.from_dict(d["location"]),
        )


@dataclass
class RouteCandidate:
    """One walkable path from source to destination, as returned by a directions provider."""
    polyline: List[GeoPoint]
    steps: List[Step] = field(default_factory=list)
    name: Optional[str] = None

    def __post_init__(self) -> None:
        self.polyline = list(self.polyline)
        self.steps = list(self.steps)
        if not self.polyline:
            raise InvalidRoute("Route polyline must contain at least one point.")

    @property
    def point_count(self) -> int:
        return len(self.polyline)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "polyline": [p.to_dict() for p in self.polyline],
            "steps": [s.to_dict() for s in self.steps],
        }

    @staticmethod
    def from_dict(d: dict) -> "RouteCandidate":
        return RouteCandidate(
            polyline=[GeoPoint.from_dict(p) for p in d["polyline"]],
            steps=[Step.from_dict(s) for s in d.get("steps", [])],
            name=d.get("name"),
        )


@dataclass(frozen=True)
class ScoredRoute:
    """A candidate paired with its proximity score. Computed per selection, never persisted."""
    route: RouteCandidate
    score: float


# ---------------------------------------------------------------------------
# Navigation status
# ---------------------------------------------------------------------------

class NavigationState(Enum):
    IDLE       = "idle"
    NAVIGATING = "navigating"


@dataclass
class LocationStatus:
    """Returned by CampusNavigator.update() on every location fix."""
    position: GeoPoint
    within_geofence: bool
    state: NavigationState
    instruction: Optional[str] = None
    instruction_changed: bool = False
