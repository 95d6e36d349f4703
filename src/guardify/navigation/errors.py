# errors.py
# Typed failures raised by the navigation core.
# A score of 0.0 is a real result, so failures are never signalled by sentinels.


class NavigationError(Exception):
    """Base class for navigation core errors."""


class EmptyCandidateSet(NavigationError):
    """Route selection was asked to choose among zero candidates."""


class InvalidRoute(NavigationError):
    """A route polyline has no points."""


class MalformedCoordinate(NavigationError, ValueError):
    """A latitude, longitude or span is NaN or outside its valid range."""
