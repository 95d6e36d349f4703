# nav_logger.py
# Handles all file I/O for the navigation system.
# Saves the chosen route and per-update navigation events as JSON.

import json
import logging
import os
from datetime import datetime
from typing import Optional

from .errors import NavigationError
from .models import LocationStatus, RouteCandidate
from .nav_config import NavConfig

# Standard Python logger, configure at app entry point if needed
logger = logging.getLogger(__name__)


class NavLogger:
    """
    Persists route data and navigation events to JSON files.

    Args:
        config: NavConfig instance for file paths and directories.
    """

    def __init__(self, config: Optional[NavConfig] = None) -> None:
        self.config = config or NavConfig()
        os.makedirs(self.config.log_dir, exist_ok=True)

    # ------------------------------------------------------------------
    # Route persistence
    # ------------------------------------------------------------------

    def save_route(self, route: RouteCandidate, score: Optional[float] = None) -> bool:
        """
        Serialize the selected route to JSON.

        Returns:
            True on success, False on failure.
        """
        filepath = self.config.route_filepath
        try:
            data = {
                "saved_at": datetime.now().isoformat(),
                "score": score,
                "point_count": route.point_count,
                "step_count": len(route.steps),
                "route": route.to_dict(),
            }
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            logger.info(f"Route saved to {filepath} ({len(route.steps)} steps).")
            return True
        except OSError as e:
            logger.error(f"Failed to save route to {filepath}: {e}")
            return False

    def load_route(self, filepath: Optional[str] = None) -> Optional[RouteCandidate]:
        """
        Load a previously saved route from JSON.

        Returns:
            RouteCandidate, or None if loading failed.
        """
        path = filepath or self.config.route_filepath
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            route = RouteCandidate.from_dict(data["route"])
            logger.info(f"Route loaded from {path} ({len(route.steps)} steps).")
            return route
        except (OSError, KeyError, ValueError, NavigationError) as e:
            logger.error(f"Failed to load route from {path}: {e}")
            return None

    # ------------------------------------------------------------------
    # Session event logging
    # ------------------------------------------------------------------

    def log_event(self, status: LocationStatus) -> None:
        """Append a single location update to the session log file."""
        entry = {
            "timestamp": datetime.now().isoformat(),
            "lat": status.position.lat,
            "lon": status.position.lon,
            "within_geofence": status.within_geofence,
            "state": status.state.value,
            "instruction": status.instruction,
        }
        try:
            with open(self.config.session_filepath, "a", encoding="utf-8") as f:
                f.write(json.dumps(entry, ensure_ascii=False) + "\n")
        except OSError as e:
            logger.error(f"Failed to write event log: {e}")
