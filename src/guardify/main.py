# main.py
# Entry point: simulates a walk across campus feeding positions into CampusNavigator.
# In production, replace the simulated walk with the device location feed and
# the simulator with PeoplePoller against the live people endpoint.

import argparse
import logging
import time
from typing import List

from .config import ServiceConfig
from .feeds.people_feed import PeopleFeedClient, PeoplePoller, PeopleRegistry
from .feeds.people_simulator import PeopleSimulator
from .navigation.directions import SyntheticDirections
from .navigation.models import GeoPoint
from .navigation.nav_config import NavConfig
from .navigation.navigator import CampusNavigator

# ------------------------------------------------------------------
# Logging setup: configure once here, all modules inherit
# ------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("guardify.main")


def simulated_walk(start: GeoPoint, end: GeoPoint, fixes: int = 12) -> List[GeoPoint]:
    """Evenly spaced fixes from start to end."""
    return [
        GeoPoint(start.lat + (end.lat - start.lat) * i / (fixes - 1),
                 start.lon + (end.lon - start.lon) * i / (fixes - 1))
        for i in range(fixes)
    ]


def parse_args():
    parser = argparse.ArgumentParser(description="Campus safe-walk simulation")
    parser.add_argument("--destination", default="Mendel Hall", help="Campus destination name")
    parser.add_argument("--live-people", action="store_true", help="Poll the people feed instead of simulating")
    parser.add_argument("--speak", action="store_true", help="Announce instructions with text-to-speech")
    parser.add_argument("--log-dir", default="logs", help="Directory for route and session logs")
    parser.add_argument("--seed", type=int, default=None, help="People simulator seed")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    service_config = ServiceConfig.from_env()
    nav_config = NavConfig(log_dir=args.log_dir)

    # 1. Boot system
    nav = CampusNavigator(nav_config, directions=SyntheticDirections())
    simulator = PeopleSimulator(nav.geofence, seed=args.seed)
    poller = None
    if args.live_people:
        poller = PeoplePoller(
            PeopleFeedClient.from_config(service_config),
            PeopleRegistry(),
            interval_s=service_config.people_poll_interval_s,
            on_update=nav.update_people,
        )
        poller.start()
    else:
        nav.update_people(simulator.people)

    announcer = None
    if args.speak:
        from .speech.announcer import Announcer
        announcer = Announcer()

    # 2. Locate the user and request a route
    origin = nav_config.geofence_center
    nav.update(origin)
    success, msg = nav.plan_route_to(args.destination)
    logger.info(msg)
    if not success:
        return

    _, first = nav.start_navigation()
    print(f"[Nav] {first}")

    print("\n--- Location Loop Active ---")

    # 3. Location loop, replace with real location feed in production
    for position in simulated_walk(origin, nav.destination):
        if not args.live_people:
            nav.update_people(simulator.step())
        status = nav.update(position)

        fence = "inside" if status.within_geofence else "OUTSIDE"
        print(f"  GPS ({position.lat:.5f}, {position.lon:.5f}) [{fence}] → {status.instruction}")
        if status.instruction_changed and announcer:
            announcer.speak(status.instruction)

        # Simulate location poll interval (remove in real use)
        time.sleep(0.05)

    nav.stop_navigation()
    if poller:
        poller.stop()
    if announcer:
        announcer.close()

    print("\n--- Session complete ---")
    print(f"    Log files written to: {nav_config.log_dir}/")


if __name__ == "__main__":
    main()
