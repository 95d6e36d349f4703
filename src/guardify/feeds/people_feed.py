# people_feed.py
# HTTP client and background poller for the people-location feed.
# Payload: JSON array of {"latitude": float, "longitude": float[, "id": str]}.

import logging
import threading
from typing import Callable, Dict, List, Optional

import requests

from ..config import ServiceConfig
from ..errors import FeedError
from ..navigation.errors import MalformedCoordinate
from ..navigation.models import GeoPoint, Person

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Payload
# ---------------------------------------------------------------------------

class PeopleEntry:
    """One decoded feed record. external_id is None when upstream sends none."""

    __slots__ = ["location", "external_id"]

    def __init__(self, location: GeoPoint, external_id: Optional[str] = None) -> None:
        self.location = location
        self.external_id = external_id


def parse_people_payload(payload) -> List[PeopleEntry]:
    """
    Decode the feed body.

    Raises:
        FeedError: the body is not a list of coordinate objects.
    """
    if not isinstance(payload, list):
        raise FeedError(f"Expected a JSON array, got {type(payload).__name__}")

    entries: List[PeopleEntry] = []
    for item in payload:
        try:
            location = GeoPoint(float(item["latitude"]), float(item["longitude"]))
        except (KeyError, TypeError, ValueError, MalformedCoordinate) as e:
            raise FeedError(f"Malformed people entry {item!r}: {e}") from e
        external_id = item.get("id")
        entries.append(PeopleEntry(location, str(external_id) if external_id is not None else None))
    return entries


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------

class PeopleFeedClient:
    """
    Talks to the people feed over HTTP and returns normalised entries.

    Args:
        url:     Feed endpoint (GET).
        timeout: Seconds to wait for a response.
    """

    def __init__(self, url: str, timeout: float = 5.0) -> None:
        self.url = url
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: ServiceConfig) -> "PeopleFeedClient":
        return cls(config.people_url, timeout=config.http_timeout_s)

    def fetch(self) -> List[PeopleEntry]:
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.RequestException as e:
            raise FeedError(f"Error fetching people feed: {e}") from e
        except ValueError as e:
            raise FeedError(f"Error decoding people feed: {e}") from e
        return parse_people_payload(payload)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class PeopleRegistry:
    """
    Current set of tracked people.

    Entries without an upstream id replace the collection wholesale with
    freshly generated ids. Entries that carry an id are merged, so the same
    Person object survives across refreshes.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._people: List[Person] = []
        self._by_external_id: Dict[str, Person] = {}

    def replace(self, entries: List[PeopleEntry]) -> List[Person]:
        with self._lock:
            people: List[Person] = []
            by_external_id: Dict[str, Person] = {}
            for entry in entries:
                if entry.external_id is None:
                    people.append(Person(location=entry.location))
                    continue
                person = self._by_external_id.get(entry.external_id)
                if person is None:
                    person = Person(location=entry.location, id=entry.external_id)
                else:
                    person.move_to(entry.location)
                by_external_id[entry.external_id] = person
                people.append(person)
            self._people = people
            self._by_external_id = by_external_id
            return list(people)

    def snapshot(self) -> List[Person]:
        with self._lock:
            return list(self._people)

    def __len__(self) -> int:
        with self._lock:
            return len(self._people)


# ---------------------------------------------------------------------------
# Poller
# ---------------------------------------------------------------------------

class PeoplePoller:
    """
    Background thread that refreshes a PeopleRegistry at a fixed interval.

    Usage:
        poller = PeoplePoller(client, registry, on_update=nav.update_people)
        poller.start()
        ...
        poller.stop()
    """

    def __init__(
        self,
        client: PeopleFeedClient,
        registry: PeopleRegistry,
        interval_s: float = 1.0,
        on_update: Optional[Callable[[List[Person]], None]] = None,
    ) -> None:
        self.client = client
        self.registry = registry
        self.interval_s = interval_s
        self.on_update = on_update
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def poll_once(self) -> bool:
        """Fetch once. Returns False when the poll failed and was skipped."""
        try:
            entries = self.client.fetch()
        except FeedError as e:
            logger.warning(f"People poll skipped: {e}")
            return False
        people = self.registry.replace(entries)
        if self.on_update:
            self.on_update(people)
        return True

    def start(self) -> None:
        if self.is_running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="people-poller", daemon=True)
        self._thread.start()
        logger.info(f"People poller started ({self.interval_s:.1f}s interval).")

    def stop(self, timeout: float = 5.0) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            self._thread = None
        logger.info("People poller stopped.")

    def _run(self) -> None:
        while not self._stop.is_set():
            self.poll_once()
            self._stop.wait(self.interval_s)
