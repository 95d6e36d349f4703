from .people_feed import PeopleEntry, PeopleFeedClient, PeoplePoller, PeopleRegistry, parse_people_payload
from .people_simulator import PeopleSimulator

__all__ = [
    "PeopleEntry",
    "PeopleFeedClient",
    "PeoplePoller",
    "PeopleRegistry",
    "PeopleSimulator",
    "parse_people_payload",
]
