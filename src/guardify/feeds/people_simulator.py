# people_simulator.py
# Stand-in for the people feed: random walkers around the geofence centre.

from typing import List, Optional

import numpy as np

from ..navigation.geo_region import GeoRegion
from ..navigation.models import GeoPoint, Person

DEFAULT_POPULATION = 10
DEFAULT_JITTER_DEG = 0.00005


class PeopleSimulator:
    """
    Places people uniformly within a quarter span of the region centre and
    jitters each of them on every step().

    Args:
        region:     Geofence whose centre and span seed the positions.
        population: Number of simulated people.
        jitter_deg: Max per-axis movement per step, in degrees.
        seed:       Optional RNG seed for reproducible runs.
    """

    def __init__(
        self,
        region: GeoRegion,
        population: int = DEFAULT_POPULATION,
        jitter_deg: float = DEFAULT_JITTER_DEG,
        seed: Optional[int] = None,
    ) -> None:
        self.region = region
        self.jitter_deg = jitter_deg
        self._rng = np.random.default_rng(seed)
        self.people: List[Person] = self._generate_initial(population)

    def _generate_initial(self, population: int) -> List[Person]:
        lat_offsets = self._rng.uniform(-self.region.lat_span / 4, self.region.lat_span / 4, population)
        lon_offsets = self._rng.uniform(-self.region.lon_span / 4, self.region.lon_span / 4, population)
        return [
            Person(location=GeoPoint(self.region.center.lat + float(dlat),
                                     self.region.center.lon + float(dlon)))
            for dlat, dlon in zip(lat_offsets, lon_offsets)
        ]

    def step(self) -> List[Person]:
        """Move every person by a small random offset and return the people."""
        deltas = self._rng.uniform(-self.jitter_deg, self.jitter_deg, (len(self.people), 2))
        for person, (dlat, dlon) in zip(self.people, deltas):
            person.move_to(GeoPoint(person.location.lat + float(dlat),
                                    person.location.lon + float(dlon)))
        return list(self.people)
