"""
Anti-Repeat Eligibility
=======================
A worker may take a regular slot only if, in the previous schedule, they were
neither on the same station nor on any slot with the same meal time.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from rotation.models.catalog import SlotTime
from rotation.models.schedule import Schedule
from rotation.models.worker import Worker


@dataclass
class PreviousLookup:
    """Where each worker sat in the previous schedule, indexed by worker id."""
    stations: Dict[str, Set[str]] = field(default_factory=dict)
    meals: Dict[str, Set[str]] = field(default_factory=dict)

    @classmethod
    def from_schedule(cls, previous: Optional[Schedule]) -> "PreviousLookup":
        lookup = cls()
        if previous is None:
            return lookup
        for a in previous.assignments:
            if a.worker is None:
                continue
            lookup.stations.setdefault(a.worker.id, set()).add(a.station)
            lookup.meals.setdefault(a.worker.id, set()).add(a.slot.meal)
        return lookup

    def __contains__(self, worker_id: object) -> bool:
        return worker_id in self.stations

    def was_at_station(self, worker_id: str, station: str) -> bool:
        return station in self.stations.get(worker_id, ())

    def had_meal(self, worker_id: str, meal: str) -> bool:
        return meal in self.meals.get(worker_id, ())


def is_eligible(worker: Worker, station: str, slot: SlotTime, previous: PreviousLookup) -> bool:
    """True if placing ``worker`` at (station, slot) repeats nothing from last period."""
    if previous.was_at_station(worker.id, station):
        return False
    if previous.had_meal(worker.id, slot.meal):
        return False
    return True


def eligible_workers(
    pool: List[Worker],
    station: str,
    slot: SlotTime,
    previous: PreviousLookup,
) -> List[Worker]:
    """Filter ``pool`` down to eligible candidates, keeping pool order."""
    return [w for w in pool if is_eligible(w, station, slot, previous)]
