"""Schedule and assignment models."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

import pandas as pd

from .catalog import SlotTime, StationKey
from .worker import Worker

LOG_COLUMNS = ["station", "worker_id", "employee_name", "meal_time", "interval_time"]


@dataclass
class Assignment:
    """A single (station, slot) placement, possibly without a worker."""
    station: str
    slot: SlotTime
    worker: Optional[Worker] = None

    @property
    def key(self) -> StationKey:
        return (self.station, self.slot)

    @property
    def worker_id(self) -> Optional[str]:
        return self.worker.id if self.worker is not None else None

    @property
    def is_filled(self) -> bool:
        return self.worker is not None

    def to_record(self) -> Dict[str, str]:
        """Row in the audit log layout."""
        return {
            "station": self.station,
            "worker_id": self.worker.id if self.worker else "",
            "employee_name": self.worker.name if self.worker else "",
            "meal_time": self.slot.meal,
            "interval_time": self.slot.interval,
        }


@dataclass
class Schedule:
    """Complete result of one generation cycle, plus any manual edits."""

    assignments: List[Assignment] = field(default_factory=list)
    # Regular (station, slot) keys that nobody could fill
    unfilled: List[StationKey] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.assignments)

    def __iter__(self):
        return iter(self.assignments)

    @property
    def is_empty(self) -> bool:
        return not self.assignments

    def filled(self) -> List[Assignment]:
        return [a for a in self.assignments if a.is_filled]

    def worker_ids(self) -> Set[str]:
        """Ids of every worker holding an assignment."""
        return {a.worker.id for a in self.assignments if a.worker is not None}

    def workers(self) -> List[Worker]:
        return [a.worker for a in self.assignments if a.worker is not None]

    def for_station(self, station: str) -> List[Assignment]:
        return [a for a in self.assignments if a.station == station]

    def occupied_slots(self, station: str) -> List[SlotTime]:
        """Slots of ``station`` currently held by a worker."""
        return [a.slot for a in self.assignments if a.station == station and a.is_filled]

    def find_worker(self, worker_id: str) -> Optional[Assignment]:
        for a in self.assignments:
            if a.worker is not None and a.worker.id == worker_id:
                return a
        return None

    def copy(self) -> "Schedule":
        """Shallow copy: new lists, same Assignment/Worker values."""
        return Schedule(
            assignments=[Assignment(a.station, a.slot, a.worker) for a in self.assignments],
            unfilled=list(self.unfilled),
        )

    def to_records(self) -> List[Dict[str, str]]:
        return [a.to_record() for a in self.assignments]

    def to_dataframe(self) -> pd.DataFrame:
        """Convert assignments to a DataFrame in the audit log layout."""
        if not self.assignments:
            return pd.DataFrame(columns=LOG_COLUMNS)
        return pd.DataFrame(self.to_records(), columns=LOG_COLUMNS)

    def to_matrix(self) -> pd.DataFrame:
        """Station × slot grid of worker names (overflow slots joined with '/')."""
        df = self.to_dataframe()
        if df.empty:
            return pd.DataFrame()

        df = df.assign(slot=df["meal_time"] + " / " + df["interval_time"])
        return df.pivot_table(
            index="station",
            columns="slot",
            values="employee_name",
            aggfunc=lambda x: "/".join(str(v) for v in x if v),
            fill_value="",
            sort=False,
        )

    def summary(self) -> Dict[str, Any]:
        """Get summary dictionary for display."""
        per_station: Dict[str, int] = {}
        for a in self.filled():
            per_station[a.station] = per_station.get(a.station, 0) + 1
        return {
            "assignments": len(self.filled()),
            "workers": len(self.worker_ids()),
            "unfilled": len(self.unfilled),
            "per_station": per_station,
        }
