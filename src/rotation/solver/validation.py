"""
Schedule Validation
===================
Audit a schedule (generated or hand-edited) against the catalog, the roster
and the previous period.
"""
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from rotation.models.catalog import Catalog, SlotTime
from rotation.models.schedule import Schedule
from rotation.models.worker import Worker
from rotation.solver.eligibility import PreviousLookup
from rotation.utils.logging_setup import get_logger, log_constraint

logger = get_logger("rotation.solver.validation")


@dataclass
class Violation:
    """Single violation with details."""
    type: str  # "unknown_key", "duplicate_key", "double_booked", "inactive_worker", "repeat_station", "repeat_meal", "unfilled_slot"
    severity: str  # "critical", "warning", "info"
    message: str
    station: str = ""
    slot: Optional[SlotTime] = None
    worker: str = ""


@dataclass
class ValidationResult:
    """Validation metrics for a schedule."""
    unknown_keys: int = 0       # (station, slot) not in catalog
    duplicate_keys: int = 0     # Regular key held more than once
    double_booked: int = 0      # Worker holding more than one assignment
    inactive_workers: int = 0   # Placed worker flagged inactive in roster
    repeat_station: int = 0     # Same regular station as last period
    repeat_meal: int = 0        # Same meal time as last period on a regular station
    unfilled_slots: int = 0     # Regular keys with no worker

    violations: List[Violation] = field(default_factory=list)

    def add_violation(self, v: Violation):
        self.violations.append(v)

    def as_dict(self) -> Dict[str, int]:
        return {
            "unknown_keys": self.unknown_keys,
            "duplicate_keys": self.duplicate_keys,
            "double_booked": self.double_booked,
            "inactive_workers": self.inactive_workers,
            "repeat_station": self.repeat_station,
            "repeat_meal": self.repeat_meal,
            "unfilled_slots": self.unfilled_slots,
        }

    @property
    def has_critical_issues(self) -> bool:
        """Broken invariants: keys outside the catalog, duplicates, double bookings."""
        return (
            self.unknown_keys > 0
            or self.duplicate_keys > 0
            or self.double_booked > 0
            or self.inactive_workers > 0
        )

    def get_critical_violations(self) -> List[Violation]:
        return [v for v in self.violations if v.severity == "critical"]

    def get_warnings(self) -> List[Violation]:
        return [v for v in self.violations if v.severity == "warning"]


def validate_schedule(
    schedule: Schedule,
    catalog: Catalog,
    previous: Optional[Schedule] = None,
    roster: Optional[Iterable[Worker]] = None,
) -> ValidationResult:
    """
    Validate a schedule and count violations.

    Args:
        schedule: The schedule to check
        catalog: Station catalog the schedule was built from
        previous: Last period's schedule (enables the repeat checks)
        roster: Current roster (enables the inactive-worker check)

    Returns:
        ValidationResult with all metrics
    """
    result = ValidationResult()

    # 1. Keys must come from the catalog
    for a in schedule.assignments:
        if not catalog.has_key(a.station, a.slot):
            result.unknown_keys += 1
            result.add_violation(Violation(
                type="unknown_key",
                severity="critical",
                message=f"{a.station} {a.slot.label} is not a catalog slot",
                station=a.station,
                slot=a.slot,
                worker=a.worker.name if a.worker else "",
            ))

    # 2. One worker per regular key
    key_counts = Counter(
        a.key for a in schedule.filled() if a.station in catalog and not catalog.is_overflow(a.station)
    )
    for (station, slot), n in key_counts.items():
        if n > 1:
            result.duplicate_keys += 1
            result.add_violation(Violation(
                type="duplicate_key",
                severity="critical",
                message=f"{station} {slot.label} held by {n} workers",
                station=station,
                slot=slot,
            ))

    # 3. One assignment per worker
    worker_counts = Counter(a.worker.id for a in schedule.filled())
    names = {a.worker.id: a.worker.name for a in schedule.filled()}
    for worker_id, n in worker_counts.items():
        if n > 1:
            result.double_booked += 1
            result.add_violation(Violation(
                type="double_booked",
                severity="critical",
                message=f"{names[worker_id]} holds {n} assignments",
                worker=names[worker_id],
            ))

    # 4. Only active workers
    if roster is not None:
        inactive = {w.id for w in roster if not w.active}
        for a in schedule.filled():
            if a.worker.id in inactive or not a.worker.active:
                result.inactive_workers += 1
                result.add_violation(Violation(
                    type="inactive_worker",
                    severity="critical",
                    message=f"{a.worker.name} is inactive",
                    station=a.station,
                    slot=a.slot,
                    worker=a.worker.name,
                ))

    # 5. No repeats from last period on regular stations
    if previous is not None:
        lookup = PreviousLookup.from_schedule(previous)
        for a in schedule.filled():
            if a.station not in catalog or catalog.is_overflow(a.station):
                continue
            if lookup.was_at_station(a.worker.id, a.station):
                result.repeat_station += 1
                result.add_violation(Violation(
                    type="repeat_station",
                    severity="warning",
                    message=f"{a.worker.name} repeats station {a.station}",
                    station=a.station,
                    slot=a.slot,
                    worker=a.worker.name,
                ))
            if lookup.had_meal(a.worker.id, a.slot.meal):
                result.repeat_meal += 1
                result.add_violation(Violation(
                    type="repeat_meal",
                    severity="warning",
                    message=f"{a.worker.name} repeats meal time {a.slot.meal}",
                    station=a.station,
                    slot=a.slot,
                    worker=a.worker.name,
                ))

    # 6. Coverage of regular slots
    for station in catalog.regular_stations:
        occupied = set(schedule.occupied_slots(station.name))
        for slot in station.slots:
            if slot not in occupied:
                result.unfilled_slots += 1
                result.add_violation(Violation(
                    type="unfilled_slot",
                    severity="info",
                    message=f"{station.name} {slot.label} has no worker",
                    station=station.name,
                    slot=slot,
                ))

    log_constraint(logger, "catalog keys", result.unknown_keys == 0, f"{result.unknown_keys} unknown")
    log_constraint(logger, "unique regular keys", result.duplicate_keys == 0, f"{result.duplicate_keys} duplicated")
    log_constraint(logger, "no double booking", result.double_booked == 0, f"{result.double_booked} workers")
    log_constraint(logger, "active workers only", result.inactive_workers == 0, f"{result.inactive_workers} inactive")
    if previous is not None:
        log_constraint(
            logger, "no repeats", result.repeat_station + result.repeat_meal == 0,
            f"station={result.repeat_station}, meal={result.repeat_meal}",
        )
    logger.info(f"Validation: {result.as_dict()}")
    return result
