"""
Manual Schedule Edits
=====================
Read-only views and single-step edits over a live schedule. Edits return a
new Schedule; the input is left untouched.
"""
from typing import Iterable, List, Optional

from rotation.models.catalog import DEFAULT_CATALOG, Catalog, SlotTime
from rotation.models.schedule import Assignment, Schedule
from rotation.models.worker import Worker
from rotation.utils.logging_setup import get_logger, log_function_call

logger = get_logger("rotation.solver.editing")


class InvalidManualEdit(ValueError):
    """Raised when a manual add/remove would break schedule invariants."""

    def __init__(self, message: str, station: str = "", slot: Optional[SlotTime] = None,
                 worker_id: Optional[str] = None):
        super().__init__(message)
        self.station = station
        self.slot = slot
        self.worker_id = worker_id


def available_workers(schedule: Schedule, roster: Iterable[Worker]) -> List[Worker]:
    """Active roster workers not holding any assignment in ``schedule``."""
    scheduled = schedule.worker_ids()
    return [w for w in roster if w.active and w.id not in scheduled]


def available_slots(
    schedule: Schedule,
    station: str,
    catalog: Catalog = DEFAULT_CATALOG,
) -> List[SlotTime]:
    """
    Catalog slots of ``station`` not held by a worker.

    The overflow station accepts any number of occupants per slot, so all of
    its slots are always available, even when every one is already held.
    This mirrors add_assignment, which never rejects an overflow slot as
    occupied.
    """
    slots = catalog.slots(station)
    if catalog.is_overflow(station):
        return list(slots)
    used = set(schedule.occupied_slots(station))
    return [s for s in slots if s not in used]


@log_function_call
def add_assignment(
    schedule: Schedule,
    station: str,
    slot: SlotTime,
    worker: Worker,
    catalog: Catalog = DEFAULT_CATALOG,
) -> Schedule:
    """Place ``worker`` at (station, slot); returns the edited copy."""
    if not catalog.has_key(station, slot):
        raise InvalidManualEdit(
            f"{station} {slot.label} is not in the station catalog",
            station, slot, worker.id,
        )
    if not worker.active:
        raise InvalidManualEdit(
            f"{worker.name} is inactive and cannot be scheduled",
            station, slot, worker.id,
        )

    current = schedule.find_worker(worker.id)
    if current is not None:
        raise InvalidManualEdit(
            f"{worker.name} is already scheduled at {current.station} {current.slot.label}",
            station, slot, worker.id,
        )
    if not catalog.is_overflow(station) and slot in schedule.occupied_slots(station):
        raise InvalidManualEdit(
            f"{station} {slot.label} is already occupied",
            station, slot, worker.id,
        )

    edited = schedule.copy()
    # Reuse an empty row for this key if one exists
    for a in edited.assignments:
        if a.key == (station, slot) and a.worker is None:
            a.worker = worker
            break
    else:
        edited.assignments.append(Assignment(station, slot, worker))

    if (station, slot) in edited.unfilled:
        edited.unfilled.remove((station, slot))

    logger.info(f"Added {worker.name} to {station} {slot.label}")
    return edited


@log_function_call
def remove_assignment(
    schedule: Schedule,
    station: str,
    slot: SlotTime,
    worker_id: str,
    catalog: Catalog = DEFAULT_CATALOG,
) -> Schedule:
    """Take ``worker_id`` off (station, slot); returns the edited copy."""
    edited = schedule.copy()
    for i, a in enumerate(edited.assignments):
        if a.key == (station, slot) and a.worker_id == worker_id:
            removed = edited.assignments.pop(i)
            break
    else:
        raise InvalidManualEdit(
            f"No assignment for worker {worker_id!r} at {station} {slot.label}",
            station, slot, worker_id,
        )

    if (
        station in catalog
        and not catalog.is_overflow(station)
        and (station, slot) not in edited.unfilled
    ):
        edited.unfilled.append((station, slot))

    logger.info(f"Removed {removed.worker.name} from {station} {slot.label}")
    return edited
