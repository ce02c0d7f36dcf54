"""
Rotation Schedule Generator
===========================
Two-phase assignment of workers to station slots.

Phase 1 walks every regular station slot in catalog order and places one
eligible worker (see ``eligibility``) chosen by the picker. Slots with no
eligible worker stay empty. Phase 2 sends every worker still unplaced to the
overflow station, cycling through its slots round-robin.
"""
from typing import Iterable, List, Optional

from rotation.models.catalog import DEFAULT_CATALOG, Catalog
from rotation.models.schedule import Assignment, Schedule
from rotation.models.worker import Worker
from rotation.solver.eligibility import PreviousLookup, eligible_workers
from rotation.solver.pickers import Picker, RandomPicker
from rotation.utils.logging_setup import SchedulerLogger, get_logger, log_function_call

logger = get_logger("rotation.solver.rotation")


def _active_pool(workers: Iterable[Worker]) -> List[Worker]:
    """Active workers, first occurrence of each id wins."""
    pool: List[Worker] = []
    seen = set()
    for w in workers:
        if not w.active:
            logger.debug(f"Skipping inactive worker {w.name} ({w.id})")
            continue
        if w.id in seen:
            logger.warning(f"Duplicate worker id {w.id!r} ignored ({w.name})")
            continue
        seen.add(w.id)
        pool.append(w)
    return pool


def fill_regular_slots(
    pool: List[Worker],
    catalog: Catalog,
    previous: PreviousLookup,
    picker: Picker,
    slog: Optional[SchedulerLogger] = None,
) -> Schedule:
    """
    Phase 1: place one eligible worker per regular slot.

    Placed workers are removed from ``pool`` in place.
    """
    slog = slog or SchedulerLogger("rotation.solver.rotation")
    schedule = Schedule()

    for station in catalog.regular_stations:
        slog.enter(station.name)
        for slot in station.slots:
            candidates = eligible_workers(pool, station.name, slot, previous)
            if not candidates:
                schedule.unfilled.append((station.name, slot))
                slog.constraint(
                    f"{station.name} {slot.label}", False,
                    f"no eligible worker among {len(pool)} available"
                )
                continue

            worker = picker.pick(candidates)
            pool.remove(worker)
            schedule.assignments.append(Assignment(station.name, slot, worker))
            slog.detail(slot.label, f"{worker.name} (1 of {len(candidates)} eligible)")
        slog.exit(station.name)

    return schedule


def distribute_overflow(
    remaining: List[Worker],
    catalog: Catalog,
    slog: Optional[SchedulerLogger] = None,
) -> List[Assignment]:
    """Phase 2: the i-th remaining worker gets overflow slot ``i mod k``."""
    slog = slog or SchedulerLogger("rotation.solver.rotation")
    overflow = catalog.overflow
    k = len(overflow.slots)

    assignments = []
    for i, worker in enumerate(remaining):
        slot = overflow.slots[i % k]
        assignments.append(Assignment(overflow.name, slot, worker))
        slog.detail(f"{overflow.name} {slot.label}", worker.name)
    return assignments


@log_function_call
def generate_schedule(
    workers: Iterable[Worker],
    previous: Optional[Schedule] = None,
    catalog: Catalog = DEFAULT_CATALOG,
    picker: Optional[Picker] = None,
) -> Schedule:
    """
    Generate a new schedule.

    Args:
        workers: Roster; inactive workers and repeated ids are ignored
        previous: Last period's schedule, or None for a first run
        catalog: Stations and slot times to fill
        picker: Selection strategy among eligible workers
            (defaults to a fresh uniform RandomPicker)

    Returns:
        Schedule with regular placements first, overflow placements last,
        and the regular keys left empty in ``unfilled``.
    """
    picker = picker if picker is not None else RandomPicker()
    slog = SchedulerLogger("rotation.solver.rotation")

    pool = _active_pool(workers)
    if not pool:
        logger.info("No active workers: returning an empty schedule")
        return Schedule()

    lookup = PreviousLookup.from_schedule(previous)
    slog.phase("ROTATION")
    slog.step(
        f"{len(pool)} workers, {catalog.total_regular_slots} regular slots, "
        f"previous schedule: {len(previous) if previous else 0} assignments"
    )

    slog.step("Phase 1: regular stations")
    schedule = fill_regular_slots(pool, catalog, lookup, picker, slog)

    slog.step(f"Phase 2: {len(pool)} workers to {catalog.overflow.name}")
    schedule.assignments.extend(distribute_overflow(pool, catalog, slog))

    summary = schedule.summary()
    logger.info(
        f"Schedule generated: {summary['assignments']} assignments, "
        f"{summary['unfilled']} regular slots unfilled"
    )
    if schedule.unfilled:
        logger.warning(
            "Unfilled slots: "
            + ", ".join(f"{st} {slot.label}" for st, slot in schedule.unfilled)
        )
    return schedule
