"""Tests for query helpers and manual edits."""
import pytest

from rotation.models.catalog import DEFAULT_CATALOG, SlotTime
from rotation.models.schedule import Assignment, Schedule
from rotation.models.worker import Worker
from rotation.solver.editing import (
    InvalidManualEdit,
    add_assignment,
    available_slots,
    available_workers,
    remove_assignment,
)
from rotation.solver.pickers import FirstPicker
from rotation.solver.rotation import generate_schedule

EMERG_1 = SlotTime("21:00", "00:00 AS 02:00")
EMERG_2 = SlotTime("21:30", "02:00 AS 04:00")
EMERG_3 = SlotTime("22:00", "04:00 AS 06:00")


@pytest.fixture
def ana():
    return Worker("1", "ANA")


@pytest.fixture
def bruno():
    return Worker("2", "BRUNO")


@pytest.fixture
def partial(ana):
    return Schedule(
        assignments=[Assignment("EMERGÊNCIA", EMERG_1, ana)],
        unfilled=[("EMERGÊNCIA", EMERG_2)],
    )


class TestAvailableWorkers:
    """Tests for available_workers."""

    def test_excludes_scheduled_and_inactive(self, partial, ana, bruno):
        carla = Worker("3", "CARLA", active=False)
        result = available_workers(partial, [ana, bruno, carla])
        assert result == [bruno]

    def test_empty_schedule_returns_active_roster(self, sample_workers):
        assert available_workers(Schedule(), sample_workers) == sample_workers

    def test_after_generation_nobody_is_available(self, sample_workers):
        schedule = generate_schedule(sample_workers)
        assert available_workers(schedule, sample_workers) == []


class TestAvailableSlots:
    """Tests for available_slots."""

    def test_occupied_slot_is_excluded(self, partial):
        assert available_slots(partial, "EMERGÊNCIA") == [EMERG_2, EMERG_3]

    def test_empty_row_does_not_occupy(self):
        s = Schedule(assignments=[Assignment("EMERGÊNCIA", EMERG_1, None)])
        assert available_slots(s, "EMERGÊNCIA") == [EMERG_1, EMERG_2, EMERG_3]

    def test_overflow_slots_always_available(self, sample_workers):
        schedule = generate_schedule(sample_workers, picker=FirstPicker())
        assert available_slots(schedule, "COBERTURA") == list(DEFAULT_CATALOG.slots("COBERTURA"))

    def test_fully_held_overflow_still_offered_and_accepts_add(self, sample_workers):
        slots = DEFAULT_CATALOG.slots("COBERTURA")
        schedule = Schedule(assignments=[
            Assignment("COBERTURA", slot, w) for slot, w in zip(slots, sample_workers)
        ])
        offered = available_slots(schedule, "COBERTURA")
        assert offered == list(slots)

        extra = sample_workers[len(slots)]
        edited = add_assignment(schedule, "COBERTURA", offered[0], extra)
        assert edited.find_worker(extra.id).slot == slots[0]

    def test_full_station_has_no_slots(self, sample_workers):
        schedule = generate_schedule(sample_workers)
        assert available_slots(schedule, "TOMOGRAFIA") == []

    def test_unknown_station_raises(self, partial):
        with pytest.raises(KeyError):
            available_slots(partial, "COZINHA")


class TestAddAssignment:
    """Tests for add_assignment."""

    def test_add_to_free_slot(self, partial, bruno):
        edited = add_assignment(partial, "EMERGÊNCIA", EMERG_2, bruno)
        assert edited.find_worker("2").key == ("EMERGÊNCIA", EMERG_2)
        assert ("EMERGÊNCIA", EMERG_2) not in edited.unfilled

    def test_input_schedule_unchanged(self, partial, bruno):
        add_assignment(partial, "EMERGÊNCIA", EMERG_2, bruno)
        assert partial.find_worker("2") is None
        assert partial.unfilled == [("EMERGÊNCIA", EMERG_2)]

    def test_reuses_empty_row(self, bruno):
        s = Schedule(assignments=[Assignment("EMERGÊNCIA", EMERG_1, None)])
        edited = add_assignment(s, "EMERGÊNCIA", EMERG_1, bruno)
        assert len(edited) == 1
        assert edited.assignments[0].worker == bruno

    def test_rejects_occupied_slot(self, partial, bruno):
        with pytest.raises(InvalidManualEdit, match="already occupied") as exc:
            add_assignment(partial, "EMERGÊNCIA", EMERG_1, bruno)
        assert exc.value.station == "EMERGÊNCIA"
        assert exc.value.worker_id == "2"

    def test_rejects_worker_already_scheduled(self, partial, ana):
        with pytest.raises(InvalidManualEdit, match="already scheduled"):
            add_assignment(partial, "CORREDOR", SlotTime("21:00", "01:00 AS 03:00"), ana)

    def test_rejects_inactive_worker(self, partial):
        with pytest.raises(InvalidManualEdit, match="inactive"):
            add_assignment(partial, "EMERGÊNCIA", EMERG_2, Worker("9", "ZÉ", active=False))

    def test_rejects_key_outside_catalog(self, partial, bruno):
        with pytest.raises(InvalidManualEdit, match="catalog"):
            add_assignment(partial, "TOMOGRAFIA", EMERG_1, bruno)
        with pytest.raises(InvalidManualEdit, match="catalog"):
            add_assignment(partial, "COZINHA", EMERG_1, bruno)

    def test_overflow_slot_can_be_shared(self, ana, bruno):
        slot = DEFAULT_CATALOG.overflow.slots[0]
        s = Schedule(assignments=[Assignment("COBERTURA", slot, ana)])
        edited = add_assignment(s, "COBERTURA", slot, bruno)
        assert [a.worker.id for a in edited.for_station("COBERTURA")] == ["1", "2"]

    def test_invalid_edit_is_a_value_error(self, partial, ana):
        with pytest.raises(ValueError):
            add_assignment(partial, "EMERGÊNCIA", EMERG_2, ana)


class TestRemoveAssignment:
    """Tests for remove_assignment."""

    def test_remove_frees_slot(self, partial, ana):
        edited = remove_assignment(partial, "EMERGÊNCIA", EMERG_1, ana.id)
        assert edited.find_worker(ana.id) is None
        assert EMERG_1 in available_slots(edited, "EMERGÊNCIA")
        assert ("EMERGÊNCIA", EMERG_1) in edited.unfilled
        assert len(partial) == 1

    def test_remove_then_add_elsewhere(self, partial, ana):
        edited = remove_assignment(partial, "EMERGÊNCIA", EMERG_1, ana.id)
        edited = add_assignment(edited, "EMERGÊNCIA", EMERG_3, ana)
        assert edited.find_worker(ana.id).slot == EMERG_3

    def test_remove_one_overflow_occupant(self, ana, bruno):
        slot = DEFAULT_CATALOG.overflow.slots[1]
        s = Schedule(assignments=[
            Assignment("COBERTURA", slot, ana),
            Assignment("COBERTURA", slot, bruno),
        ])
        edited = remove_assignment(s, "COBERTURA", slot, bruno.id)
        assert [a.worker.id for a in edited] == ["1"]
        assert edited.unfilled == []

    def test_remove_missing_raises(self, partial, bruno):
        with pytest.raises(InvalidManualEdit, match="No assignment"):
            remove_assignment(partial, "EMERGÊNCIA", EMERG_1, bruno.id)

    def test_remove_wrong_slot_raises(self, partial, ana):
        with pytest.raises(InvalidManualEdit):
            remove_assignment(partial, "EMERGÊNCIA", EMERG_2, ana.id)
