"""
Property-Based Tests with Hypothesis
====================================
Invariants of the rotation generator for arbitrary rosters, previous
schedules and catalogs.
"""
from collections import Counter

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from rotation.models.catalog import DEFAULT_CATALOG, Catalog, SlotTime, Station
from rotation.models.schedule import Assignment, Schedule
from rotation.models.worker import Worker
from rotation.solver.eligibility import PreviousLookup
from rotation.solver.pickers import FirstPicker, RandomPicker
from rotation.solver.rotation import generate_schedule

MEALS = ["21:00", "21:30", "22:00"]


@st.composite
def rosters(draw, max_size=20):
    n = draw(st.integers(min_value=0, max_value=max_size))
    actives = draw(st.lists(st.booleans(), min_size=n, max_size=n))
    return [Worker(id=f"w{i}", name=f"W{i}", active=a) for i, a in enumerate(actives)]


@st.composite
def catalogs(draw):
    n_regular = draw(st.integers(min_value=0, max_value=4))
    stations = []
    for s in range(n_regular):
        meals = draw(st.lists(st.sampled_from(MEALS), min_size=1, max_size=3))
        stations.append(Station(f"S{s}", tuple(SlotTime(m, f"i{j}") for j, m in enumerate(meals))))
    n_overflow = draw(st.integers(min_value=1, max_value=3))
    stations.append(Station(
        "OVERFLOW", tuple(SlotTime(MEALS[j % 3], f"o{j}") for j in range(n_overflow)), is_overflow=True,
    ))
    return Catalog(stations)


@st.composite
def previous_schedules(draw, catalog, roster):
    """Random placements of some roster workers on catalog keys."""
    keys = catalog.keys()
    chosen = draw(st.lists(st.sampled_from(roster), unique_by=lambda w: w.id)) if roster else []
    return Schedule(assignments=[
        Assignment(*draw(st.sampled_from(keys)), w) for w in chosen
    ])


@st.composite
def scenarios(draw):
    catalog = draw(catalogs())
    roster = draw(rosters())
    previous = draw(previous_schedules(catalog, roster))
    seed = draw(st.integers(min_value=0, max_value=2**16))
    return catalog, roster, previous, seed


class TestRotationProperties:
    """Invariants hold for every input."""

    @given(scenarios())
    @settings(max_examples=150, suppress_health_check=[HealthCheck.too_slow])
    def test_every_active_worker_placed_exactly_once(self, scenario):
        catalog, roster, previous, seed = scenario
        schedule = generate_schedule(roster, previous, catalog, RandomPicker(seed=seed))

        placed = Counter(a.worker.id for a in schedule.assignments)
        assert set(placed) == {w.id for w in roster if w.active}
        assert all(n == 1 for n in placed.values())

    @given(scenarios())
    @settings(max_examples=150, suppress_health_check=[HealthCheck.too_slow])
    def test_regular_keys_unique_and_in_catalog(self, scenario):
        catalog, roster, previous, seed = scenario
        schedule = generate_schedule(roster, previous, catalog, RandomPicker(seed=seed))

        for a in schedule.assignments:
            assert catalog.has_key(a.station, a.slot)
        regular = Counter(a.key for a in schedule.assignments if not catalog.is_overflow(a.station))
        assert all(n == 1 for n in regular.values())

    @given(scenarios())
    @settings(max_examples=150, suppress_health_check=[HealthCheck.too_slow])
    def test_regular_placements_never_repeat(self, scenario):
        catalog, roster, previous, seed = scenario
        schedule = generate_schedule(roster, previous, catalog, RandomPicker(seed=seed))
        lookup = PreviousLookup.from_schedule(previous)

        for a in schedule.assignments:
            if catalog.is_overflow(a.station):
                continue
            assert not lookup.was_at_station(a.worker.id, a.station)
            assert not lookup.had_meal(a.worker.id, a.slot.meal)

    @given(scenarios())
    @settings(max_examples=150, suppress_health_check=[HealthCheck.too_slow])
    def test_filled_and_unfilled_partition_regular_keys(self, scenario):
        catalog, roster, previous, seed = scenario
        schedule = generate_schedule(roster, previous, catalog, RandomPicker(seed=seed))
        if schedule.is_empty:
            return

        filled = {a.key for a in schedule.assignments if not catalog.is_overflow(a.station)}
        regular_keys = {k for k in catalog.keys() if not catalog.is_overflow(k[0])}
        assert filled | set(schedule.unfilled) == regular_keys
        assert not filled & set(schedule.unfilled)

    @given(catalogs(), st.integers(min_value=0, max_value=20))
    def test_overflow_round_robin(self, catalog, n):
        roster = [Worker(f"w{i}", f"W{i}") for i in range(n)]
        schedule = generate_schedule(roster, None, catalog, FirstPicker())

        overflow = [a for a in schedule.assignments if catalog.is_overflow(a.station)]
        slots = catalog.overflow.slots
        assert [a.slot for a in overflow] == [slots[i % len(slots)] for i in range(len(overflow))]

    @given(catalogs(), st.integers(min_value=0, max_value=20))
    def test_coverage_without_history(self, catalog, extra):
        roster = [Worker(f"w{i}", f"W{i}") for i in range(catalog.total_regular_slots + extra)]
        schedule = generate_schedule(roster, None, catalog, RandomPicker(seed=extra))

        assert schedule.unfilled == []
        overflow = [a for a in schedule.assignments if catalog.is_overflow(a.station)]
        assert len(overflow) == extra

    @given(scenarios())
    def test_empty_roster_gives_empty_schedule(self, scenario):
        catalog, _, previous, _ = scenario
        assert generate_schedule([], previous, catalog).is_empty


class TestDefaultCatalogProperties:
    """Two consecutive generations on the reference catalog."""

    @given(st.integers(min_value=0, max_value=30), st.integers(min_value=0, max_value=2**16))
    def test_consecutive_periods(self, n, seed):
        roster = [Worker(f"w{i}", f"W{i}") for i in range(n)]
        first = generate_schedule(roster, None, DEFAULT_CATALOG, RandomPicker(seed=seed))
        second = generate_schedule(roster, first, DEFAULT_CATALOG, RandomPicker(seed=seed + 1))

        assert len(second) == n
        assert second.worker_ids() == {w.id for w in roster}
