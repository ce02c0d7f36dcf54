"""Pytest configuration and fixtures."""
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from rotation.models.catalog import Catalog, SlotTime, Station
from rotation.models.schedule import Assignment, Schedule
from rotation.models.worker import Worker


@pytest.fixture
def sample_workers():
    """Twelve active workers: enough to cover the 8 regular default slots."""
    return [Worker(id=f"w{i}", name=f"Worker {i}") for i in range(12)]


@pytest.fixture
def small_catalog():
    """Two regular stations sharing meal times, plus a two-slot overflow."""
    return Catalog([
        Station("A", (SlotTime("m1", "i1"), SlotTime("m2", "i2"))),
        Station("B", (SlotTime("m1", "i3"),)),
        Station("C", (SlotTime("m1", "i1"), SlotTime("m2", "i2")), is_overflow=True),
    ])


@pytest.fixture
def example_catalog():
    """Catalog A: [(m1,i1)], B: [(m1,i2)] with B as overflow."""
    return Catalog([
        Station("A", (SlotTime("m1", "i1"),)),
        Station("B", (SlotTime("m1", "i2"),), is_overflow=True),
    ])


@pytest.fixture
def example_previous():
    """Previous period with w1 at A (m1, i1)."""
    return Schedule(assignments=[
        Assignment("A", SlotTime("m1", "i1"), Worker(id="w1", name="W1")),
    ])


@pytest.fixture
def roster_csv_path(tmp_path):
    """Small roster file with one inactive worker."""
    path = tmp_path / "roster.csv"
    path.write_text(
        "id,name,active\n"
        "1,ANA,1\n"
        "2,BRUNO,1\n"
        "3,CARLA,0\n"
        "4,DIEGO,true\n",
        encoding="utf-8",
    )
    return path
