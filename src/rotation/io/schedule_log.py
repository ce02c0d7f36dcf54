"""
Schedule Audit Log
==================
Flat CSV rows, one per assignment, in the layout the history store keeps:
station, worker_id, employee_name, meal_time, interval_time.

Reading a log back gives the previous-period schedule for the next run.
"""
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

import pandas as pd

from rotation.models.catalog import SlotTime
from rotation.models.schedule import LOG_COLUMNS, Assignment, Schedule
from rotation.models.worker import Worker
from rotation.utils.logging_setup import get_logger

logger = get_logger("rotation.io.schedule_log")

REQUIRED_COLUMNS = ["station", "employee_name", "meal_time", "interval_time"]


def schedule_to_log_frame(schedule: Schedule) -> pd.DataFrame:
    """One row per assignment; empty assignments keep blank worker columns."""
    return schedule.to_dataframe()


def export_schedule_log(schedule: Schedule, path: Union[str, Path]) -> Path:
    """Write the audit rows of ``schedule`` to ``path``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    schedule_to_log_frame(schedule).to_csv(path, index=False)
    logger.info(f"Schedule log written: {path} ({len(schedule)} rows)")
    return path


def load_schedule_log(
    source: Union[str, Path, pd.DataFrame],
    roster: Optional[Iterable[Worker]] = None,
) -> Schedule:
    """
    Rebuild a Schedule from audit rows.

    Args:
        source: CSV path or DataFrame with at least REQUIRED_COLUMNS
        roster: When given, rows are matched to roster workers by id so the
            schedule carries current worker records. The name is only used
            for rows without a worker_id; an id missing from the roster gives
            a standalone Worker, never a same-named roster member

    Returns:
        Schedule (``unfilled`` is not stored in the log and comes back empty)
    """
    if isinstance(source, pd.DataFrame):
        df = source.copy()
    else:
        df = pd.read_csv(source, dtype=str, keep_default_na=False)
    df = df.fillna("")

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Schedule log is missing columns: {', '.join(missing)}")
    if "worker_id" not in df.columns:
        df["worker_id"] = ""

    by_id: Dict[str, Worker] = {}
    by_name: Dict[str, Worker] = {}
    for w in roster or []:
        by_id[w.id] = w
        by_name.setdefault(w.name, w)

    schedule = Schedule()
    for _, row in df[LOG_COLUMNS].iterrows():
        slot = SlotTime(str(row["meal_time"]).strip(), str(row["interval_time"]).strip())
        worker_id = str(row["worker_id"]).strip()
        name = str(row["employee_name"]).strip()

        worker = None
        if worker_id:
            worker = by_id.get(worker_id) or Worker(id=worker_id, name=name or worker_id)
        elif name:
            worker = by_name.get(name) or Worker(id=name, name=name)

        schedule.assignments.append(Assignment(str(row["station"]).strip(), slot, worker))

    logger.debug(f"Loaded schedule log with {len(schedule)} rows")
    return schedule
