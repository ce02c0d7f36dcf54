# rotation/models - Data models for the rotation scheduler
from .catalog import DEFAULT_CATALOG, Catalog, CatalogError, SlotTime, Station
from .config import SchedulerConfig
from .schedule import Assignment, Schedule
from .worker import Worker

__all__ = [
    "Worker",
    "SlotTime", "Station", "Catalog", "CatalogError", "DEFAULT_CATALOG",
    "Schedule", "Assignment",
    "SchedulerConfig",
]
