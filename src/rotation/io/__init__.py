# rotation/io - File adapters for roster, catalog and schedule history
from .catalog_loader import load_catalog, save_catalog
from .csv_loader import load_roster, roster_to_dataframe, save_roster
from .schedule_log import export_schedule_log, load_schedule_log, schedule_to_log_frame

__all__ = [
    "load_roster", "save_roster", "roster_to_dataframe",
    "load_catalog", "save_catalog",
    "export_schedule_log", "load_schedule_log", "schedule_to_log_frame",
]
