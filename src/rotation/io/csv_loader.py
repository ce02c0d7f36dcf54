"""CSV loading and saving for roster data."""
from pathlib import Path
from typing import List, Union

import pandas as pd

from rotation.models.worker import Worker, _safe_bool
from rotation.utils.logging_setup import get_logger

logger = get_logger("rotation.io.csv_loader")

ROSTER_COLUMNS = ["id", "name", "active"]


def load_roster(source: Union[str, Path, pd.DataFrame]) -> List[Worker]:
    """
    Load roster from CSV file or DataFrame.

    Args:
        source: Path to CSV file or pandas DataFrame

    Returns:
        List of Worker objects, in file order
    """
    if isinstance(source, pd.DataFrame):
        df = source.copy()
    else:
        df = pd.read_csv(source, dtype=str, keep_default_na=False)

    df = df.fillna("")

    if "name" not in df.columns:
        raise ValueError("Roster CSV must have a 'name' column")

    workers = []
    for _, row in df.iterrows():
        name = str(row["name"]).strip()
        if not name:
            continue
        workers.append(Worker(
            id=str(row.get("id", "")).strip() or name,
            name=name,
            active=_safe_bool(row.get("active", True), default=True),
        ))

    logger.debug(f"Loaded {len(workers)} workers ({sum(w.active for w in workers)} active)")
    return workers


def save_roster(workers: List[Worker], path: Union[str, Path]) -> None:
    """Save roster to CSV file (active written as 1/0)."""
    df = roster_to_dataframe(workers)
    if df.empty:
        df = pd.DataFrame(columns=ROSTER_COLUMNS)
    else:
        df["active"] = df["active"].astype(int)
    df.to_csv(path, index=False)


def roster_to_dataframe(workers: List[Worker]) -> pd.DataFrame:
    """Convert roster to DataFrame for display."""
    if not workers:
        return pd.DataFrame()
    return pd.DataFrame([w.to_dict() for w in workers], columns=ROSTER_COLUMNS)
