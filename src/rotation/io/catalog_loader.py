"""Catalog configuration files (JSON)."""
import json
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from rotation.models.catalog import Catalog, CatalogError
from rotation.models.validated import ValidatedCatalog
from rotation.utils.logging_setup import get_logger

logger = get_logger("rotation.io.catalog_loader")


def load_catalog(path: Union[str, Path]) -> Catalog:
    """
    Load and validate a station catalog.

    Raises:
        CatalogError: If the file is not valid JSON or fails validation
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise CatalogError(f"{path}: invalid JSON ({e})") from e

    try:
        catalog = ValidatedCatalog.model_validate(data).to_catalog()
    except ValidationError as e:
        raise CatalogError(f"{path}: {e}") from e

    logger.info(f"Catalog loaded from {path}: {catalog.station_names}")
    return catalog


def save_catalog(catalog: Catalog, path: Union[str, Path]) -> None:
    """Write ``catalog`` in the same JSON layout load_catalog reads."""
    Path(path).write_text(
        json.dumps(catalog.to_dict(), ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
