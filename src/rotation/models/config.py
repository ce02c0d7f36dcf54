"""Scheduler run configuration."""
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class SchedulerConfig:
    """Settings for one generation run driven from the command line."""

    # Picker
    seed: Optional[int] = None  # None = non-deterministic uniform pick

    # Catalog
    catalog_path: Optional[str] = None  # None = built-in DEFAULT_CATALOG

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = "logs/rotation.log"

    def to_dict(self) -> Dict:
        """Serialize to dictionary."""
        return {
            "seed": self.seed,
            "catalog_path": self.catalog_path,
            "log_level": self.log_level,
            "log_file": self.log_file,
        }

    @classmethod
    def from_dict(cls, d: Dict) -> "SchedulerConfig":
        """Create from dictionary; unknown keys are ignored."""
        cfg = cls()
        for key, value in d.items():
            if hasattr(cfg, key):
                if key == "seed" and value is not None:
                    value = int(value)
                setattr(cfg, key, value)
        return cfg
