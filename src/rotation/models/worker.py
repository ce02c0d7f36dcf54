"""Worker model for roster members."""
from dataclasses import dataclass


def _safe_bool(value, default: bool = False) -> bool:
    """Safely convert value to bool."""
    if hasattr(value, "item"):
        value = value.item()  # numpy scalar from a DataFrame cell
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        if not value.strip():
            return default
        return value.strip().lower() in ("1", "true", "yes", "sim", "s")
    return default


@dataclass
class Worker:
    """A roster member that can be placed on a station slot."""

    id: str
    name: str
    active: bool = True

    def __post_init__(self):
        self.id = str(self.id).strip()
        self.name = str(self.name).strip()
        if not self.id:
            self.id = self.name

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "active": self.active,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Worker":
        """Create from dictionary."""
        return cls(
            id=d.get("id", ""),
            name=d.get("name", ""),
            active=_safe_bool(d.get("active", True), default=True),
        )
