"""
Pydantic Validated Models
=========================
Validation layer for catalog configuration files.

Usage:
    from rotation.models.validated import ValidatedCatalog

    catalog = ValidatedCatalog.model_validate(data).to_catalog()
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .catalog import Catalog, SlotTime, Station


class ValidatedSlotTime(BaseModel):
    """A (meal, interval) pair as written in a catalog file."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    meal: str = Field(min_length=1, description="Meal time label, e.g. '21:00'")
    interval: str = Field(min_length=1, description="Break interval label")

    @field_validator("meal", "interval", mode="before")
    @classmethod
    def strip_label(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    def to_slot(self) -> SlotTime:
        return SlotTime(self.meal, self.interval)


class ValidatedStation(BaseModel):
    """One station entry of a catalog file."""
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    overflow: bool = Field(default=False, description="Absorbs unplaced workers")
    slots: List[ValidatedSlotTime] = Field(min_length=1)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @model_validator(mode="after")
    def validate_unique_slots(self):
        if len(set(self.slots)) != len(self.slots):
            raise ValueError(f"station {self.name!r} lists the same slot time twice")
        return self

    def to_station(self) -> Station:
        return Station(
            name=self.name,
            slots=tuple(s.to_slot() for s in self.slots),
            is_overflow=self.overflow,
        )


class ValidatedCatalog(BaseModel):
    """
    Pydantic-validated catalog document.

    Cross-station rules (single overflow station, placed last) are checked
    here so that a bad file fails with a field-level message.
    """
    model_config = ConfigDict(extra="forbid")

    stations: List[ValidatedStation] = Field(min_length=1)

    @model_validator(mode="after")
    def validate_stations(self):
        names = [st.name for st in self.stations]
        if len(set(names)) != len(names):
            raise ValueError("station names must be unique")

        overflow = [st.name for st in self.stations if st.overflow]
        if len(overflow) != 1:
            raise ValueError(f"exactly one overflow station required, got {len(overflow)}")
        if not self.stations[-1].overflow:
            raise ValueError(f"overflow station {overflow[0]!r} must be the last station")
        return self

    def to_catalog(self) -> Catalog:
        """Convert to the runtime Catalog."""
        return Catalog(st.to_station() for st in self.stations)

    @classmethod
    def from_catalog(cls, catalog: Catalog) -> "ValidatedCatalog":
        return cls.model_validate(catalog.to_dict())
