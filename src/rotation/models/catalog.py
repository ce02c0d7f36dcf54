"""Station catalog: the fixed, ordered stations and their slot times."""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple


class CatalogError(ValueError):
    """Raised when a station catalog is malformed."""


@dataclass(frozen=True)
class SlotTime:
    """One staffing window of a station: a meal label and an interval label."""
    meal: str
    interval: str

    @property
    def label(self) -> str:
        return f"{self.meal} / {self.interval}"

    @property
    def key(self) -> str:
        """Compact form used in CSV columns and UI selectors."""
        return f"{self.meal}-{self.interval}"

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class Station:
    """A staffed post with its ordered slot times."""
    name: str
    slots: Tuple[SlotTime, ...]
    is_overflow: bool = False

    def __post_init__(self):
        # Accept any iterable of slots, store a tuple
        object.__setattr__(self, "slots", tuple(self.slots))

    def has_slot(self, slot: SlotTime) -> bool:
        return slot in self.slots


StationKey = Tuple[str, SlotTime]


class Catalog:
    """
    Ordered, read-only collection of stations.

    Exactly one station is the overflow station and it comes last; it absorbs
    every worker not placed on a regular station.
    """

    def __init__(self, stations: Iterable[Station]):
        self._stations: Tuple[Station, ...] = tuple(stations)
        self._by_name: Dict[str, Station] = {}
        self._validate()

    def _validate(self) -> None:
        if not self._stations:
            raise CatalogError("Catalog must define at least one station")

        for st in self._stations:
            if st.name in self._by_name:
                raise CatalogError(f"Duplicate station name: {st.name!r}")
            if not st.slots:
                raise CatalogError(f"Station {st.name!r} has no slot times")
            if len(set(st.slots)) != len(st.slots):
                raise CatalogError(f"Station {st.name!r} lists the same slot time twice")
            self._by_name[st.name] = st

        overflow = [st for st in self._stations if st.is_overflow]
        if len(overflow) != 1:
            raise CatalogError(
                f"Catalog needs exactly one overflow station, found {len(overflow)}"
            )
        if self._stations[-1] is not overflow[0]:
            raise CatalogError(
                f"Overflow station {overflow[0].name!r} must be last in the catalog"
            )

    @property
    def stations(self) -> Tuple[Station, ...]:
        return self._stations

    @property
    def station_names(self) -> List[str]:
        return [st.name for st in self._stations]

    @property
    def overflow(self) -> Station:
        return self._stations[-1]

    @property
    def regular_stations(self) -> Tuple[Station, ...]:
        """Stations filled slot by slot, in catalog order."""
        return self._stations[:-1]

    @property
    def total_regular_slots(self) -> int:
        return sum(len(st.slots) for st in self.regular_stations)

    def station(self, name: str) -> Station:
        """Look up a station by name. Raises KeyError if unknown."""
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"Unknown station: {name!r}") from None

    def slots(self, name: str) -> Tuple[SlotTime, ...]:
        return self.station(name).slots

    def is_overflow(self, name: str) -> bool:
        return name == self.overflow.name

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def has_key(self, station: str, slot: SlotTime) -> bool:
        return station in self._by_name and self._by_name[station].has_slot(slot)

    def keys(self) -> List[StationKey]:
        """Every (station, slot) pair, in catalog order."""
        return [(st.name, slot) for st in self._stations for slot in st.slots]

    def to_dict(self) -> Dict:
        """Serialize to the catalog JSON layout."""
        return {
            "stations": [
                {
                    "name": st.name,
                    "overflow": st.is_overflow,
                    "slots": [{"meal": s.meal, "interval": s.interval} for s in st.slots],
                }
                for st in self._stations
            ]
        }

    def __len__(self) -> int:
        return len(self._stations)

    def __repr__(self) -> str:
        return f"Catalog({self.station_names!r}, overflow={self.overflow.name!r})"


def _slots(*pairs: Tuple[str, str]) -> Tuple[SlotTime, ...]:
    return tuple(SlotTime(meal, interval) for meal, interval in pairs)


# Reference night-shift configuration
DEFAULT_CATALOG = Catalog([
    Station("EMERGÊNCIA", _slots(
        ("21:00", "00:00 AS 02:00"),
        ("21:30", "02:00 AS 04:00"),
        ("22:00", "04:00 AS 06:00"),
    )),
    Station("CENTRO CIRÚRGICO", _slots(
        ("21:00", "00:00 AS 02:00"),
        ("21:30", "02:00 AS 04:00"),
    )),
    Station("CORREDOR", _slots(
        ("21:00", "01:00 AS 03:00"),
        ("21:30", "03:00 AS 05:00"),
    )),
    Station("TOMOGRAFIA", _slots(
        ("21:00", "04:00 AS 06:00"),
    )),
    Station("COBERTURA", _slots(
        ("21:00", "00:00 AS 02:00"),
        ("21:30", "02:00 AS 04:00"),
        ("22:00", "04:00 AS 06:00"),
    ), is_overflow=True),
])
