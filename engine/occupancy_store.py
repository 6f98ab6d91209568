"""Authoritative floor -> apartment -> occupant mapping for one session."""

import logging
from typing import Dict, Iterator, Optional

from config.defaults import FLOORS, UNITS_PER_FLOOR, FETCH_TIMEOUT_SECONDS
from data.loader import OccupancyMap, load_dataset, parse_dataset
from engine.errors import DataUnavailable, InvariantViolation
from models.unit import OccupancyRecord, Unit

logger = logging.getLogger(__name__)


def check_coordinates(floor: str, number: int):
    """Reject a unit reference outside the building."""
    if floor not in FLOORS:
        raise InvariantViolation(f"Unknown floor: {floor!r}. Expected one of {FLOORS}")
    if isinstance(number, bool) or not isinstance(number, int) or not 1 <= number <= UNITS_PER_FLOOR:
        raise InvariantViolation(
            f"Apartment number must be an integer in 1..{UNITS_PER_FLOOR}, got {number!r}"
        )


class OccupancyStore:
    """Read-only occupancy data. A missing entry means the apartment is free."""

    def __init__(self, occupancy: Optional[OccupancyMap] = None, loaded: bool = True):
        occupancy = occupancy or {}
        for floor, units in occupancy.items():
            for number in units:
                check_coordinates(floor, number)
        self._occupancy: Dict[str, Dict[int, OccupancyRecord]] = {
            floor: dict(units) for floor, units in occupancy.items() if units
        }
        self.loaded = loaded

    @classmethod
    def load(cls, source: str, timeout: float = FETCH_TIMEOUT_SECONDS) -> "OccupancyStore":
        """Fetch the dataset once. Any failure yields an empty store (all apartments free)."""
        try:
            occupancy = load_dataset(source, timeout=timeout)
        except DataUnavailable as e:
            logger.warning("Occupancy data unavailable, showing all apartments free: %s", e)
            return cls.empty()
        except Exception:
            logger.exception("Unexpected error loading occupancy data, showing all apartments free")
            return cls.empty()

        store = cls(occupancy)
        logger.info(
            "Occupancy data loaded from %s: %d floors, %d occupied",
            source, len(store._occupancy), store.occupied_count(),
        )
        return store

    @classmethod
    def from_dataset(cls, raw) -> "OccupancyStore":
        """Build a store from an already decoded document."""
        return cls(parse_dataset(raw))

    @classmethod
    def empty(cls) -> "OccupancyStore":
        return cls({}, loaded=False)

    # --- Counts ---

    def total_units(self) -> int:
        return len(FLOORS) * UNITS_PER_FLOOR

    def occupied_count(self) -> int:
        return sum(len(units) for units in self._occupancy.values())

    def free_count(self) -> int:
        return self.total_units() - self.occupied_count()

    def floor_occupied_count(self, floor: str) -> int:
        if floor not in FLOORS:
            raise InvariantViolation(f"Unknown floor: {floor!r}")
        return len(self._occupancy.get(floor, {}))

    # --- Lookup ---

    def unit_at(self, floor: str, number: int) -> Unit:
        check_coordinates(floor, number)
        return Unit(floor, number, self._occupancy.get(floor, {}).get(number))

    def units(self) -> Iterator[Unit]:
        """Every apartment, ground floor first, then by number."""
        for floor in FLOORS:
            for number in range(1, UNITS_PER_FLOOR + 1):
                yield self.unit_at(floor, number)
