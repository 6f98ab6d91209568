from dataclasses import dataclass
from typing import Tuple

from config.defaults import STATUS_ALL, STATUS_OCCUPIED, STATUS_FREE, STATUS_FILTERS
from models.unit import Unit


@dataclass(frozen=True)
class FilterState:
    status_filter: str = STATUS_ALL   # "all", "occupied", "free"
    search_query: str = ""

    def __post_init__(self):
        if self.status_filter not in STATUS_FILTERS:
            raise ValueError(
                f"Unknown status filter: {self.status_filter}. Expected one of {STATUS_FILTERS}"
            )

    @property
    def is_reset(self) -> bool:
        return self.status_filter == STATUS_ALL and not self.search_query.strip()

    def matches_status(self, unit: Unit) -> bool:
        if self.status_filter == STATUS_OCCUPIED:
            return unit.occupied
        if self.status_filter == STATUS_FREE:
            return not unit.occupied
        return True

    def matches_search(self, unit: Unit) -> bool:
        query = self.search_query.strip().lower()
        if not query:
            return True
        if query in unit.label.lower():
            return True
        return unit.occupied and query in unit.owner.lower()

    def matches(self, unit: Unit) -> bool:
        return self.matches_status(unit) and self.matches_search(unit)


@dataclass(frozen=True)
class GridRow:
    floor: str
    units: Tuple[Unit, ...]


@dataclass(frozen=True)
class CardItem:
    unit: Unit
    visible: bool = True


@dataclass(frozen=True)
class ListItem:
    unit: Unit
    visible: bool = True


@dataclass(frozen=True)
class ListGroup:
    floor: str
    occupied_count: int
    total_count: int
    items: Tuple[ListItem, ...]

    @property
    def visible_count(self) -> int:
        return sum(1 for item in self.items if item.visible)

    @property
    def summary(self) -> str:
        return f"{self.occupied_count}/{self.total_count}"


@dataclass(frozen=True)
class HeatmapCell:
    unit: Unit
    tooltip: str

    @property
    def value(self) -> int:
        """1 for occupied, 0 for free."""
        return 1 if self.unit.occupied else 0
