"""Grid, cards, list and heatmap projections of the occupancy store."""

from typing import Dict, List, Optional, Set, Tuple

from config.defaults import FLOORS, UNITS_PER_FLOOR
from engine.errors import InvariantViolation
from engine.occupancy_store import OccupancyStore
from models.unit import Unit
from models.view import CardItem, FilterState, GridRow, HeatmapCell, ListGroup, ListItem

NO_FILTER = FilterState()


def format_area(unit: Unit) -> str:
    return f"{unit.area} m²" if unit.area is not None else "— m²"


def heatmap_tooltip(unit: Unit) -> str:
    if not unit.occupied:
        return "free"
    return f"{unit.owner}, {format_area(unit)}"


def refilter(items, filter_state: FilterState):
    """Re-evaluate visibility of already projected card or list items."""
    return tuple(type(item)(unit=item.unit, visible=filter_state.matches(item.unit)) for item in items)


class ViewProjector:
    """Derives view-model records from a store.

    The unit sequence is derived once; filtering only recomputes visibility.
    """

    def __init__(self, store: OccupancyStore):
        self.store = store
        self._units: Optional[Tuple[Unit, ...]] = None
        self.derive_count = 0

    @property
    def units(self) -> Tuple[Unit, ...]:
        if self._units is None:
            self._units = tuple(self.store.units())
            self.derive_count += 1
        return self._units

    def _by_floor(self) -> Dict[str, Tuple[Unit, ...]]:
        return {
            floor: self.units[i * UNITS_PER_FLOOR:(i + 1) * UNITS_PER_FLOOR]
            for i, floor in enumerate(FLOORS)
        }

    def grid(self) -> List[GridRow]:
        by_floor = self._by_floor()
        return [GridRow(floor=floor, units=by_floor[floor]) for floor in FLOORS]

    def cards(self, filter_state: FilterState = NO_FILTER) -> Tuple[CardItem, ...]:
        # sorted() is stable: grid order survives within each group
        ordered = sorted(self.units, key=lambda u: 0 if u.occupied else 1)
        return tuple(CardItem(unit=u, visible=filter_state.matches(u)) for u in ordered)

    def list_view(self, filter_state: FilterState = NO_FILTER) -> List[ListGroup]:
        groups = []
        for floor, units in self._by_floor().items():
            groups.append(ListGroup(
                floor=floor,
                occupied_count=sum(1 for u in units if u.occupied),
                total_count=len(units),
                items=tuple(ListItem(unit=u, visible=filter_state.matches(u)) for u in units),
            ))
        return groups

    def refilter_list(self, groups: List[ListGroup], filter_state: FilterState) -> List[ListGroup]:
        return [
            ListGroup(
                floor=g.floor,
                occupied_count=g.occupied_count,
                total_count=g.total_count,
                items=refilter(g.items, filter_state),
            )
            for g in groups
        ]

    def heatmap(self) -> List[HeatmapCell]:
        return [HeatmapCell(unit=u, tooltip=heatmap_tooltip(u)) for u in self.units]


class ListCollapseState:
    """Which list groups are collapsed. Display state only."""

    def __init__(self):
        self._collapsed: Set[str] = set()

    def _check(self, floor: str):
        if floor not in FLOORS:
            raise InvariantViolation(f"Unknown floor: {floor!r}")

    def is_collapsed(self, floor: str) -> bool:
        return floor in self._collapsed

    def toggle(self, floor: str) -> bool:
        """Flip a group; returns True when it is now collapsed."""
        self._check(floor)
        if floor in self._collapsed:
            self._collapsed.discard(floor)
            return False
        self._collapsed.add(floor)
        return True

    def collapse_all(self):
        self._collapsed = set(FLOORS)

    def expand_all(self):
        self._collapsed.clear()
