from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class OccupancyRecord:
    owner: str
    area: Optional[Decimal]
    block: str
    client_id: Optional[str] = None


@dataclass(frozen=True)
class Unit:
    floor: str
    number: int
    occupancy: Optional[OccupancyRecord] = None

    @property
    def occupied(self) -> bool:
        return self.occupancy is not None

    @property
    def label(self) -> str:
        """Display number, e.g. "3-5"."""
        return f"{self.floor}-{self.number}"

    @property
    def owner(self) -> Optional[str]:
        return self.occupancy.owner if self.occupancy else None

    @property
    def area(self) -> Optional[Decimal]:
        return self.occupancy.area if self.occupancy else None

    @property
    def block(self) -> Optional[str]:
        return self.occupancy.block if self.occupancy else None

    @property
    def client_id(self) -> Optional[str]:
        return self.occupancy.client_id if self.occupancy else None
