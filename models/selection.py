from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class SelectionState(Enum):
    IDLE = "idle"
    SELECTED = "selected"
    CONFIRMED = "confirmed"


class SelectionEvent(Enum):
    SELECT = "select"
    CONFIRM = "confirm"
    EMIT = "emit"
    CANCEL = "cancel"
    RESET = "reset"


@dataclass(frozen=True)
class Selection:
    floor: str
    number: int
    occupied: bool
    owner: Optional[str] = None
    area: Optional[Decimal] = None
    block: Optional[str] = None
    client_id: Optional[str] = None

    @property
    def label(self) -> str:
        return f"{self.floor}-{self.number}"


@dataclass(frozen=True)
class ActionMessage:
    action: str                     # "create_contract" or "create_receipt"
    floor: str
    apartment: int
    client_id: Optional[str] = None
    # Host-side logging only; ignored by equality
    created_at: datetime = field(default_factory=datetime.now, compare=False)

    def to_dict(self) -> dict:
        """Wire form: client_id only when present, no timestamp."""
        payload = {
            "action": self.action,
            "floor": self.floor,
            "apartment": self.apartment,
        }
        if self.client_id is not None:
            payload["client_id"] = self.client_id
        return payload
