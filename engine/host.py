"""Host-facing channel interface and the string forms of an action message."""

from abc import ABC, abstractmethod
from typing import List, Tuple

from furl import furl

from config.defaults import (
    BOT_LINK_BASE, BOT_USERNAME, CALLBACK_ACTION_NAMES, CALLBACK_PREFIX,
    FREE_UNIT_AREA, FREE_UNIT_BLOCK, FREE_UNIT_ROOMS, NO_CLIENT_ID,
)
from models.selection import ActionMessage, Selection


def callback_fields(message: ActionMessage, selection: Selection) -> List[str]:
    """Action, floor, apartment, area, block, client id; free apartments get display defaults."""
    return [
        CALLBACK_ACTION_NAMES[message.action],
        message.floor,
        str(message.apartment),
        str(selection.area) if selection.area is not None else FREE_UNIT_AREA,
        selection.block or FREE_UNIT_BLOCK,
        message.client_id or NO_CLIENT_ID,
    ]


def encode_callback_data(message: ActionMessage, selection: Selection) -> str:
    """e.g. "apt_receipt_3_5_54.2_A_c9"."""
    return "_".join([CALLBACK_PREFIX] + callback_fields(message, selection))


def build_deep_link(message: ActionMessage, selection: Selection, bot_username: str = BOT_USERNAME) -> str:
    """Bot link whose start parameter carries the callback fields."""
    link = furl(BOT_LINK_BASE)
    link.path.segments = [bot_username]
    link.args["start"] = "_".join(callback_fields(message, selection))
    return link.url


def selection_popup(selection: Selection) -> Tuple[str, str]:
    """Title and body of the info popup shown after a click."""
    title = f"Apartment {selection.label}"
    if selection.occupied:
        area = selection.area if selection.area is not None else "—"
        lines = [
            f"👤 Owner: {selection.owner}",
            f"📐 Area: {area} m²",
            f"🏢 Block: {selection.block}",
            f"📍 Apartment: {selection.label}",
        ]
    else:
        lines = [
            f"📍 Apartment: {selection.label}",
            f"📐 Area: ~{FREE_UNIT_AREA} m²",
            f"🛏️ Rooms: {FREE_UNIT_ROOMS}",
            f"🏢 Floor: {selection.floor}",
            "✅ Status: Free",
        ]
    return title, "\n".join(lines)


class HostChannel(ABC):
    """Fire-and-forget connection to the controlling host."""

    @abstractmethod
    def send(self, message: ActionMessage, selection: Selection):
        """Deliver an action message. No acknowledgement is expected."""

    def notify(self, title: str, text: str):
        """Show an informational popup. Optional for a host."""


class RecordingChannel(HostChannel):
    """Keeps every sent message in memory; used for dry runs and tests."""

    def __init__(self):
        self.sent: List[Tuple[ActionMessage, str]] = []
        self.notifications: List[Tuple[str, str]] = []

    def send(self, message: ActionMessage, selection: Selection):
        self.sent.append((message, encode_callback_data(message, selection)))

    def notify(self, title: str, text: str):
        self.notifications.append((title, text))
