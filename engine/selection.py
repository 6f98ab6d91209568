"""Single-slot apartment selection and the confirm-then-emit protocol."""

import logging
from typing import Dict, Optional, Tuple

from config.defaults import ACTION_CREATE_CONTRACT, ACTION_CREATE_RECEIPT
from engine.errors import InvalidTransition, NoSelectionError
from engine.occupancy_store import OccupancyStore
from models.selection import ActionMessage, Selection, SelectionEvent, SelectionState

logger = logging.getLogger(__name__)

_TRANSITIONS: Dict[Tuple[SelectionState, SelectionEvent], SelectionState] = {
    (SelectionState.IDLE, SelectionEvent.SELECT): SelectionState.SELECTED,
    (SelectionState.SELECTED, SelectionEvent.SELECT): SelectionState.SELECTED,
    (SelectionState.SELECTED, SelectionEvent.CONFIRM): SelectionState.CONFIRMED,
    (SelectionState.SELECTED, SelectionEvent.CANCEL): SelectionState.IDLE,
    (SelectionState.CONFIRMED, SelectionEvent.EMIT): SelectionState.IDLE,
    (SelectionState.CONFIRMED, SelectionEvent.CANCEL): SelectionState.IDLE,
    (SelectionState.IDLE, SelectionEvent.RESET): SelectionState.IDLE,
    (SelectionState.SELECTED, SelectionEvent.RESET): SelectionState.IDLE,
    (SelectionState.CONFIRMED, SelectionEvent.RESET): SelectionState.IDLE,
}


def action_for(selection: Selection) -> str:
    return ACTION_CREATE_RECEIPT if selection.occupied else ACTION_CREATE_CONTRACT


class SelectionController:
    """Owns the one selected apartment of a session.

    States: IDLE (nothing selected) -> SELECTED (on select) -> CONFIRMED
    (user confirmed the action) -> IDLE (on emit or cancel).
    """

    def __init__(self, store: OccupancyStore):
        self.store = store
        self.state = SelectionState.IDLE
        self._selection: Optional[Selection] = None
        self.last_action: Optional[ActionMessage] = None

    def transition(self, event: SelectionEvent) -> SelectionState:
        try:
            new_state = _TRANSITIONS[(self.state, event)]
        except KeyError:
            raise InvalidTransition(self.state, event) from None
        logger.debug("Selection %s: %s -> %s", event.value, self.state.value, new_state.value)
        self.state = new_state
        return new_state

    def select(self, floor: str, number: int) -> Selection:
        """Replace the current selection with the apartment at (floor, number)."""
        unit = self.store.unit_at(floor, number)
        if self.state == SelectionState.CONFIRMED:
            self.transition(SelectionEvent.CANCEL)
        self.transition(SelectionEvent.SELECT)
        self._selection = Selection(
            floor=unit.floor,
            number=unit.number,
            occupied=unit.occupied,
            owner=unit.owner,
            area=unit.area,
            block=unit.block,
            client_id=unit.client_id,
        )
        logger.info(
            "Apartment %s selected (%s)", unit.label, "occupied" if unit.occupied else "free"
        )
        return self._selection

    def current_selection(self) -> Optional[Selection]:
        return self._selection

    def clear_selection(self):
        """Session teardown: drop the selection from any state."""
        self.transition(SelectionEvent.RESET)
        self._selection = None

    def available_action(self) -> Optional[str]:
        """The action offered to the user; only a SELECTED apartment has one."""
        if self.state != SelectionState.SELECTED:
            return None
        return action_for(self._selection)

    def build_action_payload(self) -> ActionMessage:
        if self._selection is None:
            raise NoSelectionError()
        selection = self._selection
        return ActionMessage(
            action=action_for(selection),
            floor=selection.floor,
            apartment=selection.number,
            client_id=selection.client_id if selection.occupied else None,
        )

    def confirm(self) -> ActionMessage:
        """User accepted the offered action; returns the message that emit will send."""
        if self._selection is None:
            raise NoSelectionError()
        message = self.build_action_payload()
        self.transition(SelectionEvent.CONFIRM)
        return message

    def cancel(self):
        if self.state == SelectionState.IDLE:
            return
        self.transition(SelectionEvent.CANCEL)
        self._selection = None

    def emit(self, channel) -> ActionMessage:
        """Send the confirmed action to the host and return to IDLE.

        The selection is dropped even when the channel fails; the error propagates.
        """
        if self._selection is None:
            raise NoSelectionError()
        message = self.build_action_payload()
        selection = self._selection
        self.transition(SelectionEvent.EMIT)
        try:
            channel.send(message, selection)
        finally:
            self._selection = None
        logger.info("Action %s sent for apartment %s", message.action, selection.label)
        self.last_action = message
        return message
