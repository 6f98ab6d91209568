"""Exception types raised by the selector core."""


class SelectorError(Exception):
    """Base class for all selector errors."""


class DataUnavailable(SelectorError):
    """The occupancy dataset could not be fetched or parsed."""


class NoSelectionError(SelectorError):
    """An action was requested while no apartment is selected."""

    def __init__(self, message: str = "Select an apartment first"):
        super().__init__(message)


class InvariantViolation(SelectorError):
    """A caller passed a value outside the valid domain."""


class InvalidTransition(InvariantViolation):
    """The selection state machine received an event it cannot accept."""

    def __init__(self, state, event):
        self.state = state
        self.event = event
        super().__init__(f"Cannot apply '{event.value}' in state '{state.value}'")
