"""Active tab tracking with lazy, once-only materialization of each projection."""

import logging
from typing import Any, Callable, Dict, MutableMapping

from config.defaults import DEFAULT_TAB, SELECTED_TAB_KEY, TABS
from engine.errors import InvariantViolation

logger = logging.getLogger(__name__)


class TabSession:
    """Per-session tab state.

    `storage` is any session-scoped mapping; only the active tab name is
    written to it. Materialized flags live on the instance and reset with it.
    """

    def __init__(self, storage: MutableMapping, materializers: Dict[str, Callable[[], Any]]):
        missing = [t for t in TABS if t not in materializers]
        if missing:
            raise InvariantViolation(f"No materializer for tabs: {missing}")
        self.storage = storage
        self.materializers = materializers
        self.active_tab = DEFAULT_TAB
        self._materialized: Dict[str, bool] = {t: False for t in TABS}
        self._views: Dict[str, Any] = {}

    def restore(self) -> str:
        """Return the persisted tab, or the default when none (or an unknown one) is stored."""
        stored = self.storage.get(SELECTED_TAB_KEY)
        if stored is None:
            return DEFAULT_TAB
        if stored not in TABS:
            logger.warning("Ignoring unknown stored tab %r, using %s", stored, DEFAULT_TAB)
            return DEFAULT_TAB
        return stored

    def activate(self, tab: str) -> Any:
        """Make `tab` active and persist it; materialize its projection on first use."""
        if tab not in TABS:
            raise InvariantViolation(f"Unknown tab: {tab!r}. Expected one of {TABS}")
        self.active_tab = tab
        if self.storage.get(SELECTED_TAB_KEY) != tab:
            self.storage[SELECTED_TAB_KEY] = tab
        if not self._materialized[tab]:
            self._views[tab] = self.materializers[tab]()
            self._materialized[tab] = True
            logger.info("Tab %s materialized", tab)
        return self._views[tab]

    def is_materialized(self, tab: str) -> bool:
        return self._materialized.get(tab, False)

    def view(self, tab: str) -> Any:
        if not self.is_materialized(tab):
            raise InvariantViolation(f"Tab {tab!r} has not been activated yet")
        return self._views[tab]
