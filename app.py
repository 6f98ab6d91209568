"""Apartment Selector: Streamlit entry point."""

import logging
import os
import sys

import streamlit as st

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.metrics_cards import render_alert_card, render_occupancy_metrics
from components.sidebar import render_sidebar
from config.defaults import (
    INIT_DATA_PARAM, REQUIRE_HOST_AUTH, TABS, TAB_LABELS,
    TAB_GRID, TAB_CARDS, TAB_LIST, TAB_HEATMAP,
)
from data.auth import is_authorized, launch_data
from data.session_store import get_store, get_tab_session, initialize_session_state
from tabs import tab_grid, tab_cards, tab_list, tab_heatmap

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

RENDERERS = {
    TAB_GRID: tab_grid.render,
    TAB_CARDS: tab_cards.render,
    TAB_LIST: tab_list.render,
    TAB_HEATMAP: tab_heatmap.render,
}


def main():
    st.set_page_config(
        page_title="Apartments",
        page_icon="🏢",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    if REQUIRE_HOST_AUTH and not is_authorized(launch_data(st.query_params.get(INIT_DATA_PARAM, ""))):
        render_alert_card(
            "Authorization failed. Open the app through the bot; the launcher must pass "
            f"its init data as the `{INIT_DATA_PARAM}` query parameter.",
            level="error",
        )
        if st.button("Try again"):
            st.rerun()
        return

    initialize_session_state()
    store = get_store()
    tab_session = get_tab_session()
    sidebar_state = render_sidebar()

    if not store.loaded:
        render_alert_card("Occupancy data is unavailable; all apartments are shown as free.", level="info")
    render_occupancy_metrics(store)

    restored = tab_session.restore()
    tab = st.radio(
        "View",
        TABS,
        index=TABS.index(restored),
        format_func=lambda t: TAB_LABELS[t],
        horizontal=True,
        label_visibility="collapsed",
        key="active_tab",
    )
    view = tab_session.activate(tab)

    selected_label = sidebar_state.selection.label if sidebar_state.selection else None
    RENDERERS[tab](view, selected_label)


if __name__ == "__main__":
    main()
