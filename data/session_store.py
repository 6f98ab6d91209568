"""Typed wrapper around st.session_state for the per-session core objects."""

import streamlit as st
from typing import Optional

from config.defaults import (
    DATA_SOURCE, TAB_GRID, TAB_CARDS, TAB_LIST, TAB_HEATMAP, STATUS_ALL,
)
from engine.occupancy_store import OccupancyStore
from engine.projector import ListCollapseState, ViewProjector
from engine.selection import SelectionController
from engine.tab_session import TabSession
from models.selection import ActionMessage
from models.view import FilterState


def initialize_session_state(source: str = DATA_SOURCE):
    """Create the session's store and controllers once; later reruns reuse them."""
    if "store" in st.session_state:
        return

    store = OccupancyStore.load(source)
    projector = ViewProjector(store)
    tab_session = TabSession(
        st.query_params,
        {
            TAB_GRID: projector.grid,
            TAB_CARDS: projector.cards,
            TAB_LIST: projector.list_view,
            TAB_HEATMAP: projector.heatmap,
        },
    )

    defaults = {
        "store": store,
        "projector": projector,
        "selection": SelectionController(store),
        "tab_session": tab_session,
        "list_collapse": ListCollapseState(),
        "list_filter": FilterState(STATUS_ALL, ""),
        "cards_search": "",
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_store() -> OccupancyStore:
    return st.session_state["store"]


def get_projector() -> ViewProjector:
    return st.session_state["projector"]


def get_selection_controller() -> SelectionController:
    return st.session_state["selection"]


def get_tab_session() -> TabSession:
    return st.session_state["tab_session"]


def get_list_collapse() -> ListCollapseState:
    return st.session_state["list_collapse"]


def get_list_filter() -> FilterState:
    return st.session_state.get("list_filter", FilterState())


def get_cards_search() -> str:
    return st.session_state.get("cards_search", "")


def get_last_action() -> Optional[ActionMessage]:
    return get_selection_controller().last_action


# --- Setters ---

def set_list_filter(filter_state: FilterState):
    st.session_state["list_filter"] = filter_state


def set_cards_search(query: str):
    st.session_state["cards_search"] = query


def end_session():
    """Discard the session's core objects; the next run starts fresh."""
    controller = st.session_state.get("selection")
    if controller is not None:
        controller.clear_selection()
    for key in ["store", "projector", "selection", "tab_session", "list_collapse",
                "list_filter", "cards_search"]:
        st.session_state.pop(key, None)
