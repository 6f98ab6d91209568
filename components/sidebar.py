"""Sidebar: occupancy summary and the selected-apartment action panel."""

import streamlit as st
from dataclasses import dataclass
from typing import Optional

from components.host_channel import StreamlitHostChannel, render_outbox
from config.defaults import ACTION_LABELS
from data.session_store import end_session, get_last_action, get_selection_controller, get_store
from engine.errors import NoSelectionError
from engine.host import selection_popup
from models.selection import Selection, SelectionState


@dataclass
class SidebarState:
    selection: Optional[Selection]
    state: SelectionState


def select_unit(floor: str, number: int):
    """Click handler shared by every view."""
    st.session_state.pop("outbox", None)
    selection = get_selection_controller().select(floor, number)
    channel = StreamlitHostChannel()
    channel.notify(*selection_popup(selection))


def _confirm():
    try:
        get_selection_controller().confirm()
    except NoSelectionError as e:
        st.session_state["sidebar_error"] = str(e)


def _cancel():
    get_selection_controller().cancel()


def _emit():
    try:
        get_selection_controller().emit(StreamlitHostChannel())
    except NoSelectionError as e:
        st.session_state["sidebar_error"] = str(e)


def _restart():
    st.session_state.pop("outbox", None)
    end_session()


def render_sidebar() -> SidebarState:
    controller = get_selection_controller()
    store = get_store()

    with st.sidebar:
        st.title("Apartments")
        st.caption(f"{store.occupied_count()} occupied · {store.free_count()} free · {store.total_units()} total")
        st.divider()

        error = st.session_state.pop("sidebar_error", None)
        if error:
            st.warning(f"❌ {error}")

        selection = controller.current_selection()
        if selection is None:
            st.info("Pick an apartment in any view.")
            render_outbox()
        else:
            title, body = selection_popup(selection)
            st.subheader(title)
            st.text(body)

            action = controller.available_action()
            if controller.state == SelectionState.SELECTED:
                st.button(ACTION_LABELS[action], type="primary", on_click=_confirm,
                          use_container_width=True, key="sidebar_action")
                st.button("Cancel", on_click=_cancel, use_container_width=True, key="sidebar_cancel")
            elif controller.state == SelectionState.CONFIRMED:
                message = controller.build_action_payload()
                st.warning(f"Send **{message.action}** for apartment {selection.label}?")
                col1, col2 = st.columns(2)
                col1.button("Confirm", type="primary", on_click=_emit,
                            use_container_width=True, key="sidebar_emit")
                col2.button("Cancel", on_click=_cancel, use_container_width=True, key="sidebar_back")

        st.divider()
        last = get_last_action()
        if last:
            st.caption(f"Last request: {last.action} · {last.floor}-{last.apartment} · {last.created_at:%H:%M:%S}")
        st.button("🔄 Reload data", on_click=_restart, use_container_width=True, key="sidebar_reload")

    return SidebarState(selection=controller.current_selection(), state=controller.state)
