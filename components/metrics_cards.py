"""Occupancy KPI cards."""

import streamlit as st

from engine.occupancy_store import OccupancyStore


def render_occupancy_metrics(store: OccupancyStore):
    """Total / occupied / free counts in one row."""
    total = store.total_units()
    occupied = store.occupied_count()
    cols = st.columns(3)
    cols[0].metric("🏢 Total", total)
    cols[1].metric("🔴 Occupied", occupied, delta=f"{occupied / total:.0%}", delta_color="off")
    cols[2].metric("🟢 Free", store.free_count())


def render_alert_card(message: str, level: str = "warning"):
    if level == "error":
        st.error(message, icon="⚠️")
    elif level == "warning":
        st.warning(message, icon="🟡")
    else:
        st.info(message, icon="🔵")
