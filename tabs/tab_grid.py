"""Tab 1: Grid, floors as rows, apartments as columns."""

import streamlit as st
from typing import List

from components.sidebar import select_unit
from config.defaults import UNITS_PER_FLOOR
from models.view import GridRow


def render(rows: List[GridRow], selected_label=None):
    """Render the classic floor x apartment table; each cell is a button."""
    st.header("Grid")

    header = st.columns([1] + [1] * UNITS_PER_FLOOR)
    header[0].markdown("**Floor**")
    for n in range(1, UNITS_PER_FLOOR + 1):
        header[n].markdown(f"**{n}**")

    # Top floor first, as on a building facade
    for row in reversed(rows):
        cols = st.columns([1] + [1] * UNITS_PER_FLOOR)
        cols[0].markdown(f"**{row.floor}**")
        for col, unit in zip(cols[1:], row.units):
            icon = "🔴" if unit.occupied else "🟢"
            col.button(
                f"{icon} {unit.number}",
                key=f"grid_{unit.label}",
                help=f"{unit.label} · {unit.owner}" if unit.occupied else f"{unit.label} · free",
                on_click=select_unit,
                args=(unit.floor, unit.number),
                type="primary" if unit.label == selected_label else "secondary",
                use_container_width=True,
            )
