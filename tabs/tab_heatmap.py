"""Tab 4: Heatmap of occupancy at a glance, hover for details."""

import streamlit as st
from typing import List

from components.charts import occupancy_heatmap
from components.sidebar import select_unit
from models.view import HeatmapCell


def render(cells: List[HeatmapCell], selected_label=None):
    st.header("Heatmap")
    st.plotly_chart(occupancy_heatmap(cells), use_container_width=True)

    labels = [c.unit.label for c in cells]
    tooltips = {c.unit.label: c.tooltip for c in cells}
    col1, col2 = st.columns([3, 1])
    with col1:
        picked = st.selectbox(
            "Apartment",
            labels,
            index=labels.index(selected_label) if selected_label in labels else 0,
            format_func=lambda label: f"{label} — {tooltips[label]}",
            key="heatmap_pick",
        )
    cell = cells[labels.index(picked)]
    with col2:
        st.write("")
        st.button(
            "Select",
            key="heatmap_select",
            on_click=select_unit,
            args=(cell.unit.floor, cell.unit.number),
            use_container_width=True,
        )
