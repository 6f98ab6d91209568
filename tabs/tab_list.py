"""Tab 3: List of apartments grouped by floor, with status filter and search."""

import streamlit as st
from typing import List

from components.charts import occupancy_by_floor_bar
from components.sidebar import select_unit
from components.tables import render_units_table, units_dataframe
from config.defaults import STATUS_FILTERS
from data.session_store import get_list_collapse, get_list_filter, get_projector, set_list_filter
from models.view import FilterState, ListGroup


def _toggle(floor: str):
    get_list_collapse().toggle(floor)


def render(groups: List[ListGroup], selected_label=None):
    st.header("List")

    current = get_list_filter()
    col1, col2, col3, col4 = st.columns([2, 3, 1, 1])
    with col1:
        status = st.selectbox(
            "Status", STATUS_FILTERS,
            index=STATUS_FILTERS.index(current.status_filter),
            format_func=str.capitalize, key="list_status",
        )
    with col2:
        query = st.text_input("Search by apartment or owner", current.search_query, key="list_search")
    collapse = get_list_collapse()
    col3.button("Collapse all", on_click=collapse.collapse_all, key="list_collapse_all")
    col4.button("Expand all", on_click=collapse.expand_all, key="list_expand_all")

    filter_state = FilterState(status, query)
    if filter_state != current:
        set_list_filter(filter_state)
    groups = get_projector().refilter_list(groups, filter_state)

    st.plotly_chart(occupancy_by_floor_bar(groups), use_container_width=True)

    shown = 0
    for group in groups:
        if group.visible_count == 0 and not filter_state.is_reset:
            continue
        shown += group.visible_count
        collapsed = collapse.is_collapsed(group.floor)
        st.button(
            f"{'▶' if collapsed else '▼'} Floor {group.floor} — occupied {group.summary}",
            key=f"list_group_{group.floor}",
            on_click=_toggle, args=(group.floor,),
        )
        if collapsed:
            continue

        visible_units = [item.unit for item in group.items if item.visible]
        render_units_table(units_dataframe(visible_units))
        cols = st.columns(7)
        for i, unit in enumerate(visible_units):
            cols[i % 7].button(
                unit.label,
                key=f"list_{unit.label}",
                on_click=select_unit,
                args=(unit.floor, unit.number),
                type="primary" if unit.label == selected_label else "secondary",
                use_container_width=True,
            )

    if shown == 0:
        st.info("No apartments match the filter.")
