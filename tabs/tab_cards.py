"""Tab 2: Cards, occupied apartments first, searchable."""

import streamlit as st
from typing import Tuple

from components.sidebar import select_unit
from data.session_store import get_cards_search, set_cards_search
from engine.projector import format_area, refilter
from models.view import CardItem, FilterState

CARDS_PER_ROW = 4


def render(cards: Tuple[CardItem, ...], selected_label=None):
    st.header("Cards")

    query = st.text_input("Search by apartment or owner", get_cards_search(), key="cards_search_input")
    if query != get_cards_search():
        set_cards_search(query)

    visible = [c for c in refilter(cards, FilterState(search_query=query)) if c.visible]
    st.caption(f"{len(visible)} of {len(cards)} apartments")
    if not visible:
        st.info("No apartments match the search.")
        return

    for start in range(0, len(visible), CARDS_PER_ROW):
        cols = st.columns(CARDS_PER_ROW)
        for col, card in zip(cols, visible[start:start + CARDS_PER_ROW]):
            unit = card.unit
            with col.container(border=True):
                st.markdown(f"{'🔴' if unit.occupied else '🟢'} **{unit.label}**")
                if unit.occupied:
                    st.caption(f"{unit.owner} · {format_area(unit)} · block {unit.block}")
                else:
                    st.caption("Free")
                st.button(
                    "Selected" if unit.label == selected_label else "Select",
                    key=f"card_{unit.label}",
                    on_click=select_unit,
                    args=(unit.floor, unit.number),
                    disabled=unit.label == selected_label,
                    use_container_width=True,
                )
