"""Styled dataframe display helpers for apartment lists."""

import streamlit as st
import pandas as pd
from typing import Iterable

from engine.projector import format_area
from models.unit import Unit


def units_dataframe(units: Iterable[Unit]) -> pd.DataFrame:
    rows = []
    for u in units:
        rows.append({
            "Apartment": u.label,
            "Status": "Occupied" if u.occupied else "Free",
            "Owner": u.owner or "",
            "Area": format_area(u) if u.occupied else "",
            "Block": u.block or "",
        })
    return pd.DataFrame(rows, columns=["Apartment", "Status", "Owner", "Area", "Block"])


def render_units_table(df: pd.DataFrame, status_column: str = "Status"):
    """Render apartments with colour-coded status."""
    def color_status(val):
        if val == "Occupied":
            return "background-color: #ffcccc; color: #cc0000; font-weight: bold"
        elif val == "Free":
            return "background-color: #d4edda; color: #155724; font-weight: bold"
        return ""

    if df.empty:
        st.caption("No apartments match.")
        return
    styled = df.style.map(color_status, subset=[status_column])
    st.dataframe(styled, use_container_width=True, hide_index=True)
