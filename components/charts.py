"""Plotly chart builders for the occupancy views."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List

from config.defaults import FLOORS, UNITS_PER_FLOOR, HEATMAP_COLORSCALE
from models.view import HeatmapCell, ListGroup


def occupancy_heatmap(cells: List[HeatmapCell], title: str = "Occupancy by Floor") -> go.Figure:
    """Floor x apartment heatmap; top floor drawn at the top."""
    rows = {floor: [None] * UNITS_PER_FLOOR for floor in FLOORS}
    hover = {floor: [""] * UNITS_PER_FLOOR for floor in FLOORS}
    labels = {floor: [""] * UNITS_PER_FLOOR for floor in FLOORS}
    for cell in cells:
        idx = cell.unit.number - 1
        rows[cell.unit.floor][idx] = cell.value
        hover[cell.unit.floor][idx] = f"{cell.unit.label}: {cell.tooltip}"
        labels[cell.unit.floor][idx] = str(cell.unit.number)

    floors_top_down = list(reversed(FLOORS))
    fig = go.Figure(data=go.Heatmap(
        z=[rows[f] for f in floors_top_down],
        x=list(range(1, UNITS_PER_FLOOR + 1)),
        y=floors_top_down,
        text=[labels[f] for f in floors_top_down],
        texttemplate="%{text}",
        hovertext=[hover[f] for f in floors_top_down],
        hovertemplate="%{hovertext}<extra></extra>",
        colorscale=HEATMAP_COLORSCALE,
        zmin=0,
        zmax=1,
        showscale=False,
        xgap=2,
        ygap=2,
    ))
    fig.update_layout(
        title=title,
        xaxis_title="Apartment",
        yaxis_title="Floor",
        yaxis_type="category",
        xaxis=dict(dtick=1),
        height=max(350, len(FLOORS) * 40),
    )
    return fig


def occupancy_by_floor_bar(groups: List[ListGroup]) -> go.Figure:
    """Stacked bar of occupied vs free apartments per floor."""
    df = pd.DataFrame([{
        "floor": g.floor,
        "Occupied": g.occupied_count,
        "Free": g.total_count - g.occupied_count,
    } for g in groups])
    fig = px.bar(
        df, x="floor", y=["Occupied", "Free"],
        labels={"value": "Apartments", "floor": "Floor", "variable": ""},
        title="Occupied vs Free by Floor",
        color_discrete_map={"Occupied": "#E8734A", "Free": "#4CAF50"},
    )
    fig.update_layout(legend_title_text="", height=350, xaxis_type="category")
    return fig
