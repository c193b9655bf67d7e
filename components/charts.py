"""Plotly chart builders for the Warehouse Capacity Planner."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List

from models.results import AreaBreakdown, CapacityResult


def cbm_breakdown_bar(result: CapacityResult, title: str = "Storage Capacity Breakdown") -> go.Figure:
    """Bar chart of baseline, rack, mezzanine and total CBM."""
    df = pd.DataFrame([
        {"Component": "Baseline", "CBM": result.baseline_cbm},
        {"Component": "Rack CBM", "CBM": result.total_rack_cbm},
        {"Component": "Mezzanine", "CBM": result.mezz_cbm},
        {"Component": "Total CBM", "CBM": result.total_cbm},
    ])
    fig = px.bar(
        df, x="Component", y="CBM",
        color="Component",
        title=title,
        color_discrete_sequence=["#9CA3AF", "#4A90D9", "#F5C542", "#2E8B57"],
    )
    fig.update_traces(texttemplate="%{y:,.0f}", textposition="outside")
    fig.update_layout(showlegend=False, height=400)
    return fig


def area_allocation_donut(areas: AreaBreakdown, title: str = "Floor Area Allocation") -> go.Figure:
    """Donut chart splitting the floor into HD racking, mezzanine and staging."""
    fig = go.Figure(data=[go.Pie(
        labels=["HD Racking", "Mezzanine", "Staging/Aisles"],
        values=[max(areas.hd_area, 0), max(areas.mezz_area, 0), max(areas.staging_area, 0)],
        hole=0.6,
        marker_colors=["#4A90D9", "#F5C542", "#E8734A"],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{areas.total_area:,.0f} sq.ft", x=0.5, y=0.5, font_size=14, showarrow=False)],
    )
    return fig


def layout_comparison_bar(rows: List[dict], metric: str = "Total CBM") -> go.Figure:
    """Bar chart comparing one metric across layout presets."""
    df = pd.DataFrame(rows)
    fig = px.bar(
        df, x="Layout", y=metric,
        color="Layout",
        title=f"{metric} by Layout",
        color_discrete_sequence=["#4A90D9", "#E8734A"],
    )
    fig.update_layout(showlegend=False, height=400)
    return fig
