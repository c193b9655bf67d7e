"""Tab 4: Layout Comparison - Standard reach-truck aisles vs VNA."""

import pandas as pd
import streamlit as st

from models.configuration import WarehouseConfig
from engine.scenario_engine import compare_layouts, layout_differences
from components.charts import layout_comparison_bar
from components.tables import render_styled_table, render_layout_difference_table
from data.session_store import get_active_view, get_rule_config


def render(config: WarehouseConfig):
    """Render the Layout Comparison tab."""
    st.header("Layout Comparison")

    active_view = get_active_view()
    st.info(
        f"Current mode: {'VNA (Very Narrow Aisle)' if active_view == 'vna' else 'Standard Reach Truck'} · "
        f"aisle width {config.main_aisle_width:g} ft"
    )

    rows = compare_layouts(config, rule_config=get_rule_config())
    df = pd.DataFrame(rows)
    render_styled_table(df)

    if len(rows) == 2:
        st.subheader(f"{rows[1]['Layout']} vs {rows[0]['Layout']}")
        render_layout_difference_table(layout_differences(rows[0], rows[1]))

    metric = st.selectbox(
        "Compare by",
        ["Total CBM", "Total Bays", "Rack CBM", "Pallet Positions"],
        key="comparison_metric",
    )
    st.plotly_chart(layout_comparison_bar(rows, metric), use_container_width=True)
