"""Warehouse Capacity Planner: Streamlit entry point."""

import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from config.logging_setup import setup_logging
from data.session_store import initialize_session_state, get_rule_config
from engine.capacity_engine import compute_capacity
from tabs import (
    tab_capacity_results,
    tab_bill_of_quantities,
    tab_charts,
    tab_layout_comparison,
)


def main():
    st.set_page_config(
        page_title="Warehouse Capacity Planner",
        page_icon="🏭",
        layout="wide",
        initial_sidebar_state="expanded",
    )
    setup_logging()

    initialize_session_state()
    config = render_sidebar()
    result = compute_capacity(config, get_rule_config())

    st.title("Warehouse Capacity Calculator")
    st.caption("HD Pallet Racks + Mezzanine Storage Planning")

    tab1, tab2, tab3, tab4 = st.tabs([
        "📦 Capacity Results",
        "🧾 Bill of Quantities",
        "📊 Charts",
        "↔️ Layout Comparison",
    ])

    with tab1:
        tab_capacity_results.render(config, result)
    with tab2:
        tab_bill_of_quantities.render(config, result)
    with tab3:
        tab_charts.render(result)
    with tab4:
        tab_layout_comparison.render(config)


if __name__ == "__main__":
    main()
