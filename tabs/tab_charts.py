"""Tab 3: Charts - capacity breakdown and floor allocation."""

import streamlit as st

from models.results import CapacityResult
from components.charts import cbm_breakdown_bar, area_allocation_donut


def render(result: CapacityResult):
    """Render the Charts tab."""
    st.header("Charts")

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(cbm_breakdown_bar(result), use_container_width=True)
    with col2:
        st.plotly_chart(area_allocation_donut(result.areas), use_container_width=True)

    if result.areas.staging_area < 0:
        st.warning("Racking allocation exceeds the floor area; staging is shown as zero.")
