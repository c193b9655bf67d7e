"""Tab 2: Bill of Quantities - racking materials, CSV download and RFQ text."""

from datetime import datetime

import streamlit as st

from models.configuration import WarehouseConfig
from models.results import CapacityResult
from components.tables import render_styled_table
from data.exporter import boq_to_dataframe, results_to_csv, generate_rfq_text


def render(config: WarehouseConfig, result: CapacityResult):
    """Render the Bill of Quantities tab."""
    st.header("Bill of Quantities")
    st.caption("Quantities include safety margins and are rounded up to whole units.")

    render_styled_table(boq_to_dataframe(result))

    if not result.validation.is_valid:
        st.warning("Resolve the validation errors before exporting the BoQ.")

    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            "⬇️ Download CSV",
            data=results_to_csv(config, result),
            file_name="warehouse-capacity.csv",
            mime="text/csv",
            disabled=not result.validation.is_valid,
            use_container_width=True,
        )
    with col2:
        show_rfq = st.toggle("Show RFQ text", key="boq_show_rfq")

    if show_rfq:
        st.code(generate_rfq_text(config, result, generated_at=datetime.now()), language="text")
