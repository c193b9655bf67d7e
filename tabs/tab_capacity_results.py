"""Tab 1: Capacity Results - headline capacity, findings and calculation steps."""

import streamlit as st

from models.configuration import WarehouseConfig
from models.results import CapacityResult, ModuleBayCount
from components.metrics_cards import render_metric_row, render_validation_alerts
from components.tables import render_validation_table
from data.exporter import format_number


def space_gain_metric(result: CapacityResult) -> dict:
    """Improvement over baseline; a negative extra CBM shows as a red delta."""
    improvement = result.derived.space_improvement_factor
    return {
        "label": "Space Gain",
        "value": f"{format_number(improvement)}x" if improvement is not None else "n/a",
        "delta": f"{format_number(result.derived.extra_cbm)} CBM",
        "delta_color": "normal",
    }


def render(config: WarehouseConfig, result: CapacityResult):
    """Render the Capacity Results tab."""
    st.header("Capacity Results")

    render_metric_row([
        {"label": "Total CBM", "value": format_number(result.total_cbm),
         "help": "Baseline + rack + mezzanine capacity"},
        {"label": "Rack CBM", "value": format_number(result.total_rack_cbm)},
        {"label": "Mezzanine CBM", "value": format_number(result.mezz_cbm)},
    ])
    render_metric_row([
        {"label": "Total Bays", "value": format_number(result.bay_count, 0)},
        {"label": "Pallet Positions", "value": format_number(result.total_pallet_positions, 0)},
        space_gain_metric(result),
    ])

    st.divider()

    # --- Validation ---
    st.subheader("Validation")
    render_validation_alerts(result.validation)
    render_validation_table(result.validation)

    st.divider()

    # --- Detail ---
    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Capacity Comparison")
        st.markdown(
            f"- Baseline capacity: **{format_number(result.baseline_cbm)} CBM**\n"
            f"- Additional capacity: **+{format_number(result.derived.extra_cbm)} CBM**\n"
            f"- Racking area: **{format_number(result.areas.racking_area, 0)} sq.ft**\n"
            f"- Staging/aisle area: **{format_number(result.areas.staging_area, 0)} sq.ft**\n"
            f"- Volume per bay: **{format_number(result.volume_per_bay_cbm)} CBM**\n"
            f"- Sq.ft per CBM: **{format_number(result.derived.sqft_per_cbm)}**"
        )
    with col2:
        st.subheader("Layout")
        details = result.bay_count_details
        if isinstance(details, ModuleBayCount):
            st.markdown(
                f"- Method: **Module**\n"
                f"- Module length: **{details.module_length:.1f} ft**\n"
                f"- Bays per row: **{details.bays_per_row}**\n"
                f"- Rows: **{details.number_of_rows}** (pitch {details.row_pitch:.1f} ft)"
            )
        else:
            if config.use_module_method:
                st.info("Module method needs both length and width; using the empirical estimate.")
            st.markdown(
                f"- Method: **Empirical**\n"
                f"- Effective area per bay: **{details.effective_area_per_bay:.2f} sq.ft**\n"
                f"- Aisle overhead multiplier: **{config.aisle_overhead_multiplier}**"
            )
        st.markdown(
            f"- Rack height: **{result.total_rack_height:.1f} ft** "
            f"(clear height {config.clear_height or 'n/a'} ft)\n"
            f"- Pallets per level: **{result.pallets.pallets_per_level}**"
        )

    with st.expander("How was this calculated?"):
        for step in result.explanation_steps:
            st.markdown(f"- {step}")
