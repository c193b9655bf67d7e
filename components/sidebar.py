"""Sidebar input panel: warehouse, rack, allocation, aisle, mezzanine and pallet inputs."""

import streamlit as st

from models.configuration import WarehouseConfig
from data.session_store import (
    build_config, config_key, get_config_value, reset_config_to_defaults, rule_key,
    set_active_view, set_config_values,
)
from config.defaults import AISLE_PRESETS, AISLE_WIDTH_OPTIONS


def _apply_view(view: str):
    set_active_view(view)
    set_config_values(**AISLE_PRESETS[view])


def render_sidebar() -> WarehouseConfig:
    """Render the input controls and return the resulting configuration."""
    with st.sidebar:
        st.title("Warehouse Capacity")
        st.button("🔄 Load Defaults", on_click=reset_config_to_defaults, key="load_defaults",
                  use_container_width=True)
        st.divider()

        st.subheader("Warehouse")
        st.number_input("Total Floor Area (sq.ft)", min_value=0.0, step=1000.0, key=config_key("area"))
        col1, col2 = st.columns(2)
        with col1:
            st.number_input("Length (ft)", min_value=0.0, step=10.0, key=config_key("length"))
        with col2:
            st.number_input("Width (ft)", min_value=0.0, step=10.0, key=config_key("width"))
        st.caption("Length × Width overrides the floor area when both are set.")
        st.number_input("Clear Height (ft)", min_value=0.0, step=1.0, key=config_key("clear_height"))
        st.number_input("Baseline CBM (No Racks)", min_value=0.0, step=100.0, key=config_key("baseline_cbm"))

        st.subheader("Rack")
        col1, col2 = st.columns(2)
        with col1:
            st.number_input("Bay Length (ft)", min_value=0.0, step=0.5, key=config_key("bay_length"))
        with col2:
            st.number_input("Bay Width/Depth (ft)", min_value=0.0, step=0.5, key=config_key("bay_width"))
        st.number_input("Level Height (ft)", min_value=0.0, step=0.5, key=config_key("level_height"))
        st.number_input("Number of Levels", min_value=1, step=1, key=config_key("levels"))

        st.subheader("Area Allocation")
        st.toggle("Enter areas directly", key=config_key("use_direct_area_input"))
        # Both modes stay rendered so the inactive values survive a toggle
        direct = bool(get_config_value("use_direct_area_input"))
        st.slider("Floor Used for Racking (%)", 0.0, 100.0, step=1.0,
                  key=config_key("percent_racking"), disabled=direct)
        st.slider("Mezzanine Allocation (% of racking)", 0.0, 100.0, step=1.0,
                  key=config_key("mezz_percent"), disabled=direct)
        st.number_input("HD Rack Area (sq.ft)", min_value=0.0, step=1000.0,
                        key=config_key("hd_rack_area"), disabled=not direct)
        st.number_input("Mezzanine Area (sq.ft)", min_value=0.0, step=1000.0,
                        key=config_key("mezzanine_area"), disabled=not direct)

        st.subheader("Aisles")
        st.checkbox("Use VNA (Very Narrow Aisle)", key=config_key("is_vna"),
                    help="VNA requires specialized equipment")
        st.selectbox("Aisle Width (ft)", options=AISLE_WIDTH_OPTIONS, key=config_key("main_aisle_width"))
        st.number_input("Cross Aisle Width (ft)", min_value=0.0, step=0.5,
                        key=config_key("cross_aisle_width"), placeholder="Same as aisle width")
        st.number_input("Small Gap Between Bays (ft)", min_value=0.0, step=0.5, key=config_key("small_gap"))
        st.number_input("Aisle Overhead Multiplier", min_value=1.0, max_value=3.0, step=0.1,
                        key=config_key("aisle_overhead_multiplier"),
                        help="Conservative factor for aisle space (1.5 standard, 1.2 VNA)")

        st.subheader("Mezzanine")
        st.number_input("Mezzanine Clear Height (ft)", min_value=0.0, step=0.1, key=config_key("mezz_clear_height"))
        st.number_input("Mezzanine Decks", min_value=1, step=1, key=config_key("mezz_levels"))

        st.subheader("Pallets")
        st.number_input("Pallet Footprint (sq.ft)", min_value=0.0, step=0.1, key=config_key("pallet_footprint"))
        st.number_input("Pallets per Level (Override)", min_value=0, step=1,
                        key=config_key("pallets_per_level_override"), placeholder="Auto")

        st.subheader("Method")
        st.toggle("Use Module Method", key=config_key("use_module_method"),
                  help="Exact row layout; needs both length and width")

        with st.expander("Margins & Thresholds"):
            st.number_input("Upright Safety", min_value=1.0, step=0.01, key=rule_key("upright_safety"))
            st.number_input("Beam Safety", min_value=1.0, step=0.01, key=rule_key("beam_safety"))
            st.number_input("Decking Safety", min_value=1.0, step=0.01, key=rule_key("decking_safety"))
            st.number_input("Anchor Safety", min_value=1.0, step=0.01, key=rule_key("anchor_safety"))
            st.number_input("Column Protector Coverage", min_value=0.0, max_value=1.0, step=0.05,
                            key=rule_key("column_protector_coverage"))
            st.number_input("Min Reliable Bay Count", min_value=0, step=1, key=rule_key("min_reliable_bay_count"))
            st.number_input("VNA Min Safe Aisle (ft)", min_value=0.0, step=0.5,
                            key=rule_key("vna_min_safe_aisle_width"))
            st.number_input("Min Mezzanine Clear Height (ft)", min_value=0.0, step=0.5,
                            key=rule_key("min_mezz_clear_height"))

        st.divider()
        st.caption("Layout comparison")
        col1, col2 = st.columns(2)
        with col1:
            st.button("Standard", on_click=_apply_view, args=("standard",), use_container_width=True)
        with col2:
            st.button("VNA", on_click=_apply_view, args=("vna",), use_container_width=True)

    return build_config()
