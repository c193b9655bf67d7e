"""Typed wrapper around st.session_state for the planner UI."""

import dataclasses
import streamlit as st

from models.configuration import WarehouseConfig
from config.defaults import (
    UPRIGHT_SAFETY, BEAM_SAFETY, DECKING_SAFETY, ANCHOR_SAFETY, COLUMN_PROTECTOR_COVERAGE,
    MIN_RELIABLE_BAY_COUNT, VNA_MIN_SAFE_AISLE_WIDTH, MIN_MEZZ_CLEAR_HEIGHT,
)

CONFIG_KEY_PREFIX = "cfg_"
RULE_KEY_PREFIX = "rule_"


def default_rule_config() -> dict:
    return {
        "upright_safety": UPRIGHT_SAFETY,
        "beam_safety": BEAM_SAFETY,
        "decking_safety": DECKING_SAFETY,
        "anchor_safety": ANCHOR_SAFETY,
        "column_protector_coverage": COLUMN_PROTECTOR_COVERAGE,
        "min_reliable_bay_count": MIN_RELIABLE_BAY_COUNT,
        "vna_min_safe_aisle_width": VNA_MIN_SAFE_AISLE_WIDTH,
        "min_mezz_clear_height": MIN_MEZZ_CLEAR_HEIGHT,
    }


def config_key(field_name: str) -> str:
    """Widget key holding one WarehouseConfig field."""
    return f"{CONFIG_KEY_PREFIX}{field_name}"


def rule_key(rule_name: str) -> str:
    """Widget key holding one rule config override."""
    return f"{RULE_KEY_PREFIX}{rule_name}"


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "active_view": "standard",  # "standard" or "vna"
    }
    defaults.update({rule_key(name): value for name, value in default_rule_config().items()})
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default

    for f in dataclasses.fields(WarehouseConfig):
        key = config_key(f.name)
        if key not in st.session_state:
            st.session_state[key] = f.default


def reset_config_to_defaults():
    """Restore every input to the reference configuration."""
    for f in dataclasses.fields(WarehouseConfig):
        st.session_state[config_key(f.name)] = f.default
    set_rule_config(default_rule_config())
    st.session_state["active_view"] = "standard"


# --- Getters ---

def get_rule_config() -> dict:
    return {
        name: st.session_state.get(rule_key(name), default)
        for name, default in default_rule_config().items()
    }


def get_active_view() -> str:
    return st.session_state.get("active_view", "standard")


def get_config_value(field_name: str):
    return st.session_state.get(config_key(field_name))


def build_config() -> WarehouseConfig:
    """Assemble a WarehouseConfig from the current widget values."""
    values = {}
    for f in dataclasses.fields(WarehouseConfig):
        value = st.session_state.get(config_key(f.name), f.default)
        values[f.name] = value
    override = values.get("pallets_per_level_override")
    values["pallets_per_level_override"] = int(override) if override else None
    return WarehouseConfig(**values)


# --- Setters ---

def set_rule_config(rule_config: dict):
    for name, value in rule_config.items():
        st.session_state[rule_key(name)] = value


def set_active_view(view: str):
    st.session_state["active_view"] = view


def set_config_values(**values):
    for name, value in values.items():
        st.session_state[config_key(name)] = value
