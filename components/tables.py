"""Styled dataframe display helpers."""

import math

import streamlit as st
import pandas as pd
from typing import List, Optional

from models.results import ValidationResult


def render_styled_table(
    df: pd.DataFrame,
    title: Optional[str] = None,
    height: Optional[int] = None,
    use_container_width: bool = True,
):
    """Render a styled, non-editable dataframe."""
    if title:
        st.subheader(title)
    st.dataframe(df, height=height, use_container_width=use_container_width, hide_index=True)


def validation_to_dataframe(validation: ValidationResult) -> pd.DataFrame:
    rows = [
        {"Severity": "ERROR", "Field": f.field, "Kind": f.kind, "Message": f.message}
        for f in validation.errors
    ] + [
        {"Severity": "WARNING", "Field": f.field, "Kind": f.kind, "Message": f.message}
        for f in validation.warnings
    ]
    return pd.DataFrame(rows, columns=["Severity", "Field", "Kind", "Message"])


def render_validation_table(validation: ValidationResult):
    """Render findings with color-coded severity."""
    def color_severity(val):
        if val == "ERROR":
            return "background-color: #ffcccc; color: #cc0000; font-weight: bold"
        elif val == "WARNING":
            return "background-color: #fff3cd; color: #856404; font-weight: bold"
        return ""

    df = validation_to_dataframe(validation)
    if df.empty:
        return
    styled = df.style.map(color_severity, subset=["Severity"])
    st.dataframe(styled, use_container_width=True, hide_index=True)


def render_layout_difference_table(differences: List[dict]):
    """Metric-by-metric layout differences; gains in green, losses in red."""
    def color_change(val):
        if not isinstance(val, (int, float)) or math.isnan(val) or val == 0:
            return ""
        if val > 0:
            return "color: #155724; font-weight: bold"
        return "color: #cc0000; font-weight: bold"

    df = pd.DataFrame(differences)
    if df.empty:
        return
    value_columns = [c for c in df.columns if c != "Metric"]
    styled = (
        df.style
        .map(color_change, subset=["Change"])
        .format("{:,.0f}", subset=value_columns, na_rep="-")
    )
    st.dataframe(styled, use_container_width=True, hide_index=True)
