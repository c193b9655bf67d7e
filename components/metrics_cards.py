"""Reusable KPI metric card widgets."""

import streamlit as st

from models.results import ValidationResult


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color, help.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
                help=m.get("help"),
            )


def render_alert_card(message: str, level: str = "warning"):
    """Render an alert card with appropriate styling."""
    if level == "error":
        st.error(message, icon="🔴")
    elif level == "warning":
        st.warning(message, icon="🟡")
    else:
        st.info(message, icon="🔵")


def render_validation_alerts(validation: ValidationResult):
    """Errors first, then warnings; a success note when there are none."""
    if not validation.errors and not validation.warnings:
        st.success("No validation issues. Configuration looks consistent.")
        return
    for finding in validation.errors:
        render_alert_card(finding.message, "error")
    for finding in validation.warnings:
        render_alert_card(finding.message, "warning")
