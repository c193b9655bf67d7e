"""Efficiency and comparison ratios over the aggregated totals."""

from typing import Optional

from models.results import DerivedMetrics


def _ratio(numerator: float, denominator: float) -> Optional[float]:
    if not denominator:
        return None
    return numerator / denominator


def calculate_derived_metrics(total_area: float, total_cbm: float, baseline_cbm: float) -> DerivedMetrics:
    """Sq.ft per CBM (lower is better), improvement over baseline, and extra CBM.

    Ratios with a zero denominator are None; validation reports them as
    degenerate input.
    """
    return DerivedMetrics(
        sqft_per_cbm=_ratio(total_area, total_cbm),
        space_improvement_factor=_ratio(total_cbm, baseline_cbm),
        extra_cbm=total_cbm - baseline_cbm,
    )
