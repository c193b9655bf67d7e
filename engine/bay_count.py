"""Bay count strategies: geometric module layout and area-based estimate.

The two strategies share no state. The capacity engine picks one per
configuration; neither calls the other.
"""

import logging
import math
from typing import Optional

from models.results import ModuleBayCount, EmpiricalBayCount
from engine.geometry import calculate_module_length

logger = logging.getLogger(__name__)


def _floor_count(numerator: float, divisor: float) -> int:
    """Whole units that fit, discarding partials. Degenerate divisors give 0."""
    if divisor <= 0:
        return 0
    quotient = numerator / divisor
    if not math.isfinite(quotient):
        return 0
    return max(0, math.floor(quotient))


def count_bays_module(
    warehouse_length: float,
    warehouse_width: float,
    bay_length: float,
    bay_width: float,
    small_gap: float,
    main_aisle_width: float,
    cross_aisle_width: Optional[float] = None,
) -> Optional[ModuleBayCount]:
    """Exact layout of back-to-back bay modules along the warehouse length.

    Returns None when either warehouse dimension is missing or zero.
    """
    if not warehouse_length or not warehouse_width:
        return None

    module_length = calculate_module_length(bay_length, small_gap, main_aisle_width)
    bays_per_row = _floor_count(warehouse_length, module_length) * 2

    effective_cross_aisle = cross_aisle_width if cross_aisle_width is not None else main_aisle_width
    row_pitch = bay_width + effective_cross_aisle
    number_of_rows = _floor_count(warehouse_width, row_pitch)

    if module_length <= 0 or row_pitch <= 0:
        logger.warning(
            "Degenerate module layout (module length %.2f ft, row pitch %.2f ft)",
            module_length, row_pitch,
        )

    return ModuleBayCount(
        bays_per_row=bays_per_row,
        number_of_rows=number_of_rows,
        total_bays=bays_per_row * number_of_rows,
        module_length=module_length,
        row_pitch=row_pitch,
    )


def count_bays_empirical(
    hd_area: float,
    bay_footprint: float,
    aisle_overhead_multiplier: float,
) -> EmpiricalBayCount:
    """Estimate bays from HD racking area, inflating each footprint for aisles."""
    effective_area_per_bay = bay_footprint * aisle_overhead_multiplier
    if effective_area_per_bay <= 0:
        logger.warning("Degenerate effective area per bay: %.3f sq.ft", effective_area_per_bay)

    return EmpiricalBayCount(
        effective_area_per_bay=effective_area_per_bay,
        bay_count=_floor_count(hd_area, effective_area_per_bay),
    )
