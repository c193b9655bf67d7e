"""Generates human-readable explanations for capacity calculations."""

from typing import List, Optional

from models.results import AreaBreakdown, BayCountDetails, ModuleBayCount, PalletPositions
from config.defaults import CUFT_PER_CBM


def _fmt_ratio(value: Optional[float], suffix: str = "") -> str:
    return "undefined" if value is None else f"{value:,.2f}{suffix}"


def explain_capacity(
    areas: AreaBreakdown,
    bay_footprint: float,
    total_rack_height: float,
    details: BayCountDetails,
    bay_count: int,
    volume_per_bay_cuft: float,
    volume_per_bay_cbm: float,
    total_rack_cbm: float,
    mezz_cbm: float,
    mezz_levels: int,
    baseline_cbm: float,
    total_cbm: float,
    pallets: PalletPositions,
    sqft_per_cbm: Optional[float],
    space_improvement_factor: Optional[float],
) -> List[str]:
    """Produce step-by-step explanation for a capacity result."""
    steps = []

    if areas.use_direct_area_input:
        steps.append(
            f"Step 1 - Areas (direct input): HD racking {areas.hd_area:,.0f} + mezzanine "
            f"{areas.mezz_area:,.0f} = {areas.racking_area:,.0f} sq.ft of {areas.total_area:,.0f} sq.ft, "
            f"staging {areas.staging_area:,.0f} sq.ft"
        )
    else:
        steps.append(
            f"Step 1 - Areas: {areas.racking_area:,.0f} of {areas.total_area:,.0f} sq.ft for racking, "
            f"of which {areas.mezz_area:,.0f} mezzanine and {areas.hd_area:,.0f} HD racking; "
            f"staging {areas.staging_area:,.0f} sq.ft"
        )

    steps.append(
        f"Step 2 - Bay: footprint {bay_footprint:,.2f} sq.ft, rack height {total_rack_height:,.1f} ft"
    )

    if isinstance(details, ModuleBayCount):
        steps.append(
            f"Step 3 - Bay count (module method): module {details.module_length:,.1f} ft => "
            f"{details.bays_per_row} bays/row, row pitch {details.row_pitch:,.1f} ft => "
            f"{details.number_of_rows} rows => {bay_count} bays"
        )
    else:
        steps.append(
            f"Step 3 - Bay count (empirical method): {areas.hd_area:,.0f} sq.ft / "
            f"{details.effective_area_per_bay:,.3f} sq.ft per bay => {bay_count} bays"
        )

    steps.append(
        f"Step 4 - Rack volume: {volume_per_bay_cuft:,.1f} cu.ft / {CUFT_PER_CBM} = "
        f"{volume_per_bay_cbm:,.3f} CBM per bay x {bay_count} = {total_rack_cbm:,.1f} CBM"
    )

    deck_note = f" across {mezz_levels} decks" if mezz_levels > 1 else ""
    steps.append(f"Step 5 - Mezzanine volume: {mezz_cbm:,.1f} CBM{deck_note}")

    steps.append(
        f"Step 6 - Total: {baseline_cbm:,.1f} (baseline) + {total_rack_cbm:,.1f} (racks) + "
        f"{mezz_cbm:,.1f} (mezzanine) = {total_cbm:,.1f} CBM"
    )

    source = "override" if pallets.is_overridden else "auto"
    steps.append(
        f"Step 7 - Pallets: {pallets.pallets_per_level} per level ({source}) => "
        f"{pallets.total_pallet_positions:,} positions"
    )

    steps.append(
        f"Step 8 - Metrics: {_fmt_ratio(sqft_per_cbm)} sq.ft per CBM, "
        f"{_fmt_ratio(space_improvement_factor, 'x')} improvement over baseline"
    )

    return steps
