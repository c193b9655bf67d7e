"""Bill of quantities for the HD racking structure."""

import math
from typing import Optional

from models.results import BoQLineItem, BillOfQuantities
from config.defaults import (
    UPRIGHT_SAFETY, BEAM_SAFETY, DECKING_SAFETY, ANCHOR_SAFETY,
    ANCHORS_PER_UPRIGHT_PAIR, ROW_SPACERS_PER_BAY, COLUMN_PROTECTOR_COVERAGE,
)


def apply_margin(quantity: float, margin: float = 1.0) -> int:
    """Inflate a raw quantity by a safety margin and round UP to whole units.

    The product is rounded to 9 decimals first so float noise such as
    105.00000000000001 does not order an extra unit. A non-finite product
    gives 0; validation reports the input that caused it.
    """
    inflated = quantity * margin
    if not math.isfinite(inflated):
        return 0
    return max(0, math.ceil(round(inflated, 9)))


def generate_boq(
    bay_count: int,
    levels: int,
    bay_length: float,
    bay_width: float,
    total_rack_height: Optional[float] = None,
    rule_config: Optional[dict] = None,
) -> BillOfQuantities:
    """Material quantities with per-category safety margins.

    Uprights are counted in pairs (frames); a row of N bays needs N + 1 frames.
    Anchors are derived from the already-rounded upright count.
    """
    cfg = rule_config or {}
    upright_safety = cfg.get("upright_safety", UPRIGHT_SAFETY)
    beam_safety = cfg.get("beam_safety", BEAM_SAFETY)
    decking_safety = cfg.get("decking_safety", DECKING_SAFETY)
    anchor_safety = cfg.get("anchor_safety", ANCHOR_SAFETY)
    protector_coverage = cfg.get("column_protector_coverage", COLUMN_PROTECTOR_COVERAGE)

    upright_pairs = apply_margin(bay_count + 1, upright_safety)
    beam_pairs = apply_margin(bay_count * levels, beam_safety)
    decking_panels = apply_margin(bay_count * levels, decking_safety)
    anchor_bolts = apply_margin(upright_pairs * ANCHORS_PER_UPRIGHT_PAIR, anchor_safety)
    row_spacers = apply_margin(bay_count * ROW_SPACERS_PER_BAY)
    column_protectors = apply_margin(upright_pairs * protector_coverage)

    return BillOfQuantities(
        upright_pairs=BoQLineItem(
            "upright_pairs", upright_pairs,
            "Upright frames" if total_rack_height is None
            else f"Upright frames ({total_rack_height:.0f} ft height)",
        ),
        beam_pairs=BoQLineItem(
            "beam_pairs", beam_pairs,
            f"Beam pairs ({bay_length:.1f} ft length)",
        ),
        decking_panels=BoQLineItem(
            "decking_panels", decking_panels,
            f"Wire decking panels ({bay_length:.1f} × {bay_width:.1f} ft)",
        ),
        anchor_bolts=BoQLineItem("anchor_bolts", anchor_bolts, "Anchor bolts with hardware"),
        row_spacers=BoQLineItem("row_spacers", row_spacers, "Row spacers (back-to-back bays)"),
        column_protectors=BoQLineItem(
            "column_protectors", column_protectors, "Column protectors (corner guards)",
        ),
    )
