"""Layout comparison engine. Applies an aisle preset to a copy and recomputes it."""

import dataclasses
from typing import List, Optional

from models.configuration import WarehouseConfig
from models.results import CapacityResult
from engine.capacity_engine import compute_capacity
from config.defaults import AISLE_PRESETS

COMPARED_METRICS = ["Total Bays", "Rack CBM", "Mezzanine CBM", "Total CBM", "Pallet Positions"]


def apply_aisle_preset(config: WarehouseConfig, preset: str) -> WarehouseConfig:
    """Return a copy of the configuration with the named aisle preset applied."""
    if preset not in AISLE_PRESETS:
        raise ValueError(f"Unknown aisle preset: {preset}. Use one of {sorted(AISLE_PRESETS)}.")
    return dataclasses.replace(config, **AISLE_PRESETS[preset])


def summarize_result(result: CapacityResult) -> dict:
    return {
        "Method": result.method,
        "Total Bays": result.bay_count,
        "Rack CBM": result.total_rack_cbm,
        "Mezzanine CBM": result.mezz_cbm,
        "Total CBM": result.total_cbm,
        "Pallet Positions": result.total_pallet_positions,
        "Space Improvement": result.derived.space_improvement_factor,
        "Errors": len(result.validation.errors),
        "Warnings": len(result.validation.warnings),
    }


def compare_layouts(
    config: WarehouseConfig,
    presets: Optional[List[str]] = None,
    rule_config: Optional[dict] = None,
) -> List[dict]:
    """Run the configuration under each aisle preset and return one row per preset."""
    rows = []
    for preset in presets or ["standard", "vna"]:
        result = compute_capacity(apply_aisle_preset(config, preset), rule_config)
        row = {"Layout": preset.upper() if preset == "vna" else preset.title()}
        row.update(summarize_result(result))
        rows.append(row)
    return rows


def layout_differences(row_a: dict, row_b: dict) -> List[dict]:
    """Per-metric change between two comparison rows (b minus a), labelled by layout."""
    label_a = row_a.get("Layout", "A")
    label_b = row_b.get("Layout", "B")
    return [
        {
            "Metric": metric,
            label_a: row_a[metric],
            label_b: row_b[metric],
            "Change": row_b[metric] - row_a[metric],
        }
        for metric in COMPARED_METRICS
    ]
