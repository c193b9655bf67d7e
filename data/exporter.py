"""CSV and RFQ text export of capacity results."""

import math
from datetime import datetime
from typing import Optional

import pandas as pd

from models.configuration import WarehouseConfig
from models.results import CapacityResult
from config.defaults import DEFAULT_DECIMALS


def format_number(num, decimals: int = DEFAULT_DECIMALS) -> str:
    """Thousands-separated number; missing or non-finite values print as 0."""
    if num is None or isinstance(num, bool):
        return "0"
    try:
        value = float(num)
    except (TypeError, ValueError):
        return "0"
    if not math.isfinite(value):
        return "0"
    return f"{value:,.{decimals}f}"


def boq_to_dataframe(result: CapacityResult) -> pd.DataFrame:
    return pd.DataFrame([
        {"Item": item.key, "Quantity": item.quantity, "Description": item.description}
        for item in result.boq.line_items()
    ])


def inputs_to_dataframe(config: WarehouseConfig, result: CapacityResult) -> pd.DataFrame:
    rows = [
        ("Warehouse Area", format_number(result.areas.total_area, 0), "sq.ft"),
        ("Bay Length", config.bay_length, "ft"),
        ("Bay Width", config.bay_width, "ft"),
        ("Levels", config.levels, "count"),
        ("Level Height", config.level_height, "ft"),
        ("Aisle Width", config.main_aisle_width, "ft"),
        ("Aisle Type", "VNA" if config.is_vna else "Standard", "-"),
        ("Bay Count Method", result.method, "-"),
    ]
    return pd.DataFrame(rows, columns=["Parameter", "Value", "Unit"])


def capacity_to_dataframe(result: CapacityResult) -> pd.DataFrame:
    improvement = result.derived.space_improvement_factor
    rows = [
        ("Total Bays", result.bay_count, "count"),
        ("Total Rack CBM", format_number(result.total_rack_cbm), "CBM"),
        ("Mezzanine CBM", format_number(result.mezz_cbm), "CBM"),
        ("Total CBM", format_number(result.total_cbm), "CBM"),
        ("Space Improvement", f"{format_number(improvement)}x" if improvement is not None else "n/a", "factor"),
        ("Total Pallet Positions", format_number(result.total_pallet_positions, 0), "count"),
    ]
    return pd.DataFrame(rows, columns=["Metric", "Value", "Unit"])


def results_to_csv(config: WarehouseConfig, result: CapacityResult) -> str:
    """Multi-section CSV: input parameters, capacity results, bill of quantities."""
    sections = [
        ("INPUT PARAMETERS", inputs_to_dataframe(config, result)),
        ("CAPACITY RESULTS", capacity_to_dataframe(result)),
        ("BILL OF QUANTITIES", boq_to_dataframe(result)),
    ]
    parts = ["WAREHOUSE CAPACITY CALCULATOR - BILL OF QUANTITIES", ""]
    for title, df in sections:
        parts.append(title)
        parts.append(df.to_csv(index=False, lineterminator="\n").rstrip("\n"))
        parts.append("")
    return "\n".join(parts)


def generate_rfq_text(
    config: WarehouseConfig,
    result: CapacityResult,
    generated_at: Optional[datetime] = None,
) -> str:
    """Plain-text request for quotation to send to racking suppliers."""
    lines = [
        "WAREHOUSE RACKING SYSTEM - REQUEST FOR QUOTATION",
        "=" * 60,
        "",
        "PROJECT SPECIFICATIONS:",
        f"Warehouse Area: {format_number(result.areas.total_area, 0)} sq.ft",
        f"Total Rack Bays: {result.bay_count} bays",
        f"Rack Levels: {config.levels} levels",
        f"Bay Dimensions: {config.bay_length} ft × {config.bay_width} ft",
        f"Total Rack Height: {result.total_rack_height:g} ft",
        "",
        "BILL OF QUANTITIES:",
    ]
    for item in result.boq.line_items():
        lines.append(f"{item.quantity}x {item.description}")

    improvement = result.derived.space_improvement_factor
    lines.extend([
        "",
        "CAPACITY SUMMARY:",
        f"Total Storage Capacity: {format_number(result.total_cbm)} CBM",
        f"Total Pallet Positions: {format_number(result.total_pallet_positions, 0)}",
        f"Space Improvement: {format_number(improvement)}x" if improvement is not None
        else "Space Improvement: n/a",
    ])
    if generated_at is not None:
        lines.extend(["", f"Generated: {generated_at:%Y-%m-%d %H:%M}"])
    return "\n".join(lines)
