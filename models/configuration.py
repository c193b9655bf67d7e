from dataclasses import dataclass
from typing import Optional

from config.defaults import (
    DEFAULT_WAREHOUSE_AREA, DEFAULT_CLEAR_HEIGHT, DEFAULT_BASELINE_CBM,
    DEFAULT_BAY_LENGTH, DEFAULT_BAY_WIDTH, DEFAULT_LEVEL_HEIGHT, DEFAULT_LEVELS,
    DEFAULT_PERCENT_RACKING, DEFAULT_MEZZ_PERCENT,
    DEFAULT_SMALL_GAP, DEFAULT_MAIN_AISLE_WIDTH, DEFAULT_AISLE_OVERHEAD_MULTIPLIER,
    DEFAULT_PALLET_FOOTPRINT_SQFT, DEFAULT_MEZZ_CLEAR_HEIGHT, DEFAULT_MEZZ_LEVELS,
)


@dataclass(frozen=True)
class WarehouseConfig:
    """Input record for a capacity calculation. Lengths in ft, areas in sq.ft."""
    # Warehouse geometry
    length: float = 0.0                     # 0 = unknown, use area
    width: float = 0.0
    area: float = DEFAULT_WAREHOUSE_AREA
    clear_height: Optional[float] = DEFAULT_CLEAR_HEIGHT
    baseline_cbm: float = DEFAULT_BASELINE_CBM  # capacity without racking

    # Rack geometry
    bay_length: float = DEFAULT_BAY_LENGTH
    bay_width: float = DEFAULT_BAY_WIDTH
    level_height: float = DEFAULT_LEVEL_HEIGHT
    levels: int = DEFAULT_LEVELS

    # Area allocation
    percent_racking: float = DEFAULT_PERCENT_RACKING  # % of total area
    mezz_percent: float = DEFAULT_MEZZ_PERCENT        # % of racking area
    use_direct_area_input: bool = False
    hd_rack_area: float = 0.0
    mezzanine_area: float = 0.0

    # Aisles
    small_gap: float = DEFAULT_SMALL_GAP
    main_aisle_width: float = DEFAULT_MAIN_AISLE_WIDTH
    cross_aisle_width: Optional[float] = None  # None = same as main aisle
    is_vna: bool = False
    aisle_overhead_multiplier: float = DEFAULT_AISLE_OVERHEAD_MULTIPLIER

    # Pallets
    pallet_footprint: float = DEFAULT_PALLET_FOOTPRINT_SQFT
    pallets_per_level_override: Optional[int] = None  # None or 0 = auto

    # Mezzanine
    mezz_clear_height: Optional[float] = DEFAULT_MEZZ_CLEAR_HEIGHT
    mezz_levels: int = DEFAULT_MEZZ_LEVELS

    use_module_method: bool = False

    @property
    def has_exact_dimensions(self) -> bool:
        return bool(self.length and self.width and self.length > 0 and self.width > 0)
