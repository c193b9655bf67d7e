"""Pallet position estimate per level and across the racking."""

import math
from typing import Optional

from models.results import PalletPositions
from config.defaults import MIN_PALLETS_PER_LEVEL


def calculate_pallets_per_level(bay_footprint: float, pallet_footprint: float) -> int:
    """Pallets that fit on one bay level; a bay always holds at least two."""
    if not pallet_footprint or pallet_footprint <= 0:
        return MIN_PALLETS_PER_LEVEL
    fitted = bay_footprint / pallet_footprint
    if not math.isfinite(fitted):
        return MIN_PALLETS_PER_LEVEL
    return max(math.floor(fitted), MIN_PALLETS_PER_LEVEL)


def calculate_pallet_positions(
    bay_footprint: float,
    pallet_footprint: float,
    levels: int,
    bay_count: int,
    pallets_per_level_override: Optional[int] = None,
) -> PalletPositions:
    is_overridden = pallets_per_level_override is not None and pallets_per_level_override > 0
    if is_overridden:
        pallets_per_level = pallets_per_level_override
    else:
        pallets_per_level = calculate_pallets_per_level(bay_footprint, pallet_footprint)

    return PalletPositions(
        pallets_per_level=pallets_per_level,
        total_pallet_positions=bay_count * pallets_per_level * levels,
        is_overridden=is_overridden,
    )
