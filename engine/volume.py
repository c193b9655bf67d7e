"""Rack, mezzanine and total storage volume in CBM."""

from models.results import BayVolume, MezzanineVolume
from config.defaults import CUFT_PER_CBM, DEFAULT_MEZZ_LEVELS


def cuft_to_cbm(volume_cuft: float) -> float:
    return volume_cuft / CUFT_PER_CBM


def calculate_bay_volume(
    bay_length: float,
    bay_width: float,
    level_height: float,
    levels: int,
) -> BayVolume:
    volume_per_level_cuft = bay_length * bay_width * level_height
    volume_per_bay_cuft = volume_per_level_cuft * levels
    return BayVolume(
        volume_per_level_cuft=volume_per_level_cuft,
        volume_per_bay_cuft=volume_per_bay_cuft,
        volume_per_bay_cbm=cuft_to_cbm(volume_per_bay_cuft),
    )


def calculate_rack_cbm(bay_count: int, volume_per_bay_cbm: float) -> float:
    return bay_count * volume_per_bay_cbm


def calculate_mezzanine_cbm(
    mezz_area: float,
    mezz_clear_height: float,
    mezz_levels: int = DEFAULT_MEZZ_LEVELS,
) -> MezzanineVolume:
    """Usable mezzanine volume across all stacked decks."""
    mezz_total_cuft = mezz_area * (mezz_clear_height or 0.0) * mezz_levels
    return MezzanineVolume(
        mezz_total_cuft=mezz_total_cuft,
        mezz_total_cbm=cuft_to_cbm(mezz_total_cuft),
        mezz_levels=mezz_levels,
    )


def calculate_total_cbm(baseline_cbm: float, total_rack_cbm: float, mezz_total_cbm: float) -> float:
    return baseline_cbm + total_rack_cbm + mezz_total_cbm
