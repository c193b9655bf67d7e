"""Single-bay and module dimensions."""

from models.results import BayGeometry


def calculate_bay_geometry(
    bay_length: float,
    bay_width: float,
    level_height: float,
    levels: int,
) -> BayGeometry:
    """Footprint, stacked height and per-level volume (cu.ft) of one bay."""
    bay_footprint = bay_length * bay_width
    return BayGeometry(
        bay_footprint=bay_footprint,
        total_rack_height=level_height * levels,
        volume_per_level_cuft=bay_footprint * level_height,
    )


def calculate_module_length(bay_length: float, small_gap: float, aisle_width: float) -> float:
    """Module pattern: bay + small gap + bay + aisle."""
    return 2 * bay_length + small_gap + aisle_width
