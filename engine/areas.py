"""Floor area resolution and racking / mezzanine / staging allocation."""

from models.configuration import WarehouseConfig
from models.results import AreaBreakdown


def resolve_total_area(config: WarehouseConfig) -> float:
    """Exact dimensions win over the supplied area when both are positive."""
    if config.has_exact_dimensions:
        return config.length * config.width
    return config.area or 0.0


def calculate_areas(
    total_area: float,
    percent_racking: float,
    mezz_percent: float,
    use_direct_area_input: bool = False,
    hd_rack_area: float = 0.0,
    mezzanine_area: float = 0.0,
) -> AreaBreakdown:
    """Split the floor into racking, mezzanine, HD racking and staging areas.

    Percentage mode leaves staging unclamped so an over-allocation shows up as a
    negative staging area. Direct mode clamps staging at zero; the overflow is
    reported by validation instead.
    """
    if use_direct_area_input:
        hd_area = hd_rack_area or 0.0
        mezz_area = mezzanine_area or 0.0
        racking_area = hd_area + mezz_area
        return AreaBreakdown(
            total_area=total_area,
            racking_area=racking_area,
            mezz_area=mezz_area,
            hd_area=hd_area,
            staging_area=max(0.0, total_area - racking_area),
            use_direct_area_input=True,
        )

    racking_area = total_area * (percent_racking / 100)
    mezz_area = racking_area * (mezz_percent / 100)
    return AreaBreakdown(
        total_area=total_area,
        racking_area=racking_area,
        mezz_area=mezz_area,
        hd_area=racking_area - mezz_area,
        staging_area=total_area - racking_area,
    )
