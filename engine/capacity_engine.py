"""Capacity calculation pipeline: the core business engine."""

import logging
from typing import Optional

from models.configuration import WarehouseConfig
from models.results import CapacityResult
from engine.areas import resolve_total_area, calculate_areas
from engine.geometry import calculate_bay_geometry
from engine.bay_count import count_bays_module, count_bays_empirical
from engine.volume import calculate_bay_volume, calculate_rack_cbm, calculate_mezzanine_cbm, calculate_total_cbm
from engine.pallets import calculate_pallet_positions
from engine.metrics import calculate_derived_metrics
from engine.boq import generate_boq
from engine.explainer import explain_capacity
from engine.validation import validate_capacity

logger = logging.getLogger(__name__)


def use_module_method(config: WarehouseConfig) -> bool:
    """Module layout needs both warehouse dimensions; otherwise estimate from area."""
    return config.use_module_method and config.has_exact_dimensions


def compute_capacity(config: WarehouseConfig, rule_config: Optional[dict] = None) -> CapacityResult:
    """Full pipeline: areas, bays, volumes, pallets, metrics, BoQ, then validation."""
    # Step 1: Areas
    total_area = resolve_total_area(config)
    areas = calculate_areas(
        total_area,
        config.percent_racking,
        config.mezz_percent,
        use_direct_area_input=config.use_direct_area_input,
        hd_rack_area=config.hd_rack_area,
        mezzanine_area=config.mezzanine_area,
    )

    # Step 2: Bay geometry
    geometry = calculate_bay_geometry(config.bay_length, config.bay_width, config.level_height, config.levels)

    # Step 3: Bay count
    if use_module_method(config):
        details = count_bays_module(
            config.length,
            config.width,
            config.bay_length,
            config.bay_width,
            config.small_gap,
            config.main_aisle_width,
            config.cross_aisle_width,
        )
    else:
        details = count_bays_empirical(areas.hd_area, geometry.bay_footprint, config.aisle_overhead_multiplier)
    bay_count = details.bay_count
    logger.debug("Bay count %d via %s method", bay_count, details.method)

    # Step 4: Rack volume
    bay_volume = calculate_bay_volume(config.bay_length, config.bay_width, config.level_height, config.levels)
    total_rack_cbm = calculate_rack_cbm(bay_count, bay_volume.volume_per_bay_cbm)

    # Step 5: Mezzanine volume
    mezzanine = calculate_mezzanine_cbm(areas.mezz_area, config.mezz_clear_height, config.mezz_levels)

    # Step 6: Total
    total_cbm = calculate_total_cbm(config.baseline_cbm, total_rack_cbm, mezzanine.mezz_total_cbm)

    # Step 7: Pallet positions
    pallets = calculate_pallet_positions(
        geometry.bay_footprint,
        config.pallet_footprint,
        config.levels,
        bay_count,
        config.pallets_per_level_override,
    )

    # Step 8: Derived metrics
    derived = calculate_derived_metrics(total_area, total_cbm, config.baseline_cbm)

    # Step 9: BoQ
    boq = generate_boq(
        bay_count,
        config.levels,
        config.bay_length,
        config.bay_width,
        total_rack_height=geometry.total_rack_height,
        rule_config=rule_config,
    )

    explanation = explain_capacity(
        areas=areas,
        bay_footprint=geometry.bay_footprint,
        total_rack_height=geometry.total_rack_height,
        details=details,
        bay_count=bay_count,
        volume_per_bay_cuft=bay_volume.volume_per_bay_cuft,
        volume_per_bay_cbm=bay_volume.volume_per_bay_cbm,
        total_rack_cbm=total_rack_cbm,
        mezz_cbm=mezzanine.mezz_total_cbm,
        mezz_levels=mezzanine.mezz_levels,
        baseline_cbm=config.baseline_cbm,
        total_cbm=total_cbm,
        pallets=pallets,
        sqft_per_cbm=derived.sqft_per_cbm,
        space_improvement_factor=derived.space_improvement_factor,
    )

    result = CapacityResult(
        areas=areas,
        bay_geometry=geometry,
        bay_count=bay_count,
        bay_count_details=details,
        bay_volume=bay_volume,
        mezzanine=mezzanine,
        total_rack_cbm=total_rack_cbm,
        total_cbm=total_cbm,
        baseline_cbm=config.baseline_cbm,
        pallets=pallets,
        derived=derived,
        boq=boq,
        explanation_steps=explanation,
    )

    # Step 10: Validate
    result.validation = validate_capacity(config, result, rule_config)
    return result
