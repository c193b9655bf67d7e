"""Tests for the end-to-end capacity pipeline."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from config.defaults import CUFT_PER_CBM
from models.configuration import WarehouseConfig
from models.results import ModuleBayCount, EmpiricalBayCount
from engine.capacity_engine import compute_capacity, use_module_method


def make_config(**overrides):
    """Reference warehouse: 300 x 360 ft, 9.5 x 3.5 ft bays, 7 levels of 6 ft."""
    values = dict(
        length=300, width=360, area=108000, clear_height=45, baseline_cbm=7500,
        bay_length=9.5, bay_width=3.5, level_height=6, levels=7,
        percent_racking=60, mezz_percent=30, small_gap=1.5, main_aisle_width=10,
        is_vna=False, aisle_overhead_multiplier=1.5, pallet_footprint=12.92,
        mezz_clear_height=7.2, mezz_levels=1, use_module_method=True,
    )
    values.update(overrides)
    return WarehouseConfig(**values)


class TestMethodSelection:
    def test_module_when_requested_with_dimensions(self):
        assert use_module_method(make_config()) is True

    def test_empirical_when_not_requested(self):
        assert use_module_method(make_config(use_module_method=False)) is False

    def test_empirical_when_dimensions_missing(self):
        config = make_config(length=0, width=0)
        assert use_module_method(config) is False
        result = compute_capacity(config)
        assert isinstance(result.bay_count_details, EmpiricalBayCount)
        assert result.method == "empirical"


class TestComputeCapacity:
    def test_standard_module_layout(self):
        result = compute_capacity(make_config())

        assert isinstance(result.bay_count_details, ModuleBayCount)
        assert result.bay_count == 468
        assert result.total_rack_height == 42
        assert result.total_rack_cbm == pytest.approx(468 * 1396.5 / CUFT_PER_CBM)
        assert result.mezz_cbm == pytest.approx(19440 * 7.2 / CUFT_PER_CBM)
        assert result.total_cbm == pytest.approx(7500 + result.total_rack_cbm + result.mezz_cbm)
        assert result.total_pallet_positions == 6552
        assert result.boq.upright_pairs.quantity == 493
        assert result.validation.errors == []
        assert result.validation.warnings == []
        assert result.validation.is_valid

    def test_vna_layout_has_more_bays_and_a_warning(self):
        result = compute_capacity(make_config(main_aisle_width=6, is_vna=True, aisle_overhead_multiplier=1.2))

        assert result.bay_count == 814
        assert [w.field for w in result.validation.warnings] == ["main_aisle_width"]

    def test_default_config_uses_empirical_estimate(self):
        result = compute_capacity(WarehouseConfig())

        assert result.method == "empirical"
        assert result.areas.total_area == 108000
        assert result.bay_count == 909
        assert result.validation.is_valid

    def test_rack_taller_than_building(self):
        result = compute_capacity(make_config(clear_height=30))

        assert len(result.validation.errors) == 1
        assert result.validation.errors[0].field == "levels"
        # Numbers are still produced alongside the error
        assert result.bay_count == 468
        assert result.total_cbm > 0

    def test_zero_mezzanine(self):
        result = compute_capacity(make_config(mezz_percent=0))

        assert result.mezz_cbm == 0
        assert result.areas.mezz_area == 0

    def test_mezzanine_decks_multiply_volume(self):
        single = compute_capacity(make_config(mezz_levels=1))
        double = compute_capacity(make_config(mezz_levels=2))
        assert double.mezz_cbm == pytest.approx(2 * single.mezz_cbm)

    def test_small_warehouse_warns_on_bay_count(self):
        result = compute_capacity(make_config(length=40, width=40, area=1600))

        assert result.bay_count == 4
        assert "bay_count" in [w.field for w in result.validation.warnings]

    def test_direct_area_input_is_threaded_through(self):
        config = make_config(
            use_module_method=False, use_direct_area_input=True,
            hd_rack_area=49875, mezzanine_area=10000,
        )
        result = compute_capacity(config)

        assert result.areas.use_direct_area_input is True
        assert result.areas.racking_area == 59875
        assert result.bay_count == 1000  # 49875 / (33.25 * 1.5)

    def test_cross_aisle_width_affects_module_rows(self):
        result = compute_capacity(make_config(cross_aisle_width=6))
        assert result.bay_count_details.number_of_rows == 37
        assert result.bay_count == 18 * 37

    def test_pallet_override(self):
        result = compute_capacity(make_config(pallets_per_level_override=3))
        assert result.total_pallet_positions == 468 * 3 * 7

    def test_explanation_steps_cover_pipeline(self):
        result = compute_capacity(make_config())
        assert len(result.explanation_steps) == 8
        assert "module method" in result.explanation_steps[2]

    def test_same_config_same_result(self):
        config = make_config(is_vna=True, main_aisle_width=6)
        assert compute_capacity(config) == compute_capacity(config)

    def test_rule_config_flows_to_boq(self):
        result = compute_capacity(make_config(), rule_config={"beam_safety": 1.0})
        assert result.boq.beam_pairs.quantity == 468 * 7


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
