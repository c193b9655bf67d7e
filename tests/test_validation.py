"""Tests for the validation rules."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from config.defaults import FINDING_CONFIGURATION, FINDING_ADVISORY, FINDING_DEGENERATE_INPUT
from models.configuration import WarehouseConfig
from engine.capacity_engine import compute_capacity
from engine.validation import validate_capacity


def fields(findings):
    return [f.field for f in findings]


def degenerate_fields(result):
    return [f.field for f in result.validation.errors if f.kind == FINDING_DEGENERATE_INPUT]


class TestConfigurationErrors:
    def test_rack_height_exceeds_clear_height(self):
        result = compute_capacity(WarehouseConfig(clear_height=30))

        assert fields(result.validation.errors) == ["levels"]
        error = result.validation.errors[0]
        assert error.kind == FINDING_CONFIGURATION
        assert "42.0 ft" in error.message

    def test_rack_exactly_at_clear_height_is_fine(self):
        result = compute_capacity(WarehouseConfig(clear_height=42))
        assert result.validation.errors == []

    def test_missing_clear_height_skips_height_check(self):
        result = compute_capacity(WarehouseConfig(clear_height=None))
        assert "levels" not in fields(result.validation.errors)

    def test_percentage_overflow(self):
        result = compute_capacity(WarehouseConfig(percent_racking=120))

        assert fields(result.validation.errors) == ["percent_racking"]
        assert result.areas.staging_area < 0

    def test_direct_mode_overflow(self):
        config = WarehouseConfig(
            area=100000, use_direct_area_input=True, hd_rack_area=80000, mezzanine_area=40000,
        )
        result = compute_capacity(config)

        assert fields(result.validation.errors) == ["hd_rack_area"]
        assert result.areas.staging_area == 0

    def test_errors_keep_rule_order(self):
        result = compute_capacity(WarehouseConfig(clear_height=30, percent_racking=150))
        assert fields(result.validation.errors) == ["levels", "percent_racking"]


class TestWarnings:
    def test_low_bay_count(self):
        result = compute_capacity(WarehouseConfig(area=300))

        assert result.bay_count < 5
        assert fields(result.validation.warnings) == ["bay_count"]
        assert result.validation.warnings[0].kind == FINDING_ADVISORY

    def test_narrow_vna_aisle(self):
        result = compute_capacity(WarehouseConfig(is_vna=True, main_aisle_width=6))
        assert fields(result.validation.warnings) == ["main_aisle_width"]

    def test_vna_at_threshold_is_fine(self):
        result = compute_capacity(WarehouseConfig(is_vna=True, main_aisle_width=7))
        assert result.validation.warnings == []

    def test_narrow_aisle_without_vna_flag_is_not_flagged(self):
        result = compute_capacity(WarehouseConfig(is_vna=False, main_aisle_width=6))
        assert result.validation.warnings == []

    def test_cramped_mezzanine(self):
        result = compute_capacity(WarehouseConfig(mezz_clear_height=5.5))
        assert fields(result.validation.warnings) == ["mezz_clear_height"]

    def test_warnings_do_not_invalidate(self):
        result = compute_capacity(WarehouseConfig(is_vna=True, main_aisle_width=6, mezz_clear_height=5))
        assert len(result.validation.warnings) == 2
        assert result.validation.is_valid

    def test_rule_config_thresholds(self):
        config = WarehouseConfig()
        result = compute_capacity(config)
        validation = validate_capacity(config, result, {"min_reliable_bay_count": 1000})
        assert fields(validation.warnings) == ["bay_count"]


class TestDegenerateInput:
    def test_zero_area(self):
        result = compute_capacity(WarehouseConfig(area=0))

        assert degenerate_fields(result) == ["area"]
        assert result.bay_count == 0

    def test_zero_baseline(self):
        result = compute_capacity(WarehouseConfig(baseline_cbm=0))

        assert degenerate_fields(result) == ["baseline_cbm"]
        assert result.derived.space_improvement_factor is None
        assert not result.validation.is_valid

    def test_zero_total_capacity(self):
        result = compute_capacity(WarehouseConfig(area=0, baseline_cbm=0))
        assert degenerate_fields(result) == ["area", "total_cbm", "baseline_cbm"]

    def test_zero_overhead_multiplier(self):
        result = compute_capacity(WarehouseConfig(aisle_overhead_multiplier=0))

        assert degenerate_fields(result) == ["aisle_overhead_multiplier"]
        assert result.bay_count == 0

    def test_negative_module_length(self):
        config = WarehouseConfig(length=300, width=360, use_module_method=True, main_aisle_width=-30)
        result = compute_capacity(config)
        assert degenerate_fields(result) == ["main_aisle_width", "cross_aisle_width"]

    def test_non_finite_input_is_reported_not_raised(self):
        result = compute_capacity(WarehouseConfig(area=float("nan")))

        assert "area" in degenerate_fields(result)
        assert result.bay_count == 0

    def test_infinite_input(self):
        result = compute_capacity(WarehouseConfig(baseline_cbm=float("inf")))
        assert "baseline_cbm" in degenerate_fields(result)

    @pytest.mark.parametrize("levels", [float("inf"), float("nan")])
    def test_non_finite_levels_are_reported_not_raised(self, levels):
        result = compute_capacity(WarehouseConfig(levels=levels))

        assert "levels" in degenerate_fields(result)
        assert result.boq.beam_pairs.quantity == 0
        assert result.boq.decking_panels.quantity == 0
        assert len(result.explanation_steps) == 8


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
