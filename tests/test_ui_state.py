"""Tests for sidebar session state and the results tab metric cards."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from streamlit.testing.v1 import AppTest

from models.configuration import WarehouseConfig
from engine.capacity_engine import compute_capacity
from data.session_store import config_key, rule_key
from tabs.tab_capacity_results import space_gain_metric

APP_PATH = os.path.join(os.path.dirname(__file__), "..", "app.py")


def make_app():
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    return at


class TestSpaceGainMetric:
    def test_loss_uses_normal_delta_color(self):
        # A negative allocation gives negative mezzanine volume
        result = compute_capacity(WarehouseConfig(percent_racking=-10))
        metric = space_gain_metric(result)

        assert result.derived.extra_cbm < 0
        assert metric["delta"].startswith("-")
        assert metric["delta_color"] == "normal"

    def test_gain(self):
        metric = space_gain_metric(compute_capacity(WarehouseConfig()))
        assert metric["delta_color"] == "normal"
        assert metric["value"].endswith("x")

    def test_undefined_improvement(self):
        metric = space_gain_metric(compute_capacity(WarehouseConfig(baseline_cbm=0)))
        assert metric["value"] == "n/a"


class TestSidebarState:
    def test_app_renders_without_exception(self):
        at = make_app()
        assert not at.exception

    def test_direct_areas_survive_mode_toggle(self):
        at = make_app()
        direct_toggle = config_key("use_direct_area_input")

        at.toggle(key=direct_toggle).set_value(True).run()
        at.number_input(key=config_key("hd_rack_area")).set_value(50000.0).run()
        at.number_input(key=config_key("mezzanine_area")).set_value(12000.0).run()
        at.toggle(key=direct_toggle).set_value(False).run()
        at.toggle(key=direct_toggle).set_value(True).run()

        assert not at.exception
        assert at.number_input(key=config_key("hd_rack_area")).value == 50000.0
        assert at.number_input(key=config_key("mezzanine_area")).value == 12000.0

    def test_load_defaults_restores_rule_config(self):
        at = make_app()
        at.number_input(key=rule_key("decking_safety")).set_value(1.5).run()
        assert at.session_state[rule_key("decking_safety")] == pytest.approx(1.5)

        at.button(key="load_defaults").click().run()

        assert at.session_state[rule_key("decking_safety")] == pytest.approx(1.10)
        assert not at.exception


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
