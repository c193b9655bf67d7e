"""Tests for CSV / RFQ export helpers."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from datetime import datetime

import pytest

from models.configuration import WarehouseConfig
from engine.capacity_engine import compute_capacity
from data.exporter import format_number, boq_to_dataframe, results_to_csv, generate_rfq_text


def make_result():
    config = WarehouseConfig(length=300, width=360, use_module_method=True)
    return config, compute_capacity(config)


class TestFormatNumber:
    def test_thousands_and_decimals(self):
        assert format_number(29971.456) == "29,971.46"
        assert format_number(6552, 0) == "6,552"

    @pytest.mark.parametrize("value", [None, float("nan"), float("inf"), "abc"])
    def test_missing_values_print_zero(self, value):
        assert format_number(value) == "0"


class TestBoQDataFrame:
    def test_rows_in_order(self):
        _, result = make_result()
        df = boq_to_dataframe(result)

        assert list(df.columns) == ["Item", "Quantity", "Description"]
        assert df["Item"].tolist()[0] == "upright_pairs"
        assert df["Quantity"].tolist()[:5] == [493, 3539, 3604, 2071, 936]


class TestResultsToCsv:
    def test_sections_present(self):
        config, result = make_result()
        csv_text = results_to_csv(config, result)

        assert csv_text.startswith("WAREHOUSE CAPACITY CALCULATOR - BILL OF QUANTITIES")
        for section in ["INPUT PARAMETERS", "CAPACITY RESULTS", "BILL OF QUANTITIES"]:
            assert section in csv_text
        assert "upright_pairs,493,Upright frames (42 ft height)" in csv_text
        assert "Total Bays,468,count" in csv_text
        assert "Aisle Type,Standard,-" in csv_text


class TestRfqText:
    def test_lists_boq_and_summary(self):
        config, result = make_result()
        text = generate_rfq_text(config, result)

        assert text.splitlines()[0] == "WAREHOUSE RACKING SYSTEM - REQUEST FOR QUOTATION"
        assert "Total Rack Bays: 468 bays" in text
        assert "Total Rack Height: 42 ft" in text
        assert "493x Upright frames (42 ft height)" in text
        assert "Generated:" not in text

    def test_timestamp_is_explicit(self):
        config, result = make_result()
        text = generate_rfq_text(config, result, generated_at=datetime(2024, 5, 1, 9, 30))
        assert text.endswith("Generated: 2024-05-01 09:30")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
