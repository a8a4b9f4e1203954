"""
Tests for tools/build_sample_tariffs.py

Run with: pytest tests/test_sample_tariffs.py -v
"""

import importlib.util
from pathlib import Path

import pytest

from tariffs.loader import read_tariff_file
from tariffs.models import TariffQuery
from tariffs.resolver import resolve

TOOL_PATH = Path(__file__).resolve().parents[1] / "tools" / "build_sample_tariffs.py"


@pytest.fixture(scope="module")
def tool():
    spec = importlib.util.spec_from_file_location("build_sample_tariffs", TOOL_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_rows_cover_all_regions(tool):
    rows = tool.build_rows()
    assert len(rows) == 99
    assert rows[0]["Postcode"] == "01000"
    assert list(rows[0])[1:] == [f"{t} ton" for t in tool.TIERS]


def test_workbook_loads_and_resolves(tool, tmp_path):
    path = tool.build_workbook(tmp_path / "sample.xlsx")
    table = read_tariff_file(path)
    assert [t.tons for t in table.tiers] == tool.TIERS

    result = resolve(table, TariffQuery("10115", "12.5", unit="ton"))
    expected = round((tool.BASE_RATE + tool.PER_TON * 13) * (1.0 + 30 / 100.0))
    assert result.tier_label == "13 ton"
    assert result.tier_tariff == pytest.approx(expected)
    assert result.total == pytest.approx(expected + 35)
