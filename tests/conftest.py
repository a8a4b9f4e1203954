"""Shared fixtures: small in-memory tariff tables."""

import pytest

from tariffs.models import TariffTable

COLUMNS = ["Postcode", "Region", "1 ton", "5 ton", "10 ton", "13 ton", "24 ton"]

ROWS = [
    {"Postcode": "10115", "Region": "Berlin",
     "1 ton": "100", "5 ton": "150", "10 ton": "200", "13 ton": "260,50", "24 ton": "400"},
    {"Postcode": "50667", "Region": "Köln",
     "1 ton": "90", "5 ton": "140", "10 ton": "180", "13 ton": "230", "24 ton": "350"},
    # Broken row: empty and non-numeric tier cells
    {"Postcode": "D-80331", "Region": "München",
     "1 ton": "120", "5 ton": "", "10 ton": "abc", "13 ton": "300", "24 ton": "480"},
]


@pytest.fixture
def tariff_table():
    """Three regions, tiers 1/5/10/13/24 ton."""
    return TariffTable.from_records(ROWS, columns=COLUMNS, source_name="tariffs.xlsx")


@pytest.fixture
def no_tier_table():
    """Postcode rows but no tier columns."""
    return TariffTable.from_records(
        [{"Postcode": "10115", "Price": "100"}],
        source_name="flat.csv",
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove portal settings from the environment."""
    for name in (
        "TARIFF_FILE",
        "TARIFF_DEFAULT_SURCHARGE",
        "TARIFF_DEFAULT_METHOD",
        "TARIFF_DEFAULT_UNIT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
