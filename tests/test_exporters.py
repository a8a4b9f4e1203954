"""
Unit Tests for result rows and exports

Run with: pytest tests/test_exporters.py -v
"""

import io

import pandas as pd
import pytest

from tariffs.exporters import build_excel, result_rows
from tariffs.exporters.print_exporter import generate_print_html
from tariffs.models import TariffQuery
from tariffs.resolver import resolve


@pytest.fixture
def result(tariff_table):
    return resolve(tariff_table, TariffQuery("10115", "12.5", unit="ton", deliveries="2", surcharge="35"))


def test_result_rows(result):
    rows = dict(result_rows(result, "tariffs.xlsx"))
    assert rows["Tariff file"] == "tariffs.xlsx"
    assert rows["Prefix"] == "10"
    assert rows["Weight (t)"] == "12.50"
    assert rows["Tier method"] == "Round up (ceil)"
    assert rows["Tier used"] == "13 ton"
    assert rows["Tier tariff"] == "€ 260,50"
    assert rows["Deliveries"] == "2"
    assert rows["Surcharges"] == "€ 70,00"
    assert rows["Total per delivery"] == "€ 330,50"


def test_result_rows_without_source(result):
    labels = [label for label, _ in result_rows(result)]
    assert labels[0] == "Prefix"


def test_build_excel_round_trip(result):
    rows = result_rows(result, "tariffs.xlsx")
    data = build_excel(rows)
    df = pd.read_excel(io.BytesIO(data), sheet_name="Tariff", dtype=str)
    assert list(df.columns) == ["Item", "Value"]
    assert df["Item"].tolist() == [label for label, _ in rows]
    assert df.loc[df["Item"] == "Tier used", "Value"].item() == "13 ton"


def test_print_html_escapes_values(result):
    html = generate_print_html([("Tier used", "<b>13 ton</b>")], "10 <13 ton>")
    assert "&lt;b&gt;13 ton&lt;/b&gt;" in html
    assert "10 &lt;13 ton&gt;" in html
    assert "window.print()" in html


def test_print_html_highlights_total(result):
    html = generate_print_html(result_rows(result, "tariffs.xlsx"), "10 13 ton")
    assert "<tr class='total'><th scope='row'>Total per delivery</th><td>€ 330,50</td></tr>" in html
    assert html.count("class='total'") == 1
    # Lookup inputs are listed before the amounts
    assert html.index("Tier used") < html.index("Tier tariff") < html.index("Total per delivery")
    assert "<tr class='query'><th scope='row'>Prefix</th><td>10</td></tr>" in html
