"""
Sample Tariff Workbook Builder
==============================

Writes a demo tier tariff spreadsheet for the portal.

Output:
- data/sample_tariffs.xlsx
  - Columns: "Postcode", "1 ton" … "24 ton"
  - One row per German 2-digit postcode region (01-99)
  - Value = fixed tariff per delivery (€)

Usage:
    python tools/build_sample_tariffs.py

Requirements:
    pip install pandas xlsxwriter
"""

from __future__ import annotations
from pathlib import Path
import pandas as pd


# ============================================================================
# CONFIGURATION
# ============================================================================

OUTPUT_XLSX = Path("data/sample_tariffs.xlsx")
TIERS = list(range(1, 25))
BASE_RATE = 95.0
PER_TON = 11.5


# ============================================================================
# BUILDER
# ============================================================================

def build_rows() -> list[dict]:
    """
    One row per postcode region.

    Rates rise with tonnage and with distance from region 40
    (roughly the Ruhr area), rounded to whole euros.
    """
    rows = []
    for region in range(1, 100):
        distance_factor = 1.0 + abs(region - 40) / 100.0
        row = {"Postcode": f"{region:02d}000"}
        for tons in TIERS:
            row[f"{tons} ton"] = round((BASE_RATE + PER_TON * tons) * distance_factor)
        rows.append(row)
    return rows


def build_workbook(path: Path = OUTPUT_XLSX) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame(build_rows())
    with pd.ExcelWriter(path, engine="xlsxwriter") as xw:
        df.to_excel(xw, index=False, sheet_name="Tarieven")
        xw.sheets["Tarieven"].set_column(0, 0, 12)
    return path


# ============================================================================
# MAIN
# ============================================================================

def main():
    """Write the sample workbook."""
    path = build_workbook()
    print(f"✅ Wrote {path} ({len(TIERS)} tiers, 99 regions)")


if __name__ == "__main__":
    main()
