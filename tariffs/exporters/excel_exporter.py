"""Excel export functionality."""

from __future__ import annotations
from io import BytesIO
from datetime import datetime
from typing import List, Tuple, Any
import pandas as pd
import streamlit as st

from services.formatting import slugify

SHEET_NAME = "Tariff"


def build_excel(export_rows: List[Tuple[str, Any]]) -> bytes:
    """Write the rows to a one-sheet workbook (Item / Value)."""
    buf = BytesIO()
    bd_rows = [
        {"Item": k, "Value": ("" if v in (None, "") else v)}
        for k, v in export_rows
    ]

    with pd.ExcelWriter(buf, engine="xlsxwriter") as xw:
        df = pd.DataFrame(bd_rows, columns=["Item", "Value"])
        df.to_excel(xw, index=False, sheet_name=SHEET_NAME)
        ws = xw.sheets[SHEET_NAME]
        ws.set_column(0, 0, 32)
        ws.set_column(1, 1, 22)

    return buf.getvalue()


def export_to_excel(
    export_rows: List[Tuple[str, Any]],
    title: str
) -> None:
    """Render Excel download button."""
    calc_id = datetime.now().strftime("%Y%m%d-%H%M%S")
    name_for_file = slugify(title)

    st.download_button(
        "Download Excel",
        data=build_excel(export_rows),
        file_name=f"tariff_{name_for_file}_{calc_id}.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        use_container_width=True,
    )
