"""Printable tariff quote."""

from __future__ import annotations
from datetime import datetime
from html import escape
from typing import List, Tuple, Any
import streamlit as st
import streamlit.components.v1 as components

from .rows import TOTAL_LABEL

# Rows that describe the lookup; the rest are amounts
QUERY_LABELS = ("Tariff file", "Prefix", "Weight (t)", "Tier method", "Tier used")


def export_to_print(
    export_rows: List[Tuple[str, Any]],
    title: str
) -> None:
    """Render print button with HTML popup."""
    if st.button("Print", use_container_width=True, key="print_result"):
        html = generate_print_html(export_rows, title)
        components.html(html, height=0)
        st.toast("Opening print dialog…", icon="🖨️")


def _row_html(label: Any, value: Any) -> str:
    css = "total" if label == TOTAL_LABEL else ("query" if label in QUERY_LABELS else "amount")
    text = "" if value in (None, "") else escape(str(value))
    return f"<tr class='{css}'><th scope='row'>{escape(str(label))}</th><td>{text}</td></tr>"


def generate_print_html(
    rows: List[Tuple[str, Any]],
    title: str
) -> str:
    """
    Quote sheet: lookup inputs first, amounts below, total per delivery
    highlighted in the last row.
    """
    query = [r for r in rows if r[0] in QUERY_LABELS]
    amounts = [r for r in rows if r[0] not in QUERY_LABELS and r[0] != TOTAL_LABEL]
    totals = [r for r in rows if r[0] == TOTAL_LABEL]

    lookup_html = "".join(_row_html(k, v) for k, v in query)
    amounts_html = "".join(_row_html(k, v) for k, v in amounts + totals)

    return f"""
    <html>
      <head>
        <meta charset="utf-8" />
        <title>Tier tariff quote {escape(title)}</title>
        <style>
          body {{ font-family: Arial, sans-serif; padding: 18px; }}
          h1 {{ font-size: 18px; margin: 0 0 4px; }}
          .issued {{ color:#666; font-size: 11px; margin-bottom: 12px; }}
          h2 {{ font-size: 13px; margin: 14px 0 4px; color:#333; }}
          table {{ width:60%; border-collapse:collapse; }}
          th, td {{ padding:4px 8px; font-size:12px; border-bottom:1px solid #e5e5e5; }}
          th {{ text-align:left; font-weight:normal; color:#444; }}
          td {{ text-align:right; font-variant-numeric: tabular-nums; }}
          tr.total th, tr.total td {{ font-weight:bold; font-size:14px;
                                      border-top:2px solid #222; border-bottom:none; }}
          @media print {{ @page {{ size: A4 portrait; margin: 15mm; }} }}
        </style>
      </head>
      <body>
        <h1>🚚 Tier tariff quote: {escape(title)}</h1>
        <div class="issued">Issued {datetime.now().strftime('%d-%m-%Y %H:%M')}</div>
        <h2>Lookup</h2>
        <table>{lookup_html}</table>
        <h2>Costs</h2>
        <table>{amounts_html}</table>
        <script>window.onload = () => window.print();</script>
      </body>
    </html>
    """
