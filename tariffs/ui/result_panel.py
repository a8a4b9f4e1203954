"""Result panel: summary metrics, breakdown and exports."""

from __future__ import annotations
from typing import Optional
import streamlit as st

from services.formatting import format_eur, format_tons
from tariffs.exporters import export_to_excel, export_to_print, result_rows
from tariffs.models import TariffResult


def render_result_panel(
    result: Optional[TariffResult],
    message: Optional[str],
    source_name: str = "",
) -> None:
    """Show either the error message, the result, or a hint."""
    if message:
        st.error(f"ℹ️ {message}")
        return

    if result is None:
        st.caption("⚙️ Fill in the form and click Calculate.")
        return

    st.markdown("---")
    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Prefix", result.prefix)
        st.metric("Weight (t)", format_tons(result.weight_tons))
    with c2:
        st.metric("Tier used", result.tier_label)
        st.metric("Tier tariff", format_eur(result.tier_tariff))
    with c3:
        st.metric("Surcharges", format_eur(result.surcharge_total))
        st.metric("Total per delivery", format_eur(result.total))

    rows = result_rows(result, source_name)
    with st.expander("📊 Detailed Breakdown"):
        st.write(dict(rows))

    title = f"{result.prefix} {result.tier_label}"
    e1, e2 = st.columns(2)
    with e1:
        export_to_excel(rows, title)
    with e2:
        export_to_print(rows, title)
