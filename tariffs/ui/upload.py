"""
Tariff Upload UI Component
==========================

File picker for the tariff spreadsheet. A successful upload replaces the
table held in session state; a failed one clears it.

Falls back to the TARIFF_FILE setting when nothing was uploaded.
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Optional
import streamlit as st

from services.settings import Settings
from tariffs.errors import TariffError
from tariffs.loader import SUPPORTED_SUFFIXES, read_tariff_file, table_summary
from tariffs.models import TariffTable


def render_upload_panel(settings: Settings) -> Optional[TariffTable]:
    """
    Render the upload card and keep session state in sync with the file.

    Returns:
        The current tariff table, or None
    """
    st.subheader("📤 Excel upload")
    st.caption("Postcode + columns “1 ton … 24 ton” (value = **fixed amount per delivery**).")

    uploaded = st.file_uploader(
        "Tariff spreadsheet",
        type=[s.lstrip(".") for s in SUPPORTED_SUFFIXES],
        key="tariff_file",
    )

    if uploaded is not None:
        signature = upload_signature(uploaded)
        if st.session_state.get("tariff_file_sig") != signature:
            st.session_state["tariff_file_sig"] = signature
            _load_into_session(uploaded, uploaded.name)
    elif settings.tariff_file and not st.session_state.get("default_file_tried"):
        st.session_state["default_file_tried"] = True
        _load_into_session(settings.tariff_file, str(settings.tariff_file))

    message = st.session_state.get("upload_message")
    if message:
        st.error(f"ℹ️ {message}")

    table = st.session_state.get("tariff_table")
    if table is not None:
        _render_table_caption(table)
    return table


def upload_signature(uploaded: Any) -> str:
    """Streamlit assigns a new file_id to every upload, even of an identical name and size."""
    return uploaded.file_id


def _load_into_session(source: Any, name: str) -> None:
    """Parse the file and replace the table (and any stale result) in session state."""
    st.session_state["result"] = None
    st.session_state["message"] = None
    try:
        table = read_tariff_file(source, filename=name)
    except TariffError as e:
        st.session_state["tariff_table"] = None
        st.session_state["upload_message"] = e.message
        return
    st.session_state["tariff_table"] = table
    st.session_state["upload_message"] = None


def _render_table_caption(table: TariffTable) -> None:
    summary = table_summary(table)
    st.caption(
        f"🔍 Loaded **{summary['rows']}** rows from {Path(summary['file']).name}"
        f" • tiers: {', '.join(summary['tiers']) or 'none'}"
    )
    if not table.tiers:
        st.warning("No tier columns found (expected: 1 ton, 2 ton, …).")
