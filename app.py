"""
Streamlit entrypoint for the Transport Cost Portal (tier tariff).
- Excel: columns "Postcode", "1 ton", "2 ton", … (value = fixed tariff per delivery)
- The weight only decides which tier applies (ceil/floor/nearest/interp)
- Total = tier tariff + (deliveries × surcharge)
- Default surcharge €35 per delivery
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root to Python path FIRST
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import streamlit as st

from services.logging_config import configure_logging
from services.settings import load_settings
from tariffs.ui import (
    handle_compute_request,
    init_form_state,
    render_query_form,
    render_result_panel,
    render_upload_panel,
)

# -----------------------------------------------------------------------------
# Page setup
# -----------------------------------------------------------------------------
st.set_page_config(page_title="Transport Cost Portal", layout="wide")

settings = load_settings()
configure_logging(settings.log_level)
init_form_state(settings)

st.title("🚚 Transport Cost Portal (tier tariff)")
st.markdown("---")

# -----------------------------------------------------------------------------
# Upload | Calculate
# -----------------------------------------------------------------------------
upload_col, calc_col = st.columns(2)

with upload_col:
    table = render_upload_panel(settings)

with calc_col:
    render_query_form()
    handle_compute_request(settings)
    render_result_panel(
        st.session_state.get("result"),
        st.session_state.get("message"),
        source_name=table.source_name if table is not None else "",
    )
