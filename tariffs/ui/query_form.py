"""Query form: postcode, weight, deliveries, surcharge and tier method."""

from __future__ import annotations
import logging
from typing import Dict
import streamlit as st

from services.settings import Settings
from tariffs.errors import TariffError
from tariffs.exporters.rows import METHOD_LABELS
from tariffs.models import TIER_METHODS, WEIGHT_UNITS, TariffQuery
from tariffs.resolver import resolve

logger = logging.getLogger(__name__)

SCENARIOS: Dict[str, Dict[str, str]] = {
    "Test: 10115 • 12,5 t": {
        "postcode": "10115", "weight": "12.5", "unit": "ton", "deliveries": "1", "surcharge": "35",
    },
    "Test: 50667 • 8,2 t": {
        "postcode": "50667", "weight": "8.2", "unit": "ton", "deliveries": "1", "surcharge": "35",
    },
}


def init_form_state(settings: Settings) -> None:
    """Seed widget state once per session."""
    for key, default in {
        "postcode": "",
        "weight": "",
        "unit": settings.default_unit,
        "deliveries": "1",
        "surcharge": f"{settings.default_surcharge:g}",
        "tier_method": settings.default_method,
        "result": None,
        "message": None,
        "compute_requested": False,
    }.items():
        st.session_state.setdefault(key, default)


def _request_compute() -> None:
    st.session_state["compute_requested"] = True


def _fill_scenario(values: Dict[str, str]) -> None:
    # Runs as a callback, before the widgets are rebuilt
    st.session_state.update(values)
    _request_compute()


def render_query_form() -> None:
    """Render inputs and buttons; clicks are handled via session state flags."""
    st.subheader("🧮 Calculate")

    st.text_input("Postcode", key="postcode", placeholder="10115")

    c1, c2 = st.columns([3, 1])
    with c1:
        st.text_input("Weight", key="weight", placeholder="12.5")
    with c2:
        st.selectbox("Unit", WEIGHT_UNITS, key="unit")
    st.caption("The weight is only used to pick the *tier*.")

    st.text_input("Number of deliveries", key="deliveries")
    st.text_input("Surcharge per delivery (€)", key="surcharge")
    st.selectbox(
        "Tier method",
        TIER_METHODS,
        key="tier_method",
        format_func=lambda m: METHOD_LABELS.get(m, m),
    )

    b1, b2, b3 = st.columns(3)
    with b1:
        st.button("Calculate", type="primary", key="compute", on_click=_request_compute)
    for col, (label, values) in zip((b2, b3), SCENARIOS.items()):
        with col:
            st.button(label, key=f"scenario_{values['postcode']}", on_click=_fill_scenario, args=(values,))


def current_query() -> TariffQuery:
    """Build the query from the current widget state."""
    ss = st.session_state
    return TariffQuery(
        postcode=ss.get("postcode", ""),
        weight=ss.get("weight", ""),
        unit=ss.get("unit", "kg"),
        deliveries=ss.get("deliveries", "1"),
        surcharge=ss.get("surcharge", ""),
        method=ss.get("tier_method", "ceil"),
    )


def handle_compute_request(settings: Settings) -> None:
    """If Calculate (or a scenario) was clicked, recompute result/message."""
    if not st.session_state.pop("compute_requested", False):
        return

    st.session_state["result"] = None
    st.session_state["message"] = None
    try:
        result = resolve(
            st.session_state.get("tariff_table"),
            current_query(),
            default_surcharge=settings.default_surcharge,
        )
    except TariffError as e:
        logger.info("Lookup failed: %s", e.message)
        st.session_state["message"] = e.message
        return
    st.session_state["result"] = result
