"""Flatten a result into (label, value) rows for display and export."""

from __future__ import annotations
from typing import Any, List, Tuple

from services.formatting import format_eur, format_tons
from tariffs.models import TariffResult

TOTAL_LABEL = "Total per delivery"

METHOD_LABELS = {
    "ceil": "Round up (ceil)",
    "floor": "Round down (floor)",
    "nearest": "Nearest",
    "interp": "Interpolation (linear)",
}


def result_rows(result: TariffResult, source_name: str = "") -> List[Tuple[str, Any]]:
    rows: List[Tuple[str, Any]] = []
    if source_name:
        rows.append(("Tariff file", source_name))
    rows.extend([
        ("Prefix", result.prefix),
        ("Weight (t)", format_tons(result.weight_tons)),
        ("Tier method", METHOD_LABELS.get(result.method, result.method)),
        ("Tier used", result.tier_label),
        ("Tier tariff", format_eur(result.tier_tariff)),
        ("Deliveries", f"{result.deliveries:g}"),
        ("Surcharge per delivery", format_eur(result.surcharge_per_delivery)),
        ("Surcharges", format_eur(result.surcharge_total)),
        (TOTAL_LABEL, format_eur(result.total)),
    ])
    return rows
