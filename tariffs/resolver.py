"""
Tariff Resolver
===============

Pure lookup: (TariffTable, TariffQuery) -> TariffResult.

Steps:
1. Weight -> tons (InvalidWeight)
2. Postcode -> 2-digit prefix (InvalidPostcode)
3. First row with the same prefix (NoMatchingRow)
4. Tier columns present (NoTierColumns)
5. Clamp + select tier(s) per method
6. Read the tier tariff, interpolating if needed (InvalidTariffCell)
7. Total = tariff + deliveries × surcharge

The tier tariff is a fixed amount per delivery; the weight only decides
which tier applies.
"""

from __future__ import annotations
import logging
from typing import Mapping, Optional

from .errors import InvalidTariffCell, MissingTable, NoMatchingRow, NoTierColumns
from .models import POSTCODE_COLUMN, TariffQuery, TariffResult, TariffTable, TierSelection
from .parsing import (
    DEFAULT_SURCHARGE,
    coerce_deliveries,
    coerce_surcharge,
    extract_prefix,
    parse_number,
    postcode_digits,
    to_tons,
)
from .tiers import select_tier

logger = logging.getLogger(__name__)


def find_row(table: TariffTable, prefix: str) -> Mapping[str, str]:
    """
    First row whose postcode starts with the given two digits.

    Raises:
        NoMatchingRow: If no row matches
    """
    for row in table.rows:
        if postcode_digits(row.get(POSTCODE_COLUMN, ""))[:2] == prefix:
            return row
    raise NoMatchingRow(prefix)


def read_cell(row: Mapping[str, str], column: str) -> float:
    """Numeric value of a tier cell; raises InvalidTariffCell if empty or not numeric."""
    value = parse_number(row.get(column))
    if value is None:
        raise InvalidTariffCell(column)
    return value


def tier_rate(row: Mapping[str, str], selection: TierSelection) -> float:
    """Tariff for the selected tier, linearly interpolated between two tiers."""
    rate_lower = read_cell(row, selection.lower.column)
    if not selection.is_interpolated:
        return rate_lower
    rate_upper = read_cell(row, selection.upper.column)
    return rate_lower + selection.fraction * (rate_upper - rate_lower)


def resolve(
    table: Optional[TariffTable],
    query: TariffQuery,
    default_surcharge: float = DEFAULT_SURCHARGE,
) -> TariffResult:
    """
    Resolve the delivery cost for one query.

    Args:
        table: Parsed tariff table (None if nothing was uploaded)
        query: Form input
        default_surcharge: Surcharge used when the entered one is invalid

    Returns:
        TariffResult

    Raises:
        TariffError: One subclass per failure, see module docstring
    """
    if table is None or table.is_empty:
        raise MissingTable()

    tons = to_tons(query.weight, query.unit)
    prefix = extract_prefix(query.postcode)
    row = find_row(table, prefix)

    if not table.tiers:
        raise NoTierColumns()

    selection = select_tier(table.tiers, tons, query.method)
    rate = tier_rate(row, selection)

    deliveries = coerce_deliveries(query.deliveries)
    surcharge = coerce_surcharge(query.surcharge, default_surcharge)
    surcharge_total = deliveries * surcharge
    total = rate + surcharge_total

    logger.debug(
        "Resolved prefix=%s tons=%.3f method=%s tier=%s rate=%.2f total=%.2f",
        prefix, tons, query.method, selection.label, rate, total,
    )

    return TariffResult(
        prefix=prefix,
        weight_tons=tons,
        tier_label=selection.label,
        tier_tariff=rate,
        deliveries=deliveries,
        surcharge_per_delivery=surcharge,
        surcharge_total=surcharge_total,
        total=total,
        method=query.method,
        selection=selection,
    )
