"""Input parsing helpers: numbers, postcodes, weights and surcharges."""

from __future__ import annotations
import math
import re
from typing import Any, Optional

from .errors import InvalidPostcode, InvalidWeight

DEFAULT_DELIVERIES = 1.0
DEFAULT_SURCHARGE = 35.0

KG_PER_TON = 1000.0

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_NON_DIGITS = re.compile(r"[^0-9]")

_TON_UNITS = ("t", "ton", "tons", "tonne", "tonnes")


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a number leniently, the way spreadsheet users type them.

    The first comma is read as the decimal separator and only the leading
    numeric part of the text counts ("12,5 t" -> 12.5).

    Returns:
        Finite float, or None when nothing numeric was found
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else None

    text = str(value).replace(",", ".", 1)
    match = _LEADING_NUMBER.match(text)
    if not match:
        return None
    try:
        number = float(match.group(1))
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def postcode_digits(postcode: Any) -> str:
    """Strip everything except ASCII digits."""
    if postcode is None:
        return ""
    return _NON_DIGITS.sub("", str(postcode).strip())


def extract_prefix(postcode: Any) -> str:
    """
    Two-digit lookup prefix of a postcode.

    Raises:
        InvalidPostcode: If fewer than 2 digits are present
    """
    digits = postcode_digits(postcode)
    if len(digits) < 2:
        raise InvalidPostcode()
    return digits[:2]


def to_tons(weight: Any, unit: str = "kg") -> float:
    """
    Normalize a weight to tons.

    Args:
        weight: Weight as entered (decimal comma accepted)
        unit: "kg" or one of the ton spellings ("t", "ton", "tonne", ...)

    Raises:
        InvalidWeight: If the weight is missing, not numeric or <= 0
        ValueError: If the unit is unknown
    """
    value = parse_number(weight)
    if value is None or value <= 0:
        raise InvalidWeight()

    unit_key = (unit or "").strip().lower()
    if unit_key == "kg":
        return value / KG_PER_TON
    if unit_key in _TON_UNITS:
        return value
    raise ValueError(f"Unknown weight unit: {unit!r}")


def coerce_deliveries(value: Any) -> float:
    """Number of deliveries, at least 1; invalid input counts as 1."""
    number = parse_number(value)
    if number is None:
        return DEFAULT_DELIVERIES
    return max(1.0, number)


def coerce_surcharge(value: Any, default: float = DEFAULT_SURCHARGE) -> float:
    """Surcharge per delivery, at least 0; invalid input falls back to the default."""
    number = parse_number(value)
    if number is None:
        return float(default)
    return max(0.0, number)
