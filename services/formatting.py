"""Display formatting (nl-NL conventions)."""

from __future__ import annotations
import re


def format_eur(amount: float) -> str:
    """
    Format an amount as Dutch euro currency.

    Examples:
        1234.5  -> '€ 1.234,50'
        -35     -> '€ -35,00'
    """
    sign = "-" if amount < 0 else ""
    grouped = f"{abs(amount):,.2f}"
    dutch = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"€ {sign}{dutch}"


def format_tons(tons: float) -> str:
    """Weight in tons with two decimals."""
    return f"{tons:.2f}"


def slugify(text: str) -> str:
    """
    Convert text to a file-name safe slug.

    Examples:
        '10 13 ton' -> '10_13_ton'
        '12–13 (interp)' -> '12_13_interp'
    """
    text = (text or "").strip().lower()
    text = re.sub(r"[^a-z0-9]+", "_", text)
    text = re.sub(r"_+", "_", text).strip("_")
    return text or "result"
