"""
Value types for the tariff lookup.

Everything here is immutable: a table is built once per upload, a query
once per click, and the resolver turns the two into a fresh result.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

POSTCODE_COLUMN = "Postcode"

TIER_METHODS: Tuple[str, ...] = ("ceil", "floor", "nearest", "interp")
DEFAULT_TIER_METHOD = "ceil"

WEIGHT_UNITS: Tuple[str, ...] = ("kg", "ton")


@dataclass(frozen=True)
class Tier:
    """A weight threshold (whole tons) and the column holding its tariff."""
    tons: int
    column: str


@dataclass(frozen=True)
class TariffTable:
    """Parsed spreadsheet: header, string rows and the tiers found in the header."""
    columns: Tuple[str, ...]
    rows: Tuple[Mapping[str, str], ...]
    tiers: Tuple[Tier, ...] = ()
    source_name: str = ""

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        columns: Optional[Iterable[Any]] = None,
        source_name: str = "",
    ) -> "TariffTable":
        """
        Build a table from dict rows and derive its tiers.

        Args:
            records: Rows as {column: value}; values are stored as text
            columns: Header order. Defaults to the keys of the first row
            source_name: File name, for display only

        Returns:
            TariffTable with tiers sorted by tonnage
        """
        from .tiers import parse_tiers

        rows: List[Dict[str, str]] = []
        for record in records:
            rows.append({
                str(k).strip(): "" if v is None else str(v)
                for k, v in record.items()
            })

        if columns is None:
            header = tuple(rows[0].keys()) if rows else ()
        else:
            header = tuple(str(c).strip() for c in columns)

        return cls(
            columns=header,
            rows=tuple(rows),
            tiers=tuple(parse_tiers(header)),
            source_name=source_name,
        )

    @property
    def is_empty(self) -> bool:
        return not self.rows


@dataclass(frozen=True)
class TariffQuery:
    """
    One lookup request as entered in the form.

    Weight, deliveries and surcharge are kept as entered (text or number);
    the resolver parses and validates them.
    """
    postcode: str
    weight: Any
    unit: str = "kg"
    deliveries: Any = 1
    surcharge: Any = 35
    method: str = DEFAULT_TIER_METHOD


@dataclass(frozen=True)
class TierSelection:
    """
    Outcome of the tier selection.

    For ceil/floor/nearest, and for interp on an exact tier, lower and
    upper are the same tier.
    """
    lower: Tier
    upper: Tier
    tons: float
    method: str

    @property
    def is_interpolated(self) -> bool:
        return self.lower.tons != self.upper.tons

    @property
    def fraction(self) -> float:
        if not self.is_interpolated:
            return 0.0
        return (self.tons - self.lower.tons) / (self.upper.tons - self.lower.tons)

    @property
    def label(self) -> str:
        if self.is_interpolated:
            return f"{self.lower.tons}–{self.upper.tons} (interp)"
        return self.lower.column


@dataclass(frozen=True)
class TariffResult:
    """Everything the result panel shows for one computation."""
    prefix: str
    weight_tons: float
    tier_label: str
    tier_tariff: float
    deliveries: float
    surcharge_per_delivery: float
    surcharge_total: float
    total: float
    method: str = DEFAULT_TIER_METHOD
    selection: Optional[TierSelection] = field(default=None, compare=False)
