"""Tier tariff lookup: spreadsheet in, delivery cost out."""

from .errors import (
    TariffError,
    UnreadableFile,
    EmptyTable,
    MissingTable,
    InvalidPostcode,
    InvalidWeight,
    NoMatchingRow,
    NoTierColumns,
    InvalidTariffCell,
)
from .models import Tier, TariffTable, TariffQuery, TierSelection, TariffResult, TIER_METHODS
from .loader import read_tariff_file
from .resolver import resolve
from .tiers import parse_tiers, select_tier

__all__ = [
    "TariffError",
    "UnreadableFile",
    "EmptyTable",
    "MissingTable",
    "InvalidPostcode",
    "InvalidWeight",
    "NoMatchingRow",
    "NoTierColumns",
    "InvalidTariffCell",
    "Tier",
    "TariffTable",
    "TariffQuery",
    "TierSelection",
    "TariffResult",
    "TIER_METHODS",
    "read_tariff_file",
    "resolve",
    "parse_tiers",
    "select_tier",
]
