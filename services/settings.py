"""
Portal settings.

Lookup order per setting: environment variable → Streamlit secrets → default.
Invalid values fall back to the default.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from tariffs.models import DEFAULT_TIER_METHOD, TIER_METHODS, WEIGHT_UNITS
from tariffs.parsing import DEFAULT_SURCHARGE, parse_number

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    tariff_file: Optional[Path] = None
    default_surcharge: float = DEFAULT_SURCHARGE
    default_method: str = DEFAULT_TIER_METHOD
    default_unit: str = "kg"
    log_level: str = "INFO"


def get_setting(name: str) -> Optional[str]:
    """Get a setting from the environment or Streamlit secrets."""
    value = os.environ.get(name)
    if value:
        return value
    try:
        import streamlit as st
        if not st.secrets.load_if_toml_exists():
            return None
        secret = st.secrets.get(name)
    except Exception:
        # No secrets.toml, or not running under Streamlit
        return None
    return None if secret in (None, "") else str(secret)


def load_settings() -> Settings:
    """Read all portal settings."""
    tariff_file = get_setting("TARIFF_FILE")

    surcharge = parse_number(get_setting("TARIFF_DEFAULT_SURCHARGE"))
    if surcharge is None or surcharge < 0:
        surcharge = DEFAULT_SURCHARGE

    method = (get_setting("TARIFF_DEFAULT_METHOD") or "").strip().lower()
    if method not in TIER_METHODS:
        method = DEFAULT_TIER_METHOD

    unit = (get_setting("TARIFF_DEFAULT_UNIT") or "").strip().lower()
    if unit not in WEIGHT_UNITS:
        unit = "kg"

    log_level = (get_setting("LOG_LEVEL") or "").strip().upper()
    if log_level not in LOG_LEVELS:
        log_level = "INFO"

    return Settings(
        tariff_file=Path(tariff_file).expanduser() if tariff_file else None,
        default_surcharge=float(surcharge),
        default_method=method,
        default_unit=unit,
        log_level=log_level,
    )
