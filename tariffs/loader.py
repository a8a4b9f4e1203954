"""
Tariff spreadsheet loader.

Input:
- .xlsx / .xlsm (openpyxl) or .csv (";", tab or "," delimited)
- First sheet only, first row is the header
- Columns: "Postcode" plus tier columns "1 ton", "2 ton", … (value = fixed
  tariff per delivery)

Output:
- TariffTable with every cell as text and the tiers parsed from the header
"""

from __future__ import annotations
import io
import logging
from pathlib import Path
from typing import Any, BinaryIO, Optional, Union

import pandas as pd

from .errors import EmptyTable, UnreadableFile
from .models import TariffTable

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = (".xlsx", ".xlsm")
CSV_SUFFIXES = (".csv",)
SUPPORTED_SUFFIXES = EXCEL_SUFFIXES + CSV_SUFFIXES

Source = Union[str, Path, bytes, BinaryIO]


# ============================================================================
# PUBLIC API
# ============================================================================

def read_tariff_file(source: Source, filename: Optional[str] = None) -> TariffTable:
    """
    Read a tariff spreadsheet into a TariffTable.

    Args:
        source: Path, raw bytes, or binary file-like (e.g. Streamlit UploadedFile)
        filename: Name used to pick the format; defaults to source.name / the path

    Returns:
        TariffTable (may have no tiers; lookups then fail with NoTierColumns)

    Raises:
        UnreadableFile: If the format is unsupported or parsing fails
        EmptyTable: If the sheet has no data rows
    """
    name = filename or _source_name(source)
    suffix = Path(name).suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise UnreadableFile(
            f"Unsupported file type '{suffix or name}'. Upload an .xlsx or .csv file."
        )

    try:
        data = _read_bytes(source)
        if not data.strip():
            raise EmptyTable()
        df = _read_csv(data) if suffix in CSV_SUFFIXES else _read_excel(data)
    except EmptyTable:
        raise
    except pd.errors.EmptyDataError as e:
        raise EmptyTable() from e
    except Exception as e:
        logger.exception("Could not read tariff file %s", name)
        raise UnreadableFile() from e

    df = _normalize_frame(df)
    if df.empty:
        raise EmptyTable()

    table = TariffTable.from_records(
        df.to_dict(orient="records"),
        columns=list(df.columns),
        source_name=Path(name).name,
    )

    logger.info(
        "Loaded tariff file %s: %d rows, tiers %s",
        table.source_name, len(table.rows), [t.tons for t in table.tiers],
    )
    if not table.tiers:
        logger.warning("No tier columns found in %s (columns: %s)", table.source_name, table.columns)

    return table


# ============================================================================
# READERS
# ============================================================================

def _source_name(source: Source) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return str(getattr(source, "name", "") or "")


def _read_bytes(source: Source) -> bytes:
    if isinstance(source, bytes):
        return source
    if isinstance(source, (str, Path)):
        return Path(source).read_bytes()
    if hasattr(source, "seek"):
        source.seek(0)
    return source.read()


def _read_csv(data: bytes) -> pd.DataFrame:
    """Read CSV text; UTF-8 first, Latin-1 as fallback."""
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError:
        text = data.decode("latin-1")
    return pd.read_csv(
        io.StringIO(text),
        sep=_detect_delimiter(text),
        dtype=str,
        keep_default_na=False,
    )


def _detect_delimiter(text: str) -> str:
    """';' (Excel in nl/de locales), tab, or ',' judged from the header line."""
    header = text.splitlines()[0] if text else ""
    if header.count(";") and header.count(";") >= header.count(","):
        return ";"
    if "\t" in header:
        return "\t"
    return ","


def _read_excel(data: bytes) -> pd.DataFrame:
    return pd.read_excel(
        io.BytesIO(data),
        sheet_name=0,
        dtype=str,
        keep_default_na=False,
        engine="openpyxl",
    )


def _normalize_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Text cells, stripped headers, no fully blank rows."""
    df = df.copy()
    df.columns = [str(c).strip() for c in df.columns]
    df = df.fillna("").astype(str)
    if df.empty:
        return df
    blank = df.apply(lambda col: col.str.strip() == "").all(axis=1)
    return df.loc[~blank].reset_index(drop=True)


def table_summary(table: TariffTable) -> dict[str, Any]:
    """Short description of a loaded table, for the upload panel and the CLI."""
    return {
        "file": table.source_name or "(unnamed)",
        "rows": len(table.rows),
        "tiers": [t.column for t in table.tiers],
    }
