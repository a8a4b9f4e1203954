"""
Command-line tariff quote.

Usage:
    tariff-quote data/sample_tariffs.xlsx --postcode 10115 --weight 12.5 --unit ton
    python -m tariffs.cli tariffs.csv --postcode 50667 --weight 8200 --method interp
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from services.logging_config import configure_logging
from services.settings import load_settings
from tariffs.errors import TariffError
from tariffs.exporters.rows import result_rows
from tariffs.loader import read_tariff_file
from tariffs.models import TIER_METHODS, WEIGHT_UNITS, TariffQuery
from tariffs.resolver import resolve


def build_parser() -> argparse.ArgumentParser:
    settings = load_settings()
    parser = argparse.ArgumentParser(
        prog="tariff-quote",
        description="Look up the delivery cost for a postcode and weight in a tariff spreadsheet.",
    )
    parser.add_argument("file", nargs="?", default=settings.tariff_file,
                        help="Tariff spreadsheet (.xlsx, .csv); defaults to TARIFF_FILE")
    parser.add_argument("--postcode", required=True)
    parser.add_argument("--weight", required=True)
    parser.add_argument("--unit", choices=WEIGHT_UNITS, default=settings.default_unit)
    parser.add_argument("--method", choices=TIER_METHODS, default=settings.default_method)
    parser.add_argument("--deliveries", default="1")
    parser.add_argument("--surcharge", default=f"{settings.default_surcharge:g}",
                        help="Surcharge per delivery in EUR")
    parser.add_argument("--log-level", default=settings.log_level)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the quote; returns the process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level.upper())

    if not args.file:
        print("❌ No tariff file given (pass FILE or set TARIFF_FILE).", file=sys.stderr)
        return 2

    query = TariffQuery(
        postcode=args.postcode,
        weight=args.weight,
        unit=args.unit,
        deliveries=args.deliveries,
        surcharge=args.surcharge,
        method=args.method,
    )

    try:
        table = read_tariff_file(args.file)
        result = resolve(table, query, default_surcharge=load_settings().default_surcharge)
    except TariffError as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return 1

    rows = result_rows(result, table.source_name)
    width = max(len(label) for label, _ in rows)
    for label, value in rows:
        print(f"{label:<{width}}  {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
