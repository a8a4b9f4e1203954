"""User-facing tariff lookup errors."""

from __future__ import annotations


class TariffError(Exception):
    """Base class for every failure the portal can show to the user."""

    default_message = "The tariff could not be calculated."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class UnreadableFile(TariffError):
    """Raised when an uploaded file cannot be parsed."""
    default_message = "Could not read the spreadsheet. Check the format and try again."


class EmptyTable(TariffError):
    """Raised when an uploaded file has no data rows."""
    default_message = "The file does not seem to contain any rows."


class MissingTable(TariffError):
    """Raised when a lookup is requested before any table was loaded."""
    default_message = "Upload a tariff spreadsheet first."


class InvalidPostcode(TariffError):
    default_message = "Enter a valid postcode (at least 2 digits)."


class InvalidWeight(TariffError):
    default_message = "Enter a valid weight (greater than 0)."


class NoMatchingRow(TariffError):
    """Raised when no table row shares the postcode prefix."""

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(f"No row found for prefix {prefix}.")


class NoTierColumns(TariffError):
    default_message = "No tier columns found (expected: 1 ton, 2 ton, …)."


class InvalidTariffCell(TariffError):
    """Raised when a tier cell is empty or not a number."""

    def __init__(self, column: str | None = None):
        self.column = column
        message = "Empty or invalid tier tariff in the spreadsheet"
        message += f" (column '{column}')." if column else "."
        super().__init__(message)
